"""fontTools pen that records outline commands.

``OutlineCommandPen`` builds on fontTools' ``BasePen``, which already splits
TrueType quadratic splines (including all-off-curve contours) and
multi-segment cubics into single segments, so every recorded command maps
to exactly one engine segment.
"""

from fontTools.pens.basePen import BasePen

from pathcompose.domain import Close, CubicTo, LineTo, MoveTo, OutlineCommand, QuadTo


class OutlineCommandPen(BasePen):
    """Records drawing calls as pathcompose outline commands.

    Example:
        pen = OutlineCommandPen(glyph_set)
        glyph_set["O"].draw(pen)
        path = compose(engine, pen.commands)
    """

    def __init__(self, glyphSet=None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self.commands: list[OutlineCommand] = []

    def _moveTo(self, pt):
        self.commands.append(MoveTo(*pt))

    def _lineTo(self, pt):
        self.commands.append(LineTo(*pt))

    def _curveToOne(self, pt1, pt2, pt3):
        self.commands.append(CubicTo(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1]))

    def _qCurveToOne(self, pt1, pt2):
        self.commands.append(QuadTo(pt1[0], pt1[1], pt2[0], pt2[1]))

    def _closePath(self):
        self.commands.append(Close())

    def _endPath(self):
        # Open contours are filled as if closed
        self.commands.append(Close())
