"""Converters from fontTools outlines to outline commands.

This module handles the conversion between fontTools drawing output and the
command stream consumed by the composer, including the flip from the
font's y-up design space to the composer's y-down frame.
"""

from typing import Any

from fontTools.misc.transform import Transform
from fontTools.pens.recordingPen import replayRecording
from fontTools.pens.transformPen import TransformPen

from pathcompose.domain import OutlineCommand
from pathcompose.io.pen import OutlineCommandPen


def y_down_transform(x: float = 0.0, y: float = 0.0, scale: float = 1.0) -> Transform:
    """Transform from font units (y-up) to a y-down frame.

    Mirrors opentype.js ``getPath(text, x, y, fontSize)``: the glyph origin
    lands on ``(x, y)`` (the baseline) and glyph coordinates are scaled by
    ``scale`` with the y axis inverted.

    Args:
        x: Horizontal position of the glyph origin
        y: Baseline position
        scale: Font size divided by units per em

    Returns:
        Affine transform for a fontTools TransformPen
    """
    return Transform(scale, 0, 0, -scale, x, y)


def recording_to_commands(
    recording: list[tuple[str, tuple[Any, ...]]],
    transform: Transform | None = None,
) -> list[OutlineCommand]:
    """Convert a RecordingPen recording to outline commands.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic spline
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Args:
        recording: List of drawing commands from RecordingPen
        transform: Optional transform applied to every point

    Returns:
        List of outline commands, one per segment
    """
    pen = OutlineCommandPen()
    target = TransformPen(pen, transform) if transform is not None else pen
    replayRecording(recording, target)
    return pen.commands


def fonttools_glyph_to_commands(
    fonttools_glyph: Any,
    glyph_set: Any = None,
    transform: Transform | None = None,
) -> list[OutlineCommand]:
    """Draw a fontTools glyph into outline commands.

    Components are decomposed through ``glyph_set``.

    Args:
        fonttools_glyph: Glyph object from a fontTools GlyphSet
        glyph_set: GlyphSet used to resolve component references
        transform: Optional transform applied to every point

    Returns:
        List of outline commands
    """
    pen = OutlineCommandPen(glyph_set)
    target = TransformPen(pen, transform) if transform is not None else pen
    fonttools_glyph.draw(target)
    return pen.commands
