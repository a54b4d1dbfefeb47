"""Path engine backed by skia-pathops.

Segments are immutable ``Segment`` tuples until they are joined; joined and
composite paths are ``pathops.Path`` objects. ``pathops.Path`` is mutable, so
every method works on a copy and leaves its arguments untouched.
"""

import math
from collections.abc import Sequence
from enum import Enum
from typing import Any, NamedTuple

from pathops import OpBuilder, Path, PathOp, PathOpsError, op

from pathcompose.domain import Bounds, Point
from pathcompose.exceptions import EngineFailure

# Cubic approximation of a quarter circle
KAPPA = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0


class SegmentKind(str, Enum):
    """Kind of a single drawing segment."""

    LINE = "line"
    CUBIC = "cubic"
    QUAD = "quad"


class Segment(NamedTuple):
    """One drawing segment: a start point followed by its remaining points."""

    kind: SegmentKind
    points: tuple[Point, ...]

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]


def _point(p: Point) -> Point:
    return (float(p[0]), float(p[1]))


class SkiaPathEngine:
    """``PathEngine`` implementation on top of skia-pathops.

    Example:
        engine = SkiaPathEngine()
        a = engine.circle((0, 0), 10)
        b = engine.circle((5, 0), 10)
        both = engine.unite([a, b])
    """

    def __init__(self, fix_winding: bool = True, keep_starting_points: bool = True) -> None:
        """Initialize the engine.

        Args:
            fix_winding: Normalize contour directions in boolean results
            keep_starting_points: Preserve contour start points where possible
        """
        self._fix_winding = fix_winding
        self._keep_starting_points = keep_starting_points

    def line(self, p0: Point, p1: Point) -> Segment:
        return Segment(SegmentKind.LINE, (_point(p0), _point(p1)))

    def cubic_bezier(self, p0: Point, c1: Point, c2: Point, p1: Point) -> Segment:
        return Segment(SegmentKind.CUBIC, (_point(p0), _point(c1), _point(c2), _point(p1)))

    def quadratic_bezier(self, p0: Point, c: Point, p1: Point) -> Segment:
        return Segment(SegmentKind.QUAD, (_point(p0), _point(c), _point(p1)))

    def join(self, segments: Sequence[Segment]) -> Path:
        """Draw segments into one open path.

        A new subpath is started whenever a segment does not begin where the
        previous one ended.
        """
        path = Path()
        current: Point | None = None

        for segment in segments:
            if current is None or segment.start != current:
                path.moveTo(*segment.start)

            if segment.kind is SegmentKind.LINE:
                path.lineTo(*segment.end)
            elif segment.kind is SegmentKind.CUBIC:
                (_, c1, c2, p1) = segment.points
                path.cubicTo(c1[0], c1[1], c2[0], c2[1], p1[0], p1[1])
            else:
                (_, c, p1) = segment.points
                path.quadTo(c[0], c[1], p1[0], p1[1])

            current = segment.end

        return path

    def close(self, path: Path, fuse: bool = False, group: int = -1) -> Path:
        """Close the last subpath of a copy of ``path``.

        Skia already treats a closing point that coincides with the start as
        the start itself, so ``fuse`` needs no extra work; ``group`` has no
        skia equivalent.
        """
        closed = Path(path)
        closed.close()
        return closed

    def bounds(self, path: Path) -> Bounds:
        x_min, y_min, x_max, y_max = path.bounds
        return ((x_min, y_min), (x_max, y_max))

    def unite(self, paths: Sequence[Path]) -> Path:
        builder = OpBuilder(
            fix_winding=self._fix_winding,
            keep_starting_points=self._keep_starting_points,
        )
        for path in paths:
            builder.add(path, PathOp.UNION)

        try:
            return builder.resolve()
        except PathOpsError as e:
            raise EngineFailure("unite", str(e)) from e

    def subtract(self, path: Path, subtrahends: Sequence[Path]) -> Path:
        if not subtrahends:
            return Path(path)

        clip = subtrahends[0] if len(subtrahends) == 1 else self.unite(subtrahends)

        try:
            return op(
                path,
                clip,
                PathOp.DIFFERENCE,
                fix_winding=self._fix_winding,
                keep_starting_points=self._keep_starting_points,
            )
        except PathOpsError as e:
            raise EngineFailure("subtract", str(e)) from e

    def empty(self) -> Path:
        return Path()

    def contour_count(self, path: Any) -> int:
        if not isinstance(path, Path):
            return 0
        return sum(1 for _ in path.contours)

    def circle(self, center: Point, radius: float, clockwise: bool = True) -> Path:
        """Build a closed circle from four cubic arcs.

        ``clockwise`` refers to the y-down frame, where clockwise contours
        are solids.

        Args:
            center: Circle center
            radius: Circle radius (zero gives the empty path)
            clockwise: Drawing direction

        Returns:
            Closed circle path
        """
        if radius <= 0:
            return self.empty()

        cx, cy = center
        k = radius * KAPPA
        # right, bottom, left, top; in y-down this order is clockwise
        quadrants = [
            ((cx + radius, cy), (cx + radius, cy + k), (cx + k, cy + radius), (cx, cy + radius)),
            ((cx, cy + radius), (cx - k, cy + radius), (cx - radius, cy + k), (cx - radius, cy)),
            ((cx - radius, cy), (cx - radius, cy - k), (cx - k, cy - radius), (cx, cy - radius)),
            ((cx, cy - radius), (cx + k, cy - radius), (cx + radius, cy - k), (cx + radius, cy)),
        ]
        if not clockwise:
            quadrants = [tuple(reversed(q)) for q in reversed(quadrants)]

        segments = [self.cubic_bezier(*q) for q in quadrants]
        return self.close(self.join(segments))

    def rectangle(self, top_left: Point, bottom_right: Point, clockwise: bool = True) -> Path:
        """Build a closed axis-aligned rectangle.

        Args:
            top_left: Minimum corner
            bottom_right: Maximum corner
            clockwise: Drawing direction in the y-down frame

        Returns:
            Closed rectangle path
        """
        (x0, y0), (x1, y1) = top_left, bottom_right
        corners = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
        if not clockwise:
            corners.reverse()

        segments = [
            self.line(corners[i], corners[(i + 1) % len(corners)])
            for i in range(len(corners))
        ]
        return self.close(self.join(segments))
