"""Per-contour metrics: ranking area, signed winding and bounds.

Area is a bounding-box approximation used only to rank contours by size.
Winding is an exact shoelace sum over anchor points only; curve control
points are ignored, so strongly curved or self-intersecting contours can be
misclassified.
"""

from collections.abc import Sequence
from typing import Any

from pathcompose.core.geometry import signed_area
from pathcompose.domain import Bounds, Contour, Point
from pathcompose.engine import PathEngine


def bounds_area(bounds: Bounds) -> float:
    """Width times height of a bounding box, never negative."""
    (min_x, min_y), (max_x, max_y) = bounds
    return max(max_x - min_x, 0.0) * max(max_y - min_y, 0.0)


def contour_bounds(engine: PathEngine, path: Any) -> Bounds:
    """Bounding box of a path, as reported by the engine."""
    return engine.bounds(path)


def contour_area(engine: PathEngine, path: Any) -> float:
    """Ranking area of a path: the area of its bounding box.

    Paths without contours have zero area.
    """
    if engine.contour_count(path) == 0:
        return 0.0
    return bounds_area(engine.bounds(path))


def contour_winding(anchors: Sequence[Point]) -> float:
    """Signed winding of a contour from its anchor points.

    The shoelace sum is sign-inverted because the frame is y-down: a contour
    that is clockwise on screen comes out negative (solid), a
    counter-clockwise one positive (hole candidate).

    Args:
        anchors: On-curve points of the contour in drawing order

    Returns:
        Signed winding value; 0.0 for fewer than three anchors
    """
    return -signed_area(anchors)


def measure_contour(engine: PathEngine, path: Any, anchors: Sequence[Point]) -> Contour:
    """Build a Contour with all metrics computed once.

    Args:
        engine: Engine owning ``path``
        path: Closed contour handle
        anchors: On-curve points of the contour

    Returns:
        Contour with area, winding and bounds
    """
    bounds = contour_bounds(engine, path)
    return Contour(
        path=path,
        anchors=tuple(anchors),
        area=bounds_area(bounds),
        winding=contour_winding(anchors),
        bounds=bounds,
    )
