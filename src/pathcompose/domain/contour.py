"""Contour types produced by the extractor.

This module defines:
- Bounds: Axis-aligned bounding box ``((min_x, min_y), (max_x, max_y))``
- is_hole_winding: The hole rule for signed windings
- WindingDirection: Enum for contour winding direction
- Contour: One closed sub-path with its derived metrics
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from pathcompose.domain.commands import Point

Bounds = tuple[Point, Point]

EMPTY_BOUNDS: Bounds = ((0.0, 0.0), (0.0, 0.0))


def is_hole_winding(winding: float) -> bool:
    """Check whether a signed winding marks a hole (zero counts as solid)."""
    return winding > 0


class WindingDirection(Enum):
    """Contour winding direction in the y-down frame.

    - CLOCKWISE contours (negative winding) are solids
    - COUNTER_CLOCKWISE contours (positive winding) are hole candidates
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    @classmethod
    def from_winding(cls, winding: float) -> "WindingDirection":
        """Classify a signed winding value.

        Zero winding (degenerate contour) is reported as clockwise, so it is
        never mistaken for a hole.
        """
        return cls.COUNTER_CLOCKWISE if is_hole_winding(winding) else cls.CLOCKWISE


@dataclass(frozen=True, slots=True)
class Contour:
    """A closed contour extracted from an outline command stream.

    Metrics are computed once at extraction and never re-derived.

    Attributes:
        path: Engine handle for the closed contour
        anchors: On-curve anchor points in drawing order (control points excluded)
        area: Bounding-box area, used only for ranking
        winding: Signed orientation (negative = solid, positive = hole)
        bounds: Engine-reported bounding box
    """

    path: Any
    anchors: tuple[Point, ...]
    area: float
    winding: float
    bounds: Bounds

    @property
    def direction(self) -> WindingDirection:
        """Winding direction derived from the sign of ``winding``."""
        return WindingDirection.from_winding(self.winding)

    @property
    def is_hole(self) -> bool:
        """True if the contour's own winding marks it as a hole."""
        return is_hole_winding(self.winding)

    def to_dict(self) -> dict[str, Any]:
        """Summarize the contour metrics (the engine handle is omitted).

        Returns:
            Dictionary with anchor count, area, winding, direction and bounds
        """
        return {
            "anchors": len(self.anchors),
            "area": self.area,
            "winding": self.winding,
            "direction": self.direction.name,
            "bounds": [list(self.bounds[0]), list(self.bounds[1])],
        }
