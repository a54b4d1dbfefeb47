"""Composition decision types.

- Relation: Bounding-box relation between the accumulator and the next contour
- Operation: Boolean operation applied to merge a contour
- DecisionRecord: Structured trace of one composition step
"""

from collections.abc import Callable
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Relation(str, Enum):
    """Bounding-box relation of a contour to the accumulator."""

    INDEPENDENT = "INDEPENDENT"
    CONTAINED = "CONTAINED"
    OVERLAP = "OVERLAP"


class Operation(str, Enum):
    """Boolean operation used to merge a contour into the accumulator."""

    UNITE = "UNITE"
    SUBTRACT = "SUBTRACT"


@dataclass(frozen=True)
class DecisionRecord:
    """One step of sequential composition.

    Attributes:
        index: Position of the contour in area-ranked order (1 = first merged)
        relation: Bounding-box relation to the accumulator
        accumulator_area: Ranking area of the accumulator before the step
        contour_area: Ranking area of the merged contour
        accumulator_winding: Tracked winding of the accumulator
        contour_winding: Winding of the merged contour
        contained: Outcome of the confirmatory subtraction (None if not run)
        operation: Operation chosen by the selector
        applied: False when the result was rejected and the accumulator kept
        reason: Short human-readable explanation of the choice
    """

    index: int
    relation: Relation
    accumulator_area: float
    contour_area: float
    accumulator_winding: float
    contour_winding: float
    contained: bool | None
    operation: Operation
    applied: bool
    reason: str

    @property
    def area_ratio(self) -> float:
        """Contour area relative to the accumulator area."""
        if self.accumulator_area == 0:
            return 0.0
        return self.contour_area / self.accumulator_area

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a flat dictionary suitable for structured logging.

        Returns:
            Dictionary of all fields plus ``area_ratio``
        """
        data = asdict(self)
        data["relation"] = self.relation.value
        data["operation"] = self.operation.value
        data["area_ratio"] = self.area_ratio
        return data


DecisionObserver = Callable[[DecisionRecord], None]
