"""Operation selection: decide whether a contour is united or subtracted.

Bounding-box containment alone cannot tell a hole from a solid that merely
sits inside the accumulator's box, and the engine has no containment query.
A contained contour is therefore confirmed with a trial subtraction: the
contour is a real hole only if subtracting it increases the accumulator's
contour count.
"""

from collections.abc import Callable
from typing import Any, NamedTuple

import structlog

from pathcompose.domain import Contour, Operation, Relation, is_hole_winding
from pathcompose.engine import PathEngine
from pathcompose.exceptions import EngineFailure


class Selection(NamedTuple):
    """Outcome of one operation decision.

    Attributes:
        operation: Operation to apply
        contained: Result of the confirmatory subtraction (None if not run)
        assumed: True if the confirmation failed and containment was assumed
        reason: Short explanation of the choice
    """

    operation: Operation
    contained: bool | None
    assumed: bool
    reason: str


class Containment(NamedTuple):
    """Result of a confirmatory subtraction."""

    contained: bool
    assumed: bool


def windings_match(a: float, b: float) -> bool:
    """Check whether two windings are on the same side (zero counts as solid)."""
    return is_hole_winding(a) == is_hole_winding(b)


def _select(
    accumulator_winding: float,
    next_winding: float,
    relation: Relation,
    confirm_containment: Callable[[], Containment],
) -> Selection:
    if relation is Relation.INDEPENDENT:
        return Selection(Operation.UNITE, None, False, "independent paths")

    if relation is Relation.OVERLAP:
        # Protrusion past the accumulator is taken as solid intent
        return Selection(Operation.UNITE, None, False, "overlapping paths")

    containment = confirm_containment()
    if not containment.contained:
        return Selection(
            Operation.UNITE,
            False,
            False,
            "contained by bounds but not inside the fill",
        )

    if not windings_match(accumulator_winding, next_winding):
        return Selection(
            Operation.SUBTRACT,
            True,
            containment.assumed,
            "fully contained, opposite winding",
        )

    if is_hole_winding(next_winding):
        return Selection(
            Operation.SUBTRACT,
            True,
            containment.assumed,
            "fully contained, same winding, contour is a hole",
        )

    return Selection(
        Operation.UNITE,
        True,
        containment.assumed,
        "fully contained, same winding, contour is solid",
    )


def select_operation(
    accumulator_winding: float,
    next_winding: float,
    relation: Relation,
    confirm_containment: Callable[[], bool],
) -> Operation:
    """Choose UNITE or SUBTRACT for the next contour.

    Args:
        accumulator_winding: Tracked winding of the accumulator
        next_winding: Winding of the contour being merged
        relation: Bounding-box relation of the contour to the accumulator
        confirm_containment: Called only for CONTAINED; returns True when the
            contour really carves a hole in the accumulator

    Returns:
        The operation to apply
    """
    return _select(
        accumulator_winding,
        next_winding,
        relation,
        lambda: Containment(confirm_containment(), False),
    ).operation


class OperationSelector:
    """Selects the boolean operation for each contour against the engine.

    The selector is stateless between calls.
    """

    def __init__(
        self,
        engine: PathEngine,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the selector.

        Args:
            engine: Engine used for the confirmatory subtraction
            logger: Logger for fallback warnings
        """
        self._engine = engine
        self._logger = logger or structlog.get_logger(__name__)

    def confirm_containment(self, accumulator: Any, contour: Contour) -> Containment:
        """Run a trial subtraction to check that a contour carves a hole.

        Args:
            accumulator: Current composite path
            contour: Contour whose bounds lie within the accumulator's

        Returns:
            Containment; ``assumed`` is set when the engine failed and the
            contour is treated as a hole without proof
        """
        before = self._engine.contour_count(accumulator)

        try:
            trial = self._engine.subtract(accumulator, [contour.path])
        except EngineFailure as e:
            self._logger.warning(
                "Containment check failed, assuming hole",
                operation=e.operation,
                error=e.reason,
            )
            return Containment(contained=True, assumed=True)

        after = self._engine.contour_count(trial)
        if after == 0:
            return Containment(contained=False, assumed=False)

        return Containment(contained=after > before, assumed=False)

    def decide(
        self,
        accumulator: Any,
        accumulator_winding: float,
        contour: Contour,
        relation: Relation,
    ) -> Selection:
        """Decide how to merge ``contour`` into ``accumulator``.

        Args:
            accumulator: Current composite path
            accumulator_winding: Tracked winding of the accumulator
            contour: Contour being merged
            relation: Bounding-box relation of the contour to the accumulator

        Returns:
            Selection with the operation and the reasoning behind it
        """
        return _select(
            accumulator_winding,
            contour.winding,
            relation,
            lambda: self.confirm_containment(accumulator, contour),
        )
