"""Sequential composition of contours into one composite path.

Contours are ranked by bounding-box area, largest first. The largest seeds
the accumulator and is always treated as solid. Every other contour is
united with or subtracted from the accumulator in turn. A step whose result
is empty, or whose engine call fails, is rolled back: the previous
accumulator is kept and composition moves on to the next contour.

The accumulator's winding is the seed contour's winding for the whole run;
it is never recomputed from the evolving composite.
"""

from collections.abc import Iterable
from operator import attrgetter
from typing import Any

import structlog

from pathcompose.config import GeometryConfig
from pathcompose.core.extractor import ContourExtractor
from pathcompose.core.metrics import contour_area
from pathcompose.core.relation import classify
from pathcompose.core.selector import OperationSelector
from pathcompose.domain import Contour, DecisionObserver, DecisionRecord, Operation
from pathcompose.engine import PathEngine
from pathcompose.exceptions import EngineFailure
from pathcompose.utils import CompositionStats, log_decision


class SequentialComposer:
    """Converts outline commands into one composite path.

    The composer is reentrant: every call works on its own accumulator and
    nothing is shared between calls.

    Example:
        composer = SequentialComposer(SkiaPathEngine())
        path = composer.compose(commands)
    """

    def __init__(
        self,
        engine: PathEngine,
        config: GeometryConfig | None = None,
        observer: DecisionObserver | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            engine: Path engine used for every geometric operation
            config: Geometry settings
            observer: Receives one DecisionRecord per merged contour
                (defaults to debug logging)
            logger: Logger for warnings and summaries
        """
        self._engine = engine
        self._observer = observer or log_decision
        self._logger = logger or structlog.get_logger(__name__)
        self._extractor = ContourExtractor(engine, config=config, logger=self._logger)
        self._selector = OperationSelector(engine, logger=self._logger)

    def compose(
        self,
        commands: Iterable[Any] | None,
        debug_contours: list[Contour] | None = None,
    ) -> Any:
        """Convert an outline command stream into a composite path.

        Args:
            commands: Outline commands (typed or opentype.js-style mappings)
            debug_contours: If given, receives every extracted contour in
                source order

        Returns:
            Composite path; the engine's empty path if nothing was drawn
        """
        if commands is None:
            self._logger.warning("No commands given")
            return self._engine.empty()

        contours = self._extractor.extract(commands)
        if debug_contours is not None:
            debug_contours.extend(contours)

        if not contours:
            self._logger.warning("No paths found in commands")
            return self._engine.empty()

        return self.compose_contours(contours)

    def compose_contours(
        self,
        contours: list[Contour],
        stats: CompositionStats | None = None,
    ) -> Any:
        """Merge already extracted contours into one composite path.

        Args:
            contours: Contours to merge
            stats: If given, updated with per-step counts

        Returns:
            Composite path; the engine's empty path for no contours
        """
        stats = stats if stats is not None else CompositionStats()
        stats.contour_count += len(contours)

        if not contours:
            return self._engine.empty()

        ranked = sorted(contours, key=attrgetter("area"), reverse=True)
        base = ranked[0]
        accumulator = base.path
        accumulator_winding = base.winding

        for index, contour in enumerate(ranked[1:], start=1):
            relation = classify(self._engine.bounds(accumulator), contour.bounds)
            selection = self._selector.decide(
                accumulator, accumulator_winding, contour, relation
            )

            result = self._apply(selection.operation, accumulator, contour)
            record = DecisionRecord(
                index=index,
                relation=relation,
                accumulator_area=contour_area(self._engine, accumulator),
                contour_area=contour.area,
                accumulator_winding=accumulator_winding,
                contour_winding=contour.winding,
                contained=selection.contained,
                operation=selection.operation,
                applied=result is not None,
                reason=selection.reason,
            )
            stats.record(record, assumed=selection.assumed)
            self._observer(record)

            if result is not None:
                accumulator = result

        self._logger.debug("Composition complete", **stats.to_dict())
        return accumulator

    def _apply(self, operation: Operation, accumulator: Any, contour: Contour) -> Any | None:
        """Apply one operation; None means keep the previous accumulator."""
        try:
            if operation is Operation.SUBTRACT:
                result = self._engine.subtract(accumulator, [contour.path])
            else:
                result = self._engine.unite([accumulator, contour.path])
        except EngineFailure as e:
            self._logger.warning(
                "Operation failed, keeping previous result",
                operation=operation.value,
                error=e.reason,
            )
            return None

        if self._engine.contour_count(result) == 0:
            self._logger.warning(
                "Operation resulted in empty path, keeping previous result",
                operation=operation.value,
            )
            return None

        return result


def compose(
    engine: PathEngine,
    commands: Iterable[Any] | None,
    config: GeometryConfig | None = None,
    observer: DecisionObserver | None = None,
    debug_contours: list[Contour] | None = None,
) -> Any:
    """Convert outline commands into a composite path with a one-off composer.

    Args:
        engine: Path engine
        commands: Outline commands
        config: Geometry settings
        observer: Decision observer
        debug_contours: If given, receives every extracted contour

    Returns:
        Composite path; the engine's empty path if nothing was drawn
    """
    composer = SequentialComposer(engine, config=config, observer=observer)
    return composer.compose(commands, debug_contours=debug_contours)
