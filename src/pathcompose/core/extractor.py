"""Contour extraction from outline command streams.

Drawing commands accumulate engine segments into a pending list while the
pen position advances. A Close, or a MoveTo that starts a new subpath while
segments are pending (some outline sources never emit Close), finalizes the
pending list into one closed Contour.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from pathcompose.config import GeometryConfig
from pathcompose.core.metrics import measure_contour
from pathcompose.domain import (
    Close,
    CommandType,
    Contour,
    CubicTo,
    LineTo,
    MoveTo,
    OutlineCommand,
    Point,
    QuadTo,
    command_from_mapping,
)
from pathcompose.engine import PathEngine
from pathcompose.exceptions import MalformedInputError

_COMMAND_TYPES = (MoveTo, LineTo, CubicTo, QuadTo, Close)


def as_command(raw: Any) -> OutlineCommand:
    """Normalize a typed command or an opentype.js-style mapping.

    Raises:
        MalformedInputError: If ``raw`` is neither
    """
    if isinstance(raw, _COMMAND_TYPES):
        return raw
    if isinstance(raw, Mapping):
        return command_from_mapping(raw)
    raise MalformedInputError(f"unsupported command object {type(raw).__name__}")


def _is_move(raw: Any) -> bool:
    return isinstance(raw, Mapping) and raw.get("type") == CommandType.MOVE_TO.value


def _fallback_position(raw: Any, position: Point) -> Point:
    """Pen position after a command that could not be drawn.

    A curve command without control points still moves the pen to its end
    point when it carries one.
    """
    if not isinstance(raw, Mapping):
        return position

    x, y = raw.get("x"), raw.get("y")
    if isinstance(x, int | float) and isinstance(y, int | float):
        return (float(x), float(y))
    return position


class ContourExtractor:
    """Turns an outline command stream into closed contours.

    The extractor holds no state between calls.

    Example:
        extractor = ContourExtractor(SkiaPathEngine())
        contours = extractor.extract([MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), Close()])
    """

    def __init__(
        self,
        engine: PathEngine,
        config: GeometryConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            engine: Engine that builds segments and closed paths
            config: Geometry settings (close options)
            logger: Logger for skipped commands
        """
        self._engine = engine
        self._config = config or GeometryConfig()
        self._logger = logger or structlog.get_logger(__name__)

    def extract(self, commands: Iterable[Any]) -> list[Contour]:
        """Extract closed contours in source order.

        Args:
            commands: Outline commands (typed or mappings); None entries are skipped

        Returns:
            List of contours, empty if no segment was drawn
        """
        contours: list[Contour] = []
        pending: list[Any] = []
        anchors: list[Point] = []
        position: Point = (0.0, 0.0)

        for raw in commands:
            if raw is None:
                continue

            try:
                command = as_command(raw)
            except MalformedInputError as e:
                self._logger.warning("Unknown command type", command=repr(raw), reason=e.reason)
                # A move ends the current subpath even without coordinates
                if _is_move(raw) and pending:
                    contours.append(self._finalize(pending, anchors))
                    pending, anchors = [], []
                position = _fallback_position(raw, position)
                continue

            if isinstance(command, MoveTo):
                if pending:
                    contours.append(self._finalize(pending, anchors))
                    pending, anchors = [], []
                position = command.end
                continue

            if isinstance(command, Close):
                if pending:
                    contours.append(self._finalize(pending, anchors))
                    pending, anchors = [], []
                continue

            if isinstance(command, LineTo):
                segment = self._engine.line(position, command.end)
            elif isinstance(command, CubicTo):
                segment = self._engine.cubic_bezier(
                    position,
                    (command.x1, command.y1),
                    (command.x2, command.y2),
                    command.end,
                )
            else:
                segment = self._engine.quadratic_bezier(
                    position,
                    (command.x1, command.y1),
                    command.end,
                )

            if not anchors:
                anchors.append(position)
            anchors.append(command.end)
            pending.append(segment)
            position = command.end

        if pending:
            contours.append(self._finalize(pending, anchors))

        self._logger.debug("Contours extracted", count=len(contours))
        return contours

    def _finalize(self, segments: list[Any], anchors: list[Point]) -> Contour:
        path = self._engine.close(
            self._engine.join(segments),
            fuse=self._config.fuse_on_close,
            group=self._config.close_group,
        )

        if len(anchors) > 1 and anchors[-1] == anchors[0]:
            anchors = anchors[:-1]

        return measure_contour(self._engine, path, anchors)
