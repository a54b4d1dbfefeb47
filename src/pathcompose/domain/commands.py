"""Outline command types.

This module defines the drawing commands consumed by the contour extractor:
- MoveTo: Start a new subpath at an absolute position
- LineTo: Straight segment from the pen position
- CubicTo: Cubic Bezier segment from the pen position
- QuadTo: Quadratic Bezier segment from the pen position
- Close: Close the current subpath

All coordinates are absolute, in a y-down frame.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pathcompose.exceptions import MalformedInputError

Point = tuple[float, float]


class CommandType(str, Enum):
    """Outline command tag, using the single-letter SVG/opentype.js names."""

    MOVE_TO = "M"
    LINE_TO = "L"
    CUBIC_TO = "C"
    QUAD_TO = "Q"
    CLOSE = "Z"


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Move the pen without drawing.

    Attributes:
        x: X coordinate of the new pen position
        y: Y coordinate of the new pen position
    """

    x: float
    y: float
    type: ClassVar[CommandType] = CommandType.MOVE_TO

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class LineTo:
    """Draw a straight line to (x, y)."""

    x: float
    y: float
    type: ClassVar[CommandType] = CommandType.LINE_TO

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Draw a cubic Bezier curve to (x, y).

    Attributes:
        x1: X of the first control point
        y1: Y of the first control point
        x2: X of the second control point
        y2: Y of the second control point
        x: X of the end point
        y: Y of the end point
    """

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    type: ClassVar[CommandType] = CommandType.CUBIC_TO

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Draw a quadratic Bezier curve to (x, y) through control (x1, y1)."""

    x1: float
    y1: float
    x: float
    y: float
    type: ClassVar[CommandType] = CommandType.QUAD_TO

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath."""

    type: ClassVar[CommandType] = CommandType.CLOSE


OutlineCommand = MoveTo | LineTo | CubicTo | QuadTo | Close


def _coord(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if not isinstance(value, int | float) or isinstance(value, bool):
        raise MalformedInputError(f"command '{data.get('type')}' is missing '{key}'")
    return float(value)


def command_from_mapping(data: Mapping[str, Any]) -> OutlineCommand:
    """Convert an opentype.js-style command mapping to a typed command.

    Mappings look like ``{"type": "C", "x1": .., "y1": .., "x2": .., "y2": ..,
    "x": .., "y": ..}``.

    Args:
        data: Mapping with a single-letter ``type`` and its coordinates

    Returns:
        The typed outline command

    Raises:
        MalformedInputError: If the type is unknown or a coordinate is missing
    """
    try:
        command_type = CommandType(data.get("type"))
    except ValueError:
        raise MalformedInputError(f"unknown command type {data.get('type')!r}") from None

    if command_type is CommandType.MOVE_TO:
        return MoveTo(_coord(data, "x"), _coord(data, "y"))
    if command_type is CommandType.LINE_TO:
        return LineTo(_coord(data, "x"), _coord(data, "y"))
    if command_type is CommandType.CUBIC_TO:
        return CubicTo(
            _coord(data, "x1"),
            _coord(data, "y1"),
            _coord(data, "x2"),
            _coord(data, "y2"),
            _coord(data, "x"),
            _coord(data, "y"),
        )
    if command_type is CommandType.QUAD_TO:
        return QuadTo(
            _coord(data, "x1"),
            _coord(data, "y1"),
            _coord(data, "x"),
            _coord(data, "y"),
        )
    return Close()
