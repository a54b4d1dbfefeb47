"""Domain models for pathcompose.

This module contains the value types exchanged between the extractor, the
composer and the path algebra. All models are immutable (frozen dataclasses
or enums) and independent of any particular path engine; engine handles are
carried as opaque values.

Key classes:
- MoveTo, LineTo, CubicTo, QuadTo, Close: Outline commands
- Contour: A closed contour with its ranking area, winding and bounds
- Relation, Operation: Composition decision enums
- DecisionRecord: Structured trace of one composition step
"""

from pathcompose.domain.commands import (
    Close,
    CommandType,
    CubicTo,
    LineTo,
    MoveTo,
    OutlineCommand,
    Point,
    QuadTo,
    command_from_mapping,
)
from pathcompose.domain.contour import (
    EMPTY_BOUNDS,
    Bounds,
    Contour,
    WindingDirection,
    is_hole_winding,
)
from pathcompose.domain.decision import DecisionObserver, DecisionRecord, Operation, Relation

__all__: list[str] = [
    # Enums
    "CommandType",
    "Operation",
    "Relation",
    "WindingDirection",
    # Commands
    "Close",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "OutlineCommand",
    "QuadTo",
    "command_from_mapping",
    # Core types
    "EMPTY_BOUNDS",
    "Bounds",
    "Contour",
    "DecisionObserver",
    "DecisionRecord",
    "Point",
    # Rules
    "is_hole_winding",
]
