"""Path engine contract.

The composer and the path algebra never talk to a geometry library
directly; they receive an object satisfying ``PathEngine``. The engine owns
the path representation: every handle passed in or returned is opaque to
the rest of the package.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from pathcompose.domain import Bounds, Point


@runtime_checkable
class PathEngine(Protocol):
    """Primitive path construction, boolean operations and bounds queries.

    Boolean operations raise ``pathcompose.exceptions.EngineFailure`` for
    degenerate inputs the engine cannot resolve. They return new handles and
    never mutate their arguments.
    """

    def line(self, p0: Point, p1: Point) -> Any: ...

    def cubic_bezier(self, p0: Point, c1: Point, c2: Point, p1: Point) -> Any: ...

    def quadratic_bezier(self, p0: Point, c: Point, p1: Point) -> Any: ...

    def join(self, segments: Sequence[Any]) -> Any: ...

    def close(self, path: Any, fuse: bool = False, group: int = -1) -> Any: ...

    def bounds(self, path: Any) -> Bounds: ...

    def unite(self, paths: Sequence[Any]) -> Any: ...

    def subtract(self, path: Any, subtrahends: Sequence[Any]) -> Any: ...

    def empty(self) -> Any: ...

    def contour_count(self, path: Any) -> int: ...
