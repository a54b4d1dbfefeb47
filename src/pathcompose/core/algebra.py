"""Path algebra: intersect, subtract, unite, exclude and overlap test.

The engine only offers union and subtraction and fails on some degenerate
inputs, so each operation here adds input validation, empty-result handling
and recovery from ``EngineFailure``:

- Intersection is computed as ``A - (A - B)``. An empty first difference
  means A lies inside B, so A is the intersection. When the engine fails, a
  union check tells total overlap (the union has as many contours as A) from
  total disjointness.
- Symmetric difference is ``(A | B) - (A & B)``.
- Invalid input (None, or a path without contours) gives the empty path and
  a warning, never an exception.

Exceptions other than ``EngineFailure`` propagate.
"""

from typing import Any

import structlog

from pathcompose.config import GeometryConfig
from pathcompose.engine import PathEngine
from pathcompose.exceptions import EngineFailure


class PathAlgebra:
    """Boolean operations on engine paths with defined fallbacks.

    Every method returns a new path (or bool) and never raises for None
    inputs, empty results or engine failures.
    """

    def __init__(
        self,
        engine: PathEngine,
        config: GeometryConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._engine = engine
        self._config = config or GeometryConfig()
        self._logger = logger or structlog.get_logger(__name__)

    def is_valid(self, path: Any) -> bool:
        """Check that a path is present and has at least one contour."""
        return path is not None and self._engine.contour_count(path) > 0

    def _validate(self, operation: str, path_a: Any, path_b: Any) -> bool:
        valid_a = self.is_valid(path_a)
        valid_b = self.is_valid(path_b)
        if not (valid_a and valid_b):
            self._logger.warning(
                "Invalid path input",
                operation=operation,
                path_a_valid=valid_a,
                path_b_valid=valid_b,
            )
            return False
        return True

    def _is_empty(self, path: Any) -> bool:
        return self._engine.contour_count(path) == 0

    def intersect(self, path_a: Any, path_b: Any) -> Any:
        """Area covered by both paths.

        Args:
            path_a: First path
            path_b: Second path

        Returns:
            Intersection, ``path_a`` itself when it lies inside ``path_b``, or
            the empty path
        """
        if not self._validate("intersect", path_a, path_b):
            return self._engine.empty()

        try:
            difference = self._engine.subtract(path_a, [path_b])
            if self._is_empty(difference):
                # Nothing of A lies outside B
                self._logger.debug("First path lies inside second, returning first path")
                return path_a
            intersected = self._engine.subtract(path_a, [difference])
        except EngineFailure as e:
            self._logger.debug("Intersection fell back to union check", error=e.reason)
            return self._resolve_degenerate(path_a, path_b)

        if self._is_empty(intersected):
            return self._engine.empty()
        return intersected

    def _resolve_degenerate(self, path_a: Any, path_b: Any) -> Any:
        """Tell total overlap from total disjointness with a union check."""
        try:
            united = self._engine.unite([path_a, path_b])
        except EngineFailure as e:
            self._logger.warning("Intersection check failed, returning empty path", error=e.reason)
            return self._engine.empty()

        if self._engine.contour_count(united) == self._engine.contour_count(path_a):
            self._logger.debug("Paths fully overlap, returning first path")
            return path_a

        self._logger.debug("Paths do not overlap, returning empty path")
        return self._engine.empty()

    def subtract(self, path_a: Any, path_b: Any) -> Any:
        """Area of ``path_a`` not covered by ``path_b``.

        Returns:
            Difference, or the empty path on failure or empty result
        """
        if not self._validate("subtract", path_a, path_b):
            return self._engine.empty()

        try:
            result = self._engine.subtract(path_a, [path_b])
        except EngineFailure as e:
            self._logger.warning("Subtraction failed, returning empty path", error=e.reason)
            return self._engine.empty()

        if self._is_empty(result):
            return self._engine.empty()
        return result

    def unite(self, path_a: Any, path_b: Any) -> Any:
        """Area covered by either path.

        Returns:
            Union, or the empty path on failure or empty result
        """
        if not self._validate("unite", path_a, path_b):
            return self._engine.empty()

        try:
            result = self._engine.unite([path_a, path_b])
        except EngineFailure as e:
            self._logger.warning("Union failed, returning empty path", error=e.reason)
            return self._engine.empty()

        if self._is_empty(result):
            self._logger.warning("Union resulted in empty path")
            return self._engine.empty()
        return result

    def exclude(self, path_a: Any, path_b: Any) -> Any:
        """Area covered by exactly one of the paths.

        Returns:
            Symmetric difference; the union when the paths do not overlap;
            the empty path when they overlap completely
        """
        if not self._validate("exclude", path_a, path_b):
            return self._engine.empty()

        united = self.unite(path_a, path_b)
        if self._is_empty(united):
            return self._engine.empty()

        intersected = self.intersect(path_a, path_b)
        if self._is_empty(intersected):
            return united

        try:
            excluded = self._engine.subtract(united, [intersected])
        except EngineFailure as e:
            self._logger.warning("Intersection matches union, returning empty path", error=e.reason)
            return self._engine.empty()

        if self._is_empty(excluded):
            return self._engine.empty()
        return excluded

    def overlaps(self, path_a: Any, path_b: Any) -> bool:
        """Check whether two paths share an area of positive width and height.

        Tangent paths (touching along an edge or at a point) do not overlap.
        """
        if not self._validate("overlaps", path_a, path_b):
            return False

        intersected = self.intersect(path_a, path_b)
        if self._is_empty(intersected):
            return False

        (min_x, min_y), (max_x, max_y) = self._engine.bounds(intersected)
        epsilon = self._config.overlap_epsilon
        return (max_x - min_x) > epsilon and (max_y - min_y) > epsilon


def create_path_algebra(engine: PathEngine, config: GeometryConfig | None = None) -> PathAlgebra:
    """Create a PathAlgebra bound to ``engine``."""
    return PathAlgebra(engine, config=config)
