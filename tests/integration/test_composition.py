"""End-to-end composition of multi-contour outlines.

These tests run command streams through extraction, ranking, operation
selection and the real skia-pathops engine, then check the filled region
of the composite path.
"""

import pytest
from structlog.testing import capture_logs

from pathcompose import PathAlgebra, SequentialComposer, SkiaPathEngine
from pathcompose.core.geometry import signed_area
from pathcompose.domain import Operation
from pathcompose.utils import DecisionCollector
from fakes import circle_commands, filled_area, fills, regular_polygon


def polygon_area(center, radius) -> float:
    return abs(signed_area(regular_polygon(center, radius)))


class TestComposition:
    """Composite results for common outline shapes."""

    def test_disjoint_circles(self, composer: SequentialComposer, engine: SkiaPathEngine) -> None:
        commands = circle_commands((0, 0), 10) + circle_commands((100, 0), 10)

        result = composer.compose(commands)

        assert engine.contour_count(result) == 2
        assert filled_area(result) == pytest.approx(2 * polygon_area((0, 0), 10), rel=1e-6)

    def test_concentric_circles(
        self,
        composer: SequentialComposer,
        engine: SkiaPathEngine,
        collector: DecisionCollector,
    ) -> None:
        """An oppositely wound inner circle becomes a hole."""
        commands = circle_commands((0, 0), 50) + circle_commands((0, 0), 20, clockwise=False)

        result = composer.compose(commands)

        assert engine.contour_count(result) == 2
        expected = polygon_area((0, 0), 50) - polygon_area((0, 0), 20)
        assert filled_area(result) == pytest.approx(expected, rel=1e-6)
        assert not fills(result, (0.0, 0.0))
        assert fills(result, (35.0, 0.0))
        assert collector.operations == [Operation.SUBTRACT]

    def test_letter_o(self, composer: SequentialComposer, engine: SkiaPathEngine) -> None:
        """An O drawn as opentype.js command mappings keeps its counter open."""
        outer = [(0, 0), (60, 0), (60, 80), (0, 80)]
        inner = [(15, 15), (15, 65), (45, 65), (45, 15)]
        commands = []
        for points in (outer, inner):
            commands.append({"type": "M", "x": points[0][0], "y": points[0][1]})
            commands.extend({"type": "L", "x": x, "y": y} for x, y in points[1:])
            commands.append({"type": "Z"})

        result = composer.compose(commands)

        assert engine.contour_count(result) == 2
        assert not fills(result, (30.0, 40.0))
        assert fills(result, (5.0, 40.0))
        assert filled_area(result) == pytest.approx(60 * 80 - 30 * 50)

    def test_island_in_hole(
        self,
        composer: SequentialComposer,
        engine: SkiaPathEngine,
        collector: DecisionCollector,
    ) -> None:
        """A solid inside a hole is united, not subtracted."""
        commands = (
            circle_commands((0, 0), 50)
            + circle_commands((0, 0), 30, clockwise=False)
            + circle_commands((0, 0), 10)
        )

        result = composer.compose(commands)

        assert engine.contour_count(result) == 3
        assert fills(result, (0.0, 0.0))
        assert not fills(result, (20.0, 0.0))
        assert fills(result, (40.0, 0.0))
        assert collector.operations == [Operation.SUBTRACT, Operation.UNITE]
        assert collector.records[1].contained is False

    def test_two_holes(self, composer: SequentialComposer, engine: SkiaPathEngine) -> None:
        """A figure eight: one outer contour with two counters."""
        commands = (
            circle_commands((0, 0), 100)
            + circle_commands((0, -45), 30, clockwise=False)
            + circle_commands((0, 45), 30, clockwise=False)
        )

        result = composer.compose(commands)

        assert engine.contour_count(result) == 3
        assert not fills(result, (0.0, -45.0))
        assert not fills(result, (0.0, 45.0))
        assert fills(result, (0.0, 0.0))

    def test_overlapping_strokes(self, composer: SequentialComposer, engine: SkiaPathEngine) -> None:
        """Overlapping solids merge into one contour."""
        commands = circle_commands((0, 0), 20) + circle_commands((25, 0), 20)

        result = composer.compose(commands)

        assert engine.contour_count(result) == 1
        (min_x, _), (max_x, _) = engine.bounds(result)
        assert min_x == pytest.approx(-20.0)
        assert max_x == pytest.approx(45.0)


class TestAlgebraOnComposites:
    """Path algebra applied to composed paths."""

    def test_far_apart_circles_do_not_intersect(
        self, composer: SequentialComposer, algebra: PathAlgebra, engine: SkiaPathEngine
    ) -> None:
        a = composer.compose(circle_commands((0, 0), 10))
        b = composer.compose(circle_commands((500, 500), 10))

        result = algebra.intersect(a, b)

        assert engine.contour_count(result) == 0
        assert engine.bounds(result) == ((0.0, 0.0), (0.0, 0.0))
        assert not algebra.overlaps(a, b)

    def test_identical_circles_intersect_fully(
        self, composer: SequentialComposer, algebra: PathAlgebra, engine: SkiaPathEngine
    ) -> None:
        a = composer.compose(circle_commands((0, 0), 10))
        b = composer.compose(circle_commands((0, 0), 10))

        (a_min, a_max) = engine.bounds(a)
        (r_min, r_max) = engine.bounds(algebra.intersect(a, b))

        assert r_min == pytest.approx(a_min)
        assert r_max == pytest.approx(a_max)
        assert algebra.overlaps(a, b)

    def test_ring_minus_core(
        self, composer: SequentialComposer, algebra: PathAlgebra
    ) -> None:
        ring = composer.compose(circle_commands((0, 0), 50) + circle_commands((0, 0), 20, clockwise=False))
        disc = composer.compose(circle_commands((0, 0), 40))

        result = algebra.subtract(ring, disc)

        assert not fills(result, (30.0, 0.0))
        assert fills(result, (45.0, 0.0))

    def test_null_inputs(self, algebra: PathAlgebra, engine: SkiaPathEngine) -> None:
        with capture_logs() as logs:
            results = [
                algebra.intersect(None, None),
                algebra.subtract(None, None),
                algebra.unite(None, None),
                algebra.exclude(None, None),
            ]

        assert all(engine.contour_count(r) == 0 for r in results)
        assert len([log for log in logs if log["event"] == "Invalid path input"]) == 4
