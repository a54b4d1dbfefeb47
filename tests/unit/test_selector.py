"""Unit tests for operation selection."""

import pytest
from structlog.testing import capture_logs

from pathcompose.core.extractor import ContourExtractor
from pathcompose.core.selector import OperationSelector, select_operation, windings_match
from pathcompose.domain import Contour, Operation, Relation
from pathcompose.engine import SkiaPathEngine
from fakes import FlakyEngine, polygon_commands, square_points

SOLID = -100.0
HOLE = 100.0


def _contour(engine, points) -> Contour:
    (contour,) = ContourExtractor(engine).extract(polygon_commands(points))
    return contour


class TestWindingsMatch:
    """Tests for windings_match."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (SOLID, SOLID, True),
            (HOLE, HOLE, True),
            (SOLID, HOLE, False),
            (HOLE, SOLID, False),
            (0.0, SOLID, True),
            (0.0, HOLE, False),
        ],
    )
    def test_windings_match(self, a: float, b: float, expected: bool) -> None:
        assert windings_match(a, b) is expected


class TestSelectOperation:
    """Tests for the decision table."""

    @pytest.mark.parametrize("relation", [Relation.INDEPENDENT, Relation.OVERLAP])
    def test_non_contained_always_unites(self, relation: Relation) -> None:
        """Containment is never checked outside CONTAINED."""

        def confirm() -> bool:
            raise AssertionError("containment should not be checked")

        for winding in (SOLID, HOLE):
            assert select_operation(SOLID, winding, relation, confirm) is Operation.UNITE

    def test_contained_but_not_inside_unites(self) -> None:
        assert select_operation(SOLID, HOLE, Relation.CONTAINED, lambda: False) is Operation.UNITE

    @pytest.mark.parametrize(
        "accumulator_winding, next_winding, expected",
        [
            (SOLID, HOLE, Operation.SUBTRACT),
            (HOLE, SOLID, Operation.SUBTRACT),
            (HOLE, HOLE, Operation.SUBTRACT),
            (SOLID, SOLID, Operation.UNITE),
            (SOLID, 0.0, Operation.UNITE),
        ],
    )
    def test_contained(self, accumulator_winding, next_winding, expected) -> None:
        result = select_operation(
            accumulator_winding, next_winding, Relation.CONTAINED, lambda: True
        )
        assert result is expected

    @pytest.mark.parametrize("winding", [SOLID, -1e-9, 0.0, 1e-9, HOLE])
    def test_same_winding_follows_contour_hole_rule(self, winding: float) -> None:
        """A contained same-winding contour is subtracted exactly when it is a hole."""
        contour = Contour(
            path=None,
            anchors=((0.0, 0.0),),
            area=1.0,
            winding=winding,
            bounds=((0.0, 0.0), (1.0, 1.0)),
        )
        result = select_operation(winding, winding, Relation.CONTAINED, lambda: True)

        expected = Operation.SUBTRACT if contour.is_hole else Operation.UNITE
        assert result is expected


class TestOperationSelector:
    """Tests for OperationSelector against a real engine."""

    def test_hole_is_confirmed(self, engine: SkiaPathEngine) -> None:
        outer = _contour(engine, square_points(0, 0, 100, 100))
        inner = _contour(engine, square_points(25, 25, 75, 75, clockwise=False))

        selection = OperationSelector(engine).decide(
            outer.path, outer.winding, inner, Relation.CONTAINED
        )

        assert selection.operation is Operation.SUBTRACT
        assert selection.contained is True
        assert selection.assumed is False

    def test_notch_is_not_a_hole(self, engine: SkiaPathEngine) -> None:
        """A contour touching the outer edge does not add a contour when subtracted."""
        outer = _contour(engine, square_points(0, 0, 100, 100))
        notch = _contour(engine, square_points(0, 25, 50, 75, clockwise=False))

        containment = OperationSelector(engine).confirm_containment(outer.path, notch)

        assert containment.contained is False

    def test_total_cover_is_not_contained(self, engine: SkiaPathEngine) -> None:
        """Subtracting an identical contour leaves nothing."""
        outer = _contour(engine, square_points(0, 0, 100, 100))
        twin = _contour(engine, square_points(0, 0, 100, 100, clockwise=False))

        selection = OperationSelector(engine).decide(
            outer.path, outer.winding, twin, Relation.CONTAINED
        )

        assert selection.operation is Operation.UNITE
        assert selection.contained is False

    def test_engine_failure_assumes_containment(self) -> None:
        engine = FlakyEngine(fail_on=["subtract"])
        outer = _contour(engine, square_points(0, 0, 100, 100))
        inner = _contour(engine, square_points(25, 25, 75, 75, clockwise=False))

        with capture_logs() as logs:
            selection = OperationSelector(engine).decide(
                outer.path, outer.winding, inner, Relation.CONTAINED
            )

        assert selection.operation is Operation.SUBTRACT
        assert selection.assumed is True
        assert any(
            log["event"] == "Containment check failed, assuming hole"
            and log["log_level"] == "warning"
            for log in logs
        )

    def test_other_errors_propagate(self) -> None:
        engine = FlakyEngine(fail_on=["subtract"], error=RuntimeError)
        outer = _contour(engine, square_points(0, 0, 100, 100))
        inner = _contour(engine, square_points(25, 25, 75, 75, clockwise=False))

        with pytest.raises(RuntimeError):
            OperationSelector(engine).confirm_containment(outer.path, inner)

    def test_independent_skips_engine(self) -> None:
        engine = FlakyEngine()
        outer = _contour(engine, square_points(0, 0, 10, 10))
        other = _contour(engine, square_points(20, 20, 30, 30))

        selection = OperationSelector(engine).decide(
            outer.path, outer.winding, other, Relation.INDEPENDENT
        )

        assert selection.operation is Operation.UNITE
        assert selection.contained is None
        assert engine.calls == []
