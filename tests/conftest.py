"""Shared fixtures for the pathcompose test suite."""

import pytest

from pathcompose.core import PathAlgebra, SequentialComposer
from pathcompose.engine import SkiaPathEngine
from pathcompose.utils import DecisionCollector


@pytest.fixture
def engine() -> SkiaPathEngine:
    """Real skia-pathops engine."""
    return SkiaPathEngine()


@pytest.fixture
def collector() -> DecisionCollector:
    """Decision observer that keeps every record."""
    return DecisionCollector()


@pytest.fixture
def composer(engine: SkiaPathEngine, collector: DecisionCollector) -> SequentialComposer:
    """Composer on the real engine, recording decisions."""
    return SequentialComposer(engine, observer=collector)


@pytest.fixture
def algebra(engine: SkiaPathEngine) -> PathAlgebra:
    """Path algebra on the real engine."""
    return PathAlgebra(engine)
