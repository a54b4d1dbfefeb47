"""Core composition algorithms for pathcompose.

This module contains:

- Signed area of anchor polygons
- Contour metrics (ranking area, signed winding, bounds)
- Bounding-box relation classification
- Operation selection (unite vs subtract, with trial-subtraction confirmation)
- Contour extraction and sequential composition
- The path algebra facade

All services hold no module-level mutable state and are safe to call from
independent call sites.

Key functions:
- classify: Bounding-box relation of two boxes
- select_operation: Choose UNITE or SUBTRACT for one contour
- compose: Convert outline commands into one composite path

Key classes:
- ContourExtractor: Outline commands to closed contours
- OperationSelector: Per-contour operation decision against the engine
- SequentialComposer: Area-ranked merge into one accumulator
- PathAlgebra: Intersect/subtract/unite/exclude/overlap wrappers
"""

from pathcompose.core.algebra import PathAlgebra, create_path_algebra
from pathcompose.core.composer import SequentialComposer, compose
from pathcompose.core.extractor import ContourExtractor
from pathcompose.core.geometry import signed_area
from pathcompose.core.metrics import (
    bounds_area,
    contour_area,
    contour_bounds,
    contour_winding,
    measure_contour,
)
from pathcompose.core.relation import bounds_contain, bounds_overlap, classify
from pathcompose.core.selector import OperationSelector, Selection, select_operation

__all__ = [
    # Composition classes
    "ContourExtractor",
    "OperationSelector",
    "PathAlgebra",
    "Selection",
    "SequentialComposer",
    # Metrics and relation functions
    "bounds_area",
    "bounds_contain",
    "bounds_overlap",
    "classify",
    "compose",
    "contour_area",
    "contour_bounds",
    "contour_winding",
    "create_path_algebra",
    "measure_contour",
    "select_operation",
    "signed_area",
]
