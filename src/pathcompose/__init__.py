"""pathcompose - Compose outline commands into one path with solid/hole semantics.

pathcompose turns a stream of raw outline commands (move/line/cubic/quadratic/close,
as emitted by a glyph outliner) into a single composite path in which holes are
carved out of solids, and provides a small path algebra (intersect, unite,
subtract, exclude, overlap test) on top of a boolean path engine.

Example:
    >>> from pathcompose import SkiaPathEngine, compose
    >>> from pathcompose.domain import Close, LineTo, MoveTo
    >>> engine = SkiaPathEngine()
    >>> path = compose(engine, [MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), Close()])
"""

from pathcompose.core import PathAlgebra, SequentialComposer, compose, create_path_algebra
from pathcompose.engine import PathEngine, SkiaPathEngine

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "PathAlgebra",
    "PathEngine",
    "SequentialComposer",
    "SkiaPathEngine",
    "__author__",
    "__version__",
    "compose",
    "create_path_algebra",
]
