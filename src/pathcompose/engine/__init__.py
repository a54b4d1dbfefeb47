"""Path engine layer for pathcompose.

Key classes:
- PathEngine: Protocol every engine adapter satisfies
- SkiaPathEngine: Adapter over skia-pathops
- Segment: Segment handle used by SkiaPathEngine
"""

from pathcompose.engine.base import PathEngine
from pathcompose.engine.skia import Segment, SegmentKind, SkiaPathEngine

__all__ = [
    "PathEngine",
    "Segment",
    "SegmentKind",
    "SkiaPathEngine",
]
