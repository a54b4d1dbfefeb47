"""Font I/O layer for pathcompose.

This module turns font outlines into outline command streams using
fontTools.

Key responsibilities:
- Load TTF/OTF fonts
- Draw glyphs through a fontTools pen into outline commands
- Flip font design space (y-up) into the composer's y-down frame

Key classes:
- FontReader: Load fonts and produce per-glyph command streams
- OutlineCommandPen: fontTools pen recording outline commands
"""

from pathcompose.io.converter import (
    fonttools_glyph_to_commands,
    recording_to_commands,
    y_down_transform,
)
from pathcompose.io.pen import OutlineCommandPen
from pathcompose.io.reader import FontReader

__all__ = [
    "FontReader",
    "OutlineCommandPen",
    "fonttools_glyph_to_commands",
    "recording_to_commands",
    "y_down_transform",
]
