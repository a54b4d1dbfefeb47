"""Font reader producing outline commands for glyphs.

This module provides the FontReader class for loading font files and
drawing glyph outlines as command streams for the composer.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from pathcompose.domain import OutlineCommand
from pathcompose.exceptions import FontLoadError, GlyphNotFoundError
from pathcompose.io.converter import fonttools_glyph_to_commands, y_down_transform


class FontReader:
    """Loads TTF/OTF fonts and draws glyphs as outline commands.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            commands = reader.char_commands("O", font_size=72)
            path = compose(engine, commands)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If font file is invalid or cannot be parsed
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-based fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    def iter_glyph_names(self) -> Iterator[str]:
        """Iterate over glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        yield from self._require_font().getGlyphOrder()

    def glyph_commands(
        self,
        name: str,
        x: float = 0.0,
        y: float = 0.0,
        font_size: float | None = None,
    ) -> list[OutlineCommand]:
        """Draw a glyph as outline commands in the y-down frame.

        Args:
            name: Glyph name
            x: Horizontal position of the glyph origin
            y: Baseline position
            font_size: Output size; font units are kept when None

        Returns:
            List of outline commands

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no glyph called ``name``
        """
        font = self._require_font()
        glyph_set = font.getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        scale = 1.0 if font_size is None else font_size / self.units_per_em
        return fonttools_glyph_to_commands(
            glyph_set[name],
            glyph_set=glyph_set,
            transform=y_down_transform(x, y, scale),
        )

    def char_commands(
        self,
        char: str,
        x: float = 0.0,
        y: float = 0.0,
        font_size: float | None = None,
    ) -> list[OutlineCommand]:
        """Draw the glyph mapped to ``char`` as outline commands.

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If ``char`` is not mapped by the font
        """
        cmap = self._require_font().getBestCmap() or {}
        glyph_name = cmap.get(ord(char))
        if glyph_name is None:
            raise GlyphNotFoundError(char)
        return self.glyph_commands(glyph_name, x=x, y=y, font_size=font_size)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
