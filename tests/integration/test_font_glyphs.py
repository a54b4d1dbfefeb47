"""Composition of glyph outlines loaded from a real font file.

A small TrueType font is built with fontTools' FontBuilder, read back
through FontReader and composed with the skia-pathops engine.
"""

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from pathcompose import SkiaPathEngine, compose
from pathcompose.io import FontReader
from fakes import fills


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def _square_o():
    """Rectangular O: clockwise outer, counter-clockwise counter (font units, y-up)."""
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((550, 700))
    pen.lineTo((550, 0))
    pen.closePath()
    pen.moveTo((150, 100))
    pen.lineTo((450, 100))
    pen.lineTo((450, 600))
    pen.lineTo((150, 600))
    pen.closePath()
    return pen.glyph()


def _round_o():
    """Quadratic O with the same winding conventions."""
    pen = TTGlyphPen(None)
    pen.moveTo((300, 0))
    pen.qCurveTo((0, 0), (0, 350))
    pen.qCurveTo((0, 700), (300, 700))
    pen.qCurveTo((600, 700), (600, 350))
    pen.qCurveTo((600, 0), (300, 0))
    pen.closePath()
    pen.moveTo((300, 150))
    pen.qCurveTo((450, 150), (450, 350))
    pen.qCurveTo((450, 550), (300, 550))
    pen.qCurveTo((150, 550), (150, 350))
    pen.qCurveTo((150, 150), (300, 150))
    pen.closePath()
    return pen.glyph()


def _bar():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((200, 700))
    pen.lineTo((200, 0))
    pen.closePath()
    return pen.glyph()


@pytest.fixture(scope="module")
def font_path(tmp_path_factory):
    """Build a minimal TrueType font with a few test glyphs."""
    glyphs = {
        ".notdef": _empty_glyph(),
        "space": _empty_glyph(),
        "O": _square_o(),
        "o": _round_o(),
        "I": _bar(),
    }
    # left side bearing must match each glyph's xMin
    lsb = {".notdef": 0, "space": 0, "O": 50, "o": 0, "I": 100}
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(glyphs))
    fb.setupCharacterMap({ord(" "): "space", ord("O"): "O", ord("o"): "o", ord("I"): "I"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, lsb[name]) for name in glyphs})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "PathCompose Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    path = tmp_path_factory.mktemp("fonts") / "PathComposeTest.ttf"
    fb.save(str(path))
    return path


@pytest.fixture
def reader(font_path):
    reader = FontReader(font_path)
    reader.load()
    yield reader
    reader.close()


class TestFontReader:
    """FontReader against a real font file."""

    def test_metadata(self, reader: FontReader) -> None:
        assert reader.format == "TrueType"
        assert reader.units_per_em == 1000
        assert list(reader.iter_glyph_names()) == [".notdef", "space", "O", "o", "I"]

    def test_empty_glyph_has_no_commands(self, reader: FontReader) -> None:
        assert reader.char_commands(" ") == []

    def test_empty_glyph_composes_to_empty_path(self, reader: FontReader) -> None:
        engine = SkiaPathEngine()
        result = compose(engine, reader.char_commands(" "))
        assert engine.contour_count(result) == 0


class TestGlyphComposition:
    """Composite paths of font glyphs."""

    def test_square_o_keeps_counter(self, reader: FontReader) -> None:
        engine = SkiaPathEngine()

        result = compose(engine, reader.char_commands("O"))

        assert engine.contour_count(result) == 2
        # font units flipped: the baseline is y=0 and the glyph sits above it at negative y
        assert engine.bounds(result) == ((50.0, -700.0), (550.0, 0.0))
        assert not fills(result, (300.0, -350.0))
        assert fills(result, (100.0, -350.0))

    def test_scaled_placement(self, reader: FontReader) -> None:
        """font_size scales by units per em and x, y place the origin."""
        engine = SkiaPathEngine()

        result = compose(engine, reader.char_commands("O", x=10, y=100, font_size=100))

        (min_x, min_y), (max_x, max_y) = engine.bounds(result)
        assert (min_x, min_y) == pytest.approx((15.0, 30.0))
        assert (max_x, max_y) == pytest.approx((65.0, 100.0))

    def test_round_o_keeps_counter(self, reader: FontReader) -> None:
        engine = SkiaPathEngine()

        result = compose(engine, reader.glyph_commands("o"))

        assert engine.contour_count(result) == 2
        assert not fills(result, (300.0, -350.0))
        assert fills(result, (75.0, -350.0))

    def test_single_contour_glyph(self, reader: FontReader) -> None:
        engine = SkiaPathEngine()

        result = compose(engine, reader.char_commands("I"))

        assert engine.contour_count(result) == 1
        assert engine.bounds(result) == ((100.0, -700.0), (200.0, 0.0))
