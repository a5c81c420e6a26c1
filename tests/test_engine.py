import pytest
from PIL import ImageFont, features

from fontrender.bitmap import CharacterRange, FontDescriptor, build
from fontrender.engine import FontLoadError, PillowFontEngine

pytestmark = pytest.mark.skipif(not features.check("freetype2"),
                                reason="Pillow built without FreeType")


def default_font(name, size):
    return ImageFont.load_default(size)


@pytest.fixture
def pillow_engine():
    return PillowFontEngine(loader=default_font)


def test_metrics_follow_font(pillow_engine):
    font = FontDescriptor("default", 20, CharacterRange(65, 90))
    metrics = pillow_engine.measure(font)
    ascent, descent = ImageFont.load_default(20).getmetrics()

    assert metrics.line_height == ascent + descent
    assert metrics.baseline == ascent
    assert len(metrics.advances) == 256
    assert metrics.max_advance == max(metrics.advances.values())
    assert metrics.advances[ord("W")] > metrics.advances[ord("i")] > 0


def test_glyphs_rendered(pillow_engine):
    font = FontDescriptor("default", 20, CharacterRange(32, 34))
    table = build(font, pillow_engine)
    space, bang, quote = table.bitmaps

    assert all(len(b.rows) == table.line_height for b in table.bitmaps)
    assert all(v == 0 for row in space.rows for v in row)
    assert max(v for row in bang.rows for v in row) > 128
    assert all(0 <= v <= 255 for b in table.bitmaps for row in b.rows for v in row)


def test_rendering_is_repeatable(pillow_engine):
    font = FontDescriptor("default", 16, CharacterRange(65, 70))
    assert build(font, pillow_engine) == build(font, PillowFontEngine(loader=default_font))


def test_missing_font_raises():
    font = FontDescriptor("no-such-font-7f3a", 12, CharacterRange(65, 65))
    with pytest.raises(FontLoadError, match="no-such-font-7f3a"):
        PillowFontEngine().measure(font)
