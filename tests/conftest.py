import pytest
from PIL import ImageDraw

from fontrender.engine import FOREGROUND, MAX_CODE, FontEngine, FontMetrics


class BarEngine(FontEngine):
    """
    Deterministic stand-in for a real font: every glyph is a solid white bar
    from the top row down to the baseline, `code % 4` pixels wide. Line height
    is half the font size, so different sizes give different tables.
    """

    def __init__(self):
        self.measured = []
        self.canvases = []

    def measure(self, font):
        self.measured.append(font)
        height = font.size // 2
        return FontMetrics(
            line_height=height,
            overline_pos=height - 1,
            max_advance=3,
            advances={code: code % 4 for code in range(MAX_CODE + 1)},
        )

    def rasterize(self, font, char, canvas, baseline):
        # extrema of an untouched canvas: all channels black
        self.canvases.append((canvas, canvas.getextrema()))
        width = ord(char) % 4
        if width:
            ImageDraw.Draw(canvas).rectangle([0, 0, width - 1, baseline], fill=FOREGROUND)


@pytest.fixture
def engine():
    return BarEngine()
