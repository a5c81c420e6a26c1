"""
Font engines measure a font and draw single glyphs onto a canvas.

The bitmap builder only talks to the two operations of FontEngine, so any
rasteriser can stand in for Pillow as long as it draws white glyphs onto the
black RGB canvas it is handed.
"""
import abc
import functools
from dataclasses import dataclass

from PIL import ImageDraw, ImageFont

FOREGROUND = (255, 255, 255)
MAX_CODE = 255


class FontLoadError(OSError):
    """A font name that Pillow could not resolve to a font file."""


@dataclass(frozen=True)
class FontMetrics:
    line_height: int
    overline_pos: int
    max_advance: int
    # code -> advance width in pixels, for every code 0..MAX_CODE
    advances: dict

    @property
    def baseline(self):
        # one pixel above the overline, ascenders stay inside the canvas
        return self.overline_pos - 1


class FontEngine(abc.ABC):

    @abc.abstractmethod
    def measure(self, font):
        """Return the FontMetrics of a FontDescriptor."""

    @abc.abstractmethod
    def rasterize(self, font, char, canvas, baseline):
        """Draw `char` at x=0 with its baseline on row `baseline` of `canvas`."""


class PillowFontEngine(FontEngine):
    """
    FontEngine backed by Pillow's FreeType bindings.

    Font names go straight to `loader` (ImageFont.truetype by default), which
    accepts a font file path or a file name found in the system font
    directories. Sizes are in pixels.
    """

    def __init__(self, loader=ImageFont.truetype):
        self._loader = loader
        self._load = functools.lru_cache(maxsize=None)(self._open)

    def _open(self, name, size):
        try:
            return self._loader(name, size)
        except OSError as e:
            raise FontLoadError(f"cannot load font {name!r} at size {size}: {e}") from e

    def measure(self, font):
        face = self._load(font.name, font.size)
        ascent, descent = face.getmetrics()
        advances = {
            code: int(round(face.getlength(chr(code))))
            for code in range(MAX_CODE + 1)
        }
        return FontMetrics(
            line_height=ascent + descent,
            overline_pos=ascent + 1,
            max_advance=max(advances.values()),
            advances=advances,
        )

    def rasterize(self, font, char, canvas, baseline):
        face = self._load(font.name, font.size)
        draw = ImageDraw.Draw(canvas)
        draw.text((0, baseline), char, fill=FOREGROUND, font=face, anchor="ls")
