"""
Character ranges, intensity normalisation and the per-font bitmap builder.
"""
from dataclasses import dataclass

from PIL import Image

from .engine import MAX_CODE

CEILING = 255
BACKGROUND = (0, 0, 0)


class InvalidRangeError(ValueError):
    pass


@dataclass(frozen=True)
class CharacterRange:
    """Closed interval of Latin-1 character codes, first <= last."""
    first: int
    last: int

    def __post_init__(self):
        for code in (self.first, self.last):
            if not 0 <= code <= MAX_CODE:
                raise InvalidRangeError(f"character code {code} is outside 0..{MAX_CODE}")
        if self.first > self.last:
            raise InvalidRangeError(f"range start {self.first} is past its end {self.last}")

    def __iter__(self):
        return iter(range(self.first, self.last + 1))

    def __len__(self):
        return self.last - self.first + 1


@dataclass(frozen=True)
class FontDescriptor:
    name: str
    size: int
    chars: CharacterRange

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"font size must be positive, got {self.size}")


@dataclass(frozen=True)
class CharacterBitmap:
    code: int
    width: int
    rows: tuple


@dataclass(frozen=True)
class FontTable:
    name: str
    size: int
    line_height: int
    first: int
    last: int
    bitmaps: tuple


def normalize(sample, ceiling=CEILING):
    """
    Collapse an RGB sample into one intensity in 0..ceiling.

    Channels are averaged with equal weights, so this is a brightness
    estimate rather than perceptual luminance. Any alpha channel is ignored.
    """
    red, green, blue = sample[:3]
    return (red + green + blue) * ceiling // (3 * 255)


def build(font, engine):
    """
    Render every character of `font.chars` and return the resulting FontTable.

    Metrics are taken once per font, so all bitmaps share the same baseline
    and row count. Each glyph is drawn on its own freshly cleared canvas and
    then cropped to its advance width.
    """
    metrics = engine.measure(font)
    height = metrics.line_height

    bitmaps = []
    for code in font.chars:
        canvas = Image.new("RGB", (metrics.max_advance, height), BACKGROUND)
        engine.rasterize(font, chr(code), canvas, metrics.baseline)

        width = min(metrics.advances[code], canvas.width)
        pixels = canvas.load()
        rows = tuple(
            tuple(normalize(pixels[x, y]) for x in range(width))
            for y in range(height)
        )
        bitmaps.append(CharacterBitmap(code, width, rows))

    return FontTable(
        name=font.name,
        size=font.size,
        line_height=height,
        first=font.chars.first,
        last=font.chars.last,
        bitmaps=tuple(bitmaps),
    )
