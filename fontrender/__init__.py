"""Font to C array bitmap table generator."""
from .bitmap import (CharacterBitmap, CharacterRange, FontDescriptor, FontTable,
                     InvalidRangeError, build, normalize)
from .engine import FontEngine, FontLoadError, FontMetrics, PillowFontEngine
from .serializer import close_table, open_table, serialize

__version__ = "0.1.0"
