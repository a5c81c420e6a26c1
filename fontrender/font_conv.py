"""
Render fonts into a C/C++ array literal of per-character intensity bitmaps,
so a program can print text by copying the bytes straight into its frame
buffer.

Usage:
    fontrender <ascii-from> <ascii-to> <cpp-type> <arr-name> [[font-name] [font-size ..] ..]

Example:
    fontrender 33 127 "const FontBitmap" fonts DejaVuSans 12 18 DejaVuSansMono 32 > fonts.inc

renders DejaVuSans at sizes 12 and 18 and DejaVuSansMono at size 32 for
characters 33 to 127. The array goes to stdout, progress to stderr.
"""
import sys

from .bitmap import CharacterRange, FontDescriptor, InvalidRangeError, build
from .engine import MAX_CODE, FontLoadError, PillowFontEngine
from .serializer import close_table, open_table, serialize

MIN_ARGS = 6


def usage(prog):
    return (f"Basic usage: {prog} [ascii-from] [ascii-to] "
            "[cpp-type] [arr-name] [[font-name] [font-size] ..]")


def parse_code(token):
    """
    Character code argument. Surrounding whitespace and a leading "+" are
    accepted, codes past MAX_CODE become 0; anything that is not an unsigned
    decimal number gives None.
    """
    token = token.strip()
    if token.startswith("+"):
        token = token[1:]
    if not token.isdecimal():
        return None
    code = int(token)
    return code if code <= MAX_CODE else 0


def iter_descriptors(tokens, chars):
    """
    Turn interleaved font names and sizes into FontDescriptors.

    A numeric token is a size for the most recent font name, any other token
    replaces that name. One name may be followed by several sizes. A size
    seen before any name is dropped, as is a size of 0.
    """
    name = ""
    for token in tokens:
        if not token.isdecimal():
            name = token
            continue
        size = int(token)
        if not name or size == 0:
            continue
        yield FontDescriptor(name, size, chars)


def render_fonts(tokens, chars, type_name, array_name, engine, out):
    """Write the whole array to `out`; returns the number of font tables."""
    open_table(out, type_name, array_name)

    count = 0
    for font in iter_descriptors(tokens, chars):
        print(f"rendering {font.name} (size {font.size}) "
              f"chars {chars.first}..{chars.last}...", file=sys.stderr)
        serialize(build(font, engine), out)
        count += 1

    close_table(out)
    return count


def main(argv=None, out=None, engine=None):
    argv = sys.argv if argv is None else argv
    out = sys.stdout if out is None else out
    prog = argv[0] if argv else "fontrender"

    if len(argv) < MIN_ARGS + 1:
        print(usage(prog))
        return 1

    first, last = parse_code(argv[1]), parse_code(argv[2])
    if first is None or last is None:
        print(usage(prog))
        return 1

    try:
        chars = CharacterRange(first, last)
    except InvalidRangeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    type_name, array_name = argv[3], argv[4]
    engine = PillowFontEngine() if engine is None else engine
    try:
        count = render_fonts(argv[5:], chars, type_name, array_name, engine, out)
    except FontLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"done: {count} font table(s) written", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
