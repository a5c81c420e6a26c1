"""
Writes font tables as a brace-delimited C/C++ array literal.

Every call takes the output stream explicitly and only ever appends to it.
"""

INDENT = "\t"


def indent(depth):
    return INDENT * depth


def quote(name):
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def open_table(out, type_name, array_name):
    """Opening declaration of the array wrapping all font tables."""
    out.write(f"{type_name} {array_name} =\n")
    out.write("{\n")


def close_table(out):
    out.write("};\n")


def serialize(table, out):
    """
    Append one font table as a single top-level brace group.

    Fields come in a fixed order: name, size, line height, first and last
    character code, then one entry per character holding its width and its
    rows of intensities.
    """
    out.write(f"{indent(1)}{{\n")
    out.write(f"{indent(2)}{quote(table.name)},\n")
    for value in (table.size, table.line_height, table.first, table.last):
        out.write(f"{indent(2)}{value},\n")
    out.write(f"{indent(2)}{{\n")

    for bitmap in table.bitmaps:
        out.write(f"{indent(3)}{{\n")
        out.write(f"{indent(4)}{bitmap.width},\n")
        out.write(f"{indent(4)}{{\n")
        for row in bitmap.rows:
            out.write(indent(5) + "".join(f"{value}," for value in row) + "\n")
        out.write(f"{indent(4)}}}\n")
        out.write(f"{indent(3)}}},\n")

    out.write(f"{indent(2)}}}\n")
    out.write(f"{indent(1)}}},\n")
