"""Convenience wrappers around field access for callers that want a status flag."""

from ..errors import BitLayoutError
from ..parser import LayoutOptions, parse
from .accessor import Buffer, write


def write_int(
    text: str,
    field_name: str,
    value: int,
    buffer: Buffer,
    options: LayoutOptions | None = None,
) -> bool:
    """Write a 64-bit integer into a field. Returns False on any layout error."""
    try:
        write(text, field_name, int(value), buffer, options)
    except BitLayoutError:
        return False
    return True


def write_float(
    text: str,
    field_name: str,
    value: float,
    buffer: Buffer,
    options: LayoutOptions | None = None,
) -> bool:
    """Write a floating point value into a field. Returns False on any layout error."""
    try:
        write(text, field_name, float(value), buffer, options)
    except BitLayoutError:
        return False
    return True


def describe(text: str, options: LayoutOptions | None = None) -> str:
    """Return a plain text summary of a struct's layout."""
    record = parse(text, options)

    lines = [f"Struct: {record.name} (total size: {record.total_size} bytes)"]
    for f in record.fields:
        decl = f"{f.type} {f.name}"
        if f.is_bit_field:
            decl += f" : {f.bit_width}"
        where = f"offset: {f.byte_offset}"
        if f.is_bit_field:
            where += f", bit offset: {f.bit_offset}"
        lines.append(f"  {decl} | {where}, size: {f.size} bytes")

    for warning in record.warnings:
        lines.append(f"  warning: {warning.statement!r}: {warning.message}")

    return "\n".join(lines)
