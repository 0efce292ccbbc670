"""Field access against raw buffers laid out by a struct declaration."""

import struct
from typing import Any

from ..errors import BufferTooSmallError
from ..parser import DEFAULT_OPTIONS, FieldInfo, LayoutOptions, parse
from ..parser.catalog import PrimitiveType, lookup

Buffer = bytes | bytearray | memoryview
Value = int | float | bytes | bytearray | memoryview


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def _struct_prefix(byteorder: str) -> str:
    return "<" if byteorder == "little" else ">"


def _view(buffer: Buffer) -> memoryview:
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _unit(view: memoryview, f: FieldInfo) -> memoryview:
    """Return the bytes of a field's storage unit, checking bounds."""
    end = f.byte_offset + f.size
    if end > len(view):
        raise BufferTooSmallError(
            f"Field {f.name!r} needs bytes {f.byte_offset}..{end - 1}, buffer has {len(view)}"
        )
    return view[f.byte_offset : end]


def _decode(bits: int, t: PrimitiveType, byteorder: str) -> int | float:
    """Interpret the low bytes of an integer as a value of type t."""
    bits &= _mask(t.size * 8)
    if t.is_float:
        data = bits.to_bytes(t.size, byteorder)
        return struct.unpack(_struct_prefix(byteorder) + t.format, data)[0]
    if t.is_signed and bits >> (t.size * 8 - 1):
        return bits - (1 << (t.size * 8))
    return bits


def _cast(value: int, t: PrimitiveType) -> int | float:
    """Convert an unsigned integer to type t the way a numeric cast would."""
    if t.is_float:
        return float(value)
    value &= _mask(t.size * 8)
    if t.is_signed and value >> (t.size * 8 - 1):
        return value - (1 << (t.size * 8))
    return value


def _encode(value: Value, f: FieldInfo, byteorder: str) -> int:
    """Turn a written value into the integer whose low bits get stored."""
    t = lookup(f.type)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return int.from_bytes(value, byteorder)

    if isinstance(value, float) or (t.is_float and not f.is_bit_field):
        fmt = "d" if t.format == "d" else "f"
        data = struct.pack(_struct_prefix(byteorder) + fmt, float(value))
        return int.from_bytes(data, byteorder)

    if isinstance(value, int):
        return value

    raise TypeError(f"Cannot write {type(value).__name__} to field {f.name!r}")


def read_field(
    f: FieldInfo, buffer: Buffer, as_type: str | None = None, byteorder: str = "little"
) -> Any:
    """Read a placed field out of a buffer."""
    unit = int.from_bytes(_unit(_view(buffer), f), byteorder)

    if not f.is_bit_field:
        return _decode(unit, lookup(as_type or f.type), byteorder)

    value = (unit >> f.bit_offset) & _mask(f.bit_width)
    if as_type is None:
        return value
    return _cast(value, lookup(as_type))


def write_field(f: FieldInfo, value: Value, buffer: Buffer, byteorder: str = "little") -> None:
    """Write a value into a placed field of a buffer."""
    view = _view(buffer)
    if view.readonly:
        raise TypeError("Cannot write to a read-only buffer")

    unit = _unit(view, f)
    bits = _encode(value, f, byteorder)

    if not f.is_bit_field:
        unit[:] = (bits & _mask(f.size * 8)).to_bytes(f.size, byteorder)
        return

    mask = _mask(f.bit_width)
    current = int.from_bytes(unit, byteorder)
    current &= ~(mask << f.bit_offset)
    current |= (bits & mask) << f.bit_offset
    unit[:] = current.to_bytes(f.size, byteorder)


def size_of(text: str, options: LayoutOptions | None = None) -> int:
    """Return the total size in bytes of a struct declaration."""
    return parse(text, options).total_size


def read(
    text: str,
    field_name: str,
    buffer: Buffer,
    as_type: str | None = None,
    options: LayoutOptions | None = None,
) -> Any:
    """Read a field from a buffer laid out by a struct declaration.

    Args:
        text: The struct declaration.
        field_name: Name of the field to read.
        buffer: Bytes laid out as the declaration describes.
        as_type: Catalog type to return the value as. Defaults to the field's
            own type for plain fields and an unsigned integer for bit-fields.
        options: Layout options, including byte order.

    Returns:
        The decoded value, an int or a float.
    """
    options = options or DEFAULT_OPTIONS
    record = parse(text, options)
    return read_field(record.field(field_name), buffer, as_type, options.byteorder)


def write(
    text: str,
    field_name: str,
    value: Value,
    buffer: Buffer,
    options: LayoutOptions | None = None,
) -> None:
    """Write a field into a buffer laid out by a struct declaration.

    Ints are stored as two's complement, or converted to float for a plain
    float or double field. Floats are stored as float32 (float64 for a double
    field) and raw bytes are read as an integer in the configured
    byte order. Values wider than the field keep only their low bits.
    Bit-fields are updated with a read-modify-write of their storage unit.
    """
    options = options or DEFAULT_OPTIONS
    record = parse(text, options)
    write_field(record.field(field_name), value, buffer, options.byteorder)


def field_type(text: str, field_name: str, options: LayoutOptions | None = None) -> str:
    """Return the declared type of a field, or an empty string if it is missing."""
    found = parse(text, options).find(field_name)
    return found.type if found else ""
