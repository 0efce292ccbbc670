"""Primitive type catalog: names, sizes and struct format characters."""

from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownTypeError


@dataclass(frozen=True, slots=True)
class PrimitiveType:
    """Size and decoding information for a primitive type."""

    name: str
    size: int
    format: str  # struct format character

    @property
    def is_float(self) -> bool:
        return self.format in ("f", "d")

    @property
    def is_signed(self) -> bool:
        return self.format.islower()


_PRIMITIVES = (
    PrimitiveType("int8", 1, "b"),
    PrimitiveType("uint8", 1, "B"),
    PrimitiveType("char", 1, "b"),
    PrimitiveType("int16", 2, "h"),
    PrimitiveType("uint16", 2, "H"),
    PrimitiveType("short", 2, "h"),
    PrimitiveType("int32", 4, "i"),
    PrimitiveType("uint32", 4, "I"),
    PrimitiveType("float", 4, "f"),
    PrimitiveType("int64", 8, "q"),
    PrimitiveType("uint64", 8, "Q"),
    PrimitiveType("double", 8, "d"),
)

# <stdint.h> spellings
_ALIASES = {
    "int8_t": "int8",
    "uint8_t": "uint8",
    "int16_t": "int16",
    "uint16_t": "uint16",
    "int32_t": "int32",
    "uint32_t": "uint32",
    "int64_t": "int64",
    "uint64_t": "uint64",
}


def _build() -> MappingProxyType:
    types = {p.name: p for p in _PRIMITIVES}
    for alias, target in _ALIASES.items():
        types[alias] = PrimitiveType(alias, types[target].size, types[target].format)
    return MappingProxyType(types)


PRIMITIVE_TYPES: MappingProxyType = _build()

# Primitive type sizes in bytes
TYPE_SIZES: MappingProxyType = MappingProxyType({n: p.size for n, p in PRIMITIVE_TYPES.items()})


def lookup(name: str) -> PrimitiveType:
    """Return the catalog entry for a type name."""
    try:
        return PRIMITIVE_TYPES[name]
    except KeyError:
        raise UnknownTypeError(name) from None


def type_size(name: str) -> int:
    """Return the size in bytes of a primitive type."""
    return lookup(name).size
