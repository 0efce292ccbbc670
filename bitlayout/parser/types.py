"""Type definitions for parsed record declarations."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Literal

from dataclasses_json import DataClassJsonMixin

from ..errors import FieldNotFoundError


class FieldForm(StrEnum):
    """Which statement form a field declaration matched."""

    NAMED_BIT_FIELD = auto()  # type name : width
    ANONYMOUS_BIT_FIELD = auto()  # type : width
    PLAIN = auto()  # type name
    LOOSE_PLAIN = auto()  # type name <ignored tokens>


class TailPadding(StrEnum):
    """How a partially filled storage unit at the end counts toward total size."""

    BYTE = auto()  # one extra byte, whatever the unit size
    UNIT = auto()  # the full size of the open unit


@dataclass(frozen=True)
class LayoutOptions:
    """Options shared by layout and field access."""

    tail_padding: TailPadding = TailPadding.UNIT
    byteorder: Literal["little", "big"] = "little"


DEFAULT_OPTIONS = LayoutOptions()


@dataclass(frozen=True, slots=True)
class FieldDecl:
    """A classified field statement before layout."""

    type: str
    name: str
    bit_width: int
    form: FieldForm

    @property
    def is_bit_field(self) -> bool:
        return self.form in (FieldForm.NAMED_BIT_FIELD, FieldForm.ANONYMOUS_BIT_FIELD)

    @property
    def is_anonymous(self) -> bool:
        return self.form == FieldForm.ANONYMOUS_BIT_FIELD


@dataclass(frozen=True)
class FieldInfo(DataClassJsonMixin):
    """A placed field.

    For bit-fields, byte_offset and size describe the storage unit the field
    is packed into and bit_offset counts from the unit's least significant bit.
    """

    type: str
    name: str
    bit_width: int
    is_bit_field: bool
    is_anonymous: bool
    byte_offset: int
    bit_offset: int
    size: int


@dataclass(frozen=True)
class ParseWarning(DataClassJsonMixin):
    """A statement skipped while parsing a declaration."""

    statement: str
    message: str


@dataclass(frozen=True)
class RecordInfo(DataClassJsonMixin):
    """A parsed record: its fields in declaration order and its total size."""

    name: str
    fields: tuple[FieldInfo, ...]
    total_size: int
    warnings: tuple[ParseWarning, ...] = ()

    def find(self, name: str) -> FieldInfo | None:
        """Return the first field with the given name, if any."""
        return next((f for f in self.fields if f.name == name), None)

    def field(self, name: str) -> FieldInfo:
        """Return the first field with the given name."""
        found = self.find(name)
        if found is None:
            raise FieldNotFoundError(name)
        return found
