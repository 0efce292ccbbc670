"""Record layout: byte and bit offsets for each declared field."""

import logging
from collections.abc import Iterable

from .catalog import type_size
from .classifier import classify
from .text import normalize, record_body, record_name, split_statements
from .types import (
    DEFAULT_OPTIONS,
    FieldDecl,
    FieldInfo,
    LayoutOptions,
    ParseWarning,
    RecordInfo,
    TailPadding,
)

logger = logging.getLogger(__name__)


class LayoutCalculator:
    """Place fields one after another, packing bit-fields into storage units.

    Plain fields are never aligned or padded. Bit-fields share a storage unit
    while they fit; a bit-field that does not fit abandons the rest of the
    unit and starts a new one.
    """

    def __init__(self, options: LayoutOptions = DEFAULT_OPTIONS):
        self.options = options
        self.byte_offset = 0
        self.bit_offset = 0
        self._unit_end = 0  # first byte past every bit-field unit placed so far
        self.fields: list[FieldInfo] = []
        self.warnings: list[ParseWarning] = []

    def place_plain(self, decl: FieldDecl) -> FieldInfo:
        size = type_size(decl.type)
        if self.bit_offset > 0:
            # plain fields never share a unit with bit-fields
            self.byte_offset = max(self.byte_offset, self._unit_end)
            self.bit_offset = 0
        placed = FieldInfo(
            type=decl.type,
            name=decl.name,
            bit_width=0,
            is_bit_field=False,
            is_anonymous=False,
            byte_offset=self.byte_offset,
            bit_offset=0,
            size=size,
        )
        self.byte_offset += size
        self.bit_offset = 0
        return placed

    def place_bit_field(self, decl: FieldDecl) -> FieldInfo:
        unit_size = type_size(decl.type)
        unit_bits = unit_size * 8

        if self.bit_offset + decl.bit_width > unit_bits:
            self.byte_offset = max(self.byte_offset + unit_size, self._unit_end)
            self.bit_offset = 0

        placed = FieldInfo(
            type=decl.type,
            name=decl.name,
            bit_width=decl.bit_width,
            is_bit_field=True,
            is_anonymous=decl.is_anonymous,
            byte_offset=self.byte_offset,
            bit_offset=self.bit_offset,
            size=unit_size,
        )

        self._unit_end = max(self._unit_end, self.byte_offset + unit_size)
        self.bit_offset += decl.bit_width
        if self.bit_offset >= unit_bits:
            # a narrower field can close a unit opened by a wider one
            self.byte_offset = self._unit_end
            self.bit_offset = 0

        return placed

    def add(self, decl: FieldDecl, statement: str = "") -> None:
        """Place one declared field and record it unless it is anonymous."""
        if decl.is_bit_field:
            unit_bits = type_size(decl.type) * 8
            if decl.bit_width > unit_bits:
                self.warn(
                    statement, f"bit width {decl.bit_width} exceeds {unit_bits}-bit {decl.type}"
                )
                return
            placed = self.place_bit_field(decl)
        else:
            placed = self.place_plain(decl)

        logger.debug(
            "placed %s %r at byte %d bit %d (size %d)",
            placed.type,
            placed.name,
            placed.byte_offset,
            placed.bit_offset,
            placed.size,
        )

        if not placed.is_anonymous:
            self.fields.append(placed)

    def warn(self, statement: str, message: str) -> None:
        logger.warning("Skipping field %r: %s", statement, message)
        self.warnings.append(ParseWarning(statement=statement, message=message))

    @property
    def total_size(self) -> int:
        if self.bit_offset == 0:
            return self.byte_offset
        if self.options.tail_padding == TailPadding.UNIT:
            return max(self._unit_end, self.byte_offset + 1)
        return self.byte_offset + 1


def layout(
    statements: Iterable[str],
    options: LayoutOptions = DEFAULT_OPTIONS,
) -> LayoutCalculator:
    """Classify and place every statement of a struct body."""
    calc = LayoutCalculator(options)

    for statement in statements:
        decl = classify(statement)
        if decl is None:
            calc.warn(statement, "could not parse field")
            continue
        calc.add(decl, statement)

    return calc


def parse(text: str, options: LayoutOptions | None = None) -> RecordInfo:
    """Parse a struct declaration and compute its layout."""
    options = options or DEFAULT_OPTIONS

    normalized = normalize(text)
    name = record_name(normalized)
    statements = split_statements(record_body(normalized))

    calc = layout(statements, options)

    return RecordInfo(
        name=name,
        fields=tuple(calc.fields),
        total_size=calc.total_size,
        warnings=tuple(calc.warnings),
    )
