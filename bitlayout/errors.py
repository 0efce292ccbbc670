"""Exceptions raised by bitlayout."""

__all__ = [
    "BitLayoutError",
    "BufferTooSmallError",
    "FieldNotFoundError",
    "MalformedDeclarationError",
    "UnknownTypeError",
]


class BitLayoutError(RuntimeError):
    """Base exception for layout and field access errors."""


class UnknownTypeError(BitLayoutError):
    """Raised when a field uses a type name missing from the type catalog."""

    def __init__(self, type_name: str):
        super().__init__(f"Unknown type: {type_name}")
        self.type_name = type_name


class MalformedDeclarationError(BitLayoutError):
    """Raised when a declaration has no brace-delimited body."""


class FieldNotFoundError(BitLayoutError):
    """Raised when a read or write names a field the record does not have."""

    def __init__(self, field_name: str):
        super().__init__(f"Field not found: {field_name}")
        self.field_name = field_name


class BufferTooSmallError(BitLayoutError):
    """Raised when a field's storage unit lies past the end of the buffer."""
