"""Bitlayout - Binary layout and field access for C-like struct declarations."""

from importlib.metadata import PackageNotFoundError, version

from .access import describe, field_type, read, size_of, write, write_float, write_int
from .errors import *
from .parser import FieldInfo, LayoutOptions, ParseWarning, RecordInfo, TailPadding, parse

try:
    __version__ = version("bitlayout")
except PackageNotFoundError:
    __version__ = "(local)"
