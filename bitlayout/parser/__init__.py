"""Struct declaration parser and layout engine."""

from .catalog import PRIMITIVE_TYPES as PRIMITIVE_TYPES
from .catalog import TYPE_SIZES as TYPE_SIZES
from .catalog import type_size as type_size
from .layout import LayoutCalculator as LayoutCalculator
from .layout import parse as parse
from .types import *
