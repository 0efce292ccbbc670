"""Reading and writing struct fields in raw buffers."""

from .accessor import field_type as field_type
from .accessor import read as read
from .accessor import read_field as read_field
from .accessor import size_of as size_of
from .accessor import write as write
from .accessor import write_field as write_field
from .convenience import describe as describe
from .convenience import write_float as write_float
from .convenience import write_int as write_int
