"""Core conversion routines.

This package contains the pieces behind the public API:
- The unit table and unit selection
- Format options and their validation
- The formatter (bytes to string)
- The parser (string to bytes)
- The dispatching converter
"""

from .converter import convert
from .exceptions import ByteConverterError, InvalidOptionError
from .formatter import format_bytes
from .options import FormatOptions
from .parser import parse_bytes
from .units import BYTE_MULTIPLIERS, Unit

__all__ = [
    "BYTE_MULTIPLIERS",
    "ByteConverterError",
    "convert",
    "format_bytes",
    "FormatOptions",
    "InvalidOptionError",
    "parse_bytes",
    "Unit",
]
