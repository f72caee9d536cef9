"""Dispatch a value to the formatter or the parser based on its type.

Strings are parsed into byte counts, numbers are formatted into strings,
and anything else yields None.

Example:
    convert("1KB")  # 1024
    convert(1024)  # "1KB"
    convert(None)  # None
"""

from collections.abc import Mapping
from typing import Any

from .formatter import format_bytes, is_number
from .options import FormatOptions
from .parser import parse_bytes


def convert(
    value: object,
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> str | int | float | None:
    """Format numbers and parse strings; options only apply to numbers."""
    if isinstance(value, str):
        return parse_bytes(value)
    if is_number(value):
        return format_bytes(value, options)
    return None
