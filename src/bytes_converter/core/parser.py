"""Parse human-readable byte strings into byte counts.

Strings of the form ``[sign]digits[.digits][spaces]unit`` with a unit of
kb, mb, gb, tb or pb (any case) are scaled by the unit multiplier. Anything
else is read as a plain base-10 integer number of bytes: leading whitespace
is skipped and parsing stops at the first non-digit, so ``"3.7"`` gives 3
and ``"512b"`` gives 512. Text without a leading integer yields NaN.

Example:
    parse_bytes("1.5GB")  # 1610612736
    parse_bytes("100")  # 100
    parse_bytes(512)  # 512
"""

import math
import re
from typing import Final

from loguru import logger

from .formatter import is_number
from .units import BYTE_MULTIPLIERS

_SIZE_RE: Final = re.compile(r"((-|\+)?(\d+(?:\.\d+)?)) *(kb|mb|gb|tb|pb)", re.IGNORECASE | re.ASCII)
_LEADING_INT_RE: Final = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(text: str) -> float:
    """Read the integer at the start of ``text``, or NaN if there is none."""
    match = _LEADING_INT_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def parse_bytes(value: float | str) -> int | float | None:
    """Parse a byte string into an integer number of bytes.

    Numbers other than NaN are returned unchanged. The scaled result is
    floored, so negative fractional results round toward negative infinity.

    Args:
        value: Byte count or string such as ``"1KB"`` or ``"-2.5 mb"``

    Returns:
        int | float | None: Number of bytes; NaN when a string has no leading
            integer, infinity when the result overflows; None when ``value``
            is neither a number nor a string
    """
    if is_number(value) and not (isinstance(value, float) and math.isnan(value)):
        return value
    if not isinstance(value, str):
        return None

    match = _SIZE_RE.fullmatch(value)
    if match:
        number = float(match.group(1))
        unit = match.group(4).lower()
    else:
        logger.debug(f"No unit in {value!r}, reading it as a plain byte count")
        number = parse_leading_int(value)
        unit = "b"

    result = BYTE_MULTIPLIERS[unit] * number
    if not math.isfinite(result):
        return result
    return math.floor(result)
