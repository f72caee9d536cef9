"""Render byte counts as human-readable strings.

The formatter picks a unit (forced or by magnitude), scales the signed
value, rounds it half away from zero to the requested precision, and then
post-processes the fixed-point string:
- Trailing zero decimals are stripped unless fixed decimals are requested
- A thousands separator is inserted into the integer part
- The unit separator and unit label are appended

Example:
    format_bytes(1536)  # "1.5KB"
    format_bytes(2048, FormatOptions(fixed_decimals=True))  # "2.00KB"
    format_bytes(float("inf"))  # None
"""

import math
import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from .options import FormatOptions, resolve_options
from .units import BYTE_MULTIPLIERS, lookup_multiplier, select_unit

# "1.00" -> "1", "1.50" -> "1.5"; a zero inside the decimals stops the trim
_TRAILING_DECIMALS_RE = re.compile(r"(?:\.0*|(\.[^0]+)0+)$")
_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))", re.ASCII)


def is_number(value: object) -> bool:
    """Return True for ints and floats, excluding bools."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def to_fixed(value: float, decimal_places: int) -> str:
    """Format ``value`` with exactly ``decimal_places`` digits after the point.

    Ties are rounded away from zero on the exact binary value of the float.
    The result never uses exponent notation.
    """
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # Enough precision for every integer digit plus the requested decimals
        ctx.prec = max(28, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def strip_trailing_decimals(text: str) -> str:
    return _TRAILING_DECIMALS_RE.sub(lambda m: m.group(1) or "", text)


def group_thousands(text: str, separator: str) -> str:
    """Insert ``separator`` every three digits of the integer part of ``text``."""
    integer, dot, fraction = text.partition(".")
    integer = _THOUSANDS_RE.sub(lambda _: separator, integer)
    return integer + dot + fraction


def format_bytes(
    value: float,
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> str | None:
    """Format a byte count into a human-readable string.

    Negative values keep their sign. Floats are rounded to the requested
    number of decimal places.

    Args:
        value: Number of bytes, int or float
        options: FormatOptions, a mapping of option names, or None for defaults

    Returns:
        str | None: Formatted string such as ``"1.5KB"``, or None when the
            value is not a finite number
    """
    if not is_number(value):
        return None
    try:
        if not math.isfinite(value):
            return None
    except OverflowError:
        # int too large to become a float
        return None

    opts = resolve_options(options)

    label = opts.unit
    multiplier = lookup_multiplier(label)
    if multiplier is None:
        label = select_unit(abs(value))
        multiplier = BYTE_MULTIPLIERS[label.lower()]

    scaled = value / multiplier
    if scaled == 0:
        # -0.0 prints without a sign
        scaled = 0.0
    text = to_fixed(scaled, opts.decimal_places)

    if not opts.fixed_decimals:
        text = strip_trailing_decimals(text)

    if opts.thousands_separator:
        text = group_thousands(text, opts.thousands_separator)

    return f"{text}{opts.unit_separator}{label}"
