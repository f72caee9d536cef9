"""Formatting options for byte strings.

This module defines the options accepted by the formatter:
- Number of decimal places and whether trailing zeros are kept
- Thousands separator for the integer part
- Separator between number and unit
- Forced unit instead of magnitude-based selection

Options can be built directly or from a mapping that uses either the
camelCase names (``decimalPlaces``) or the snake_case field names.

Example:
    options = FormatOptions(decimal_places=1, unit_separator=" ")
    options = FormatOptions.from_mapping({"thousandsSeparator": ","})
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Final

from .exceptions import InvalidOptionError

DEFAULT_DECIMAL_PLACES: Final = 2
MAX_DECIMAL_PLACES: Final = 100

_CAMEL_CASE_KEYS: Final = {
    "decimalPlaces": "decimal_places",
    "fixedDecimals": "fixed_decimals",
    "thousandsSeparator": "thousands_separator",
    "unitSeparator": "unit_separator",
}


@dataclass(frozen=True)
class FormatOptions:
    """Options controlling how a byte count is rendered.

    Attributes:
        decimal_places: Digits after the decimal point (0-100)
        fixed_decimals: Keep trailing zero decimals when True
        thousands_separator: Inserted every three digits of the integer part
        unit_separator: Inserted between the number and the unit
        unit: Force this unit; empty or unknown means auto-select
    """

    decimal_places: int = DEFAULT_DECIMAL_PLACES
    fixed_decimals: bool = False
    thousands_separator: str = ""
    unit_separator: str = ""
    unit: str = ""

    def __post_init__(self) -> None:
        places = self.decimal_places
        if isinstance(places, bool) or not isinstance(places, int):
            raise InvalidOptionError(f"decimal_places must be an integer, got {places!r}")
        if not 0 <= places <= MAX_DECIMAL_PLACES:
            raise InvalidOptionError(
                f"decimal_places must be between 0 and {MAX_DECIMAL_PLACES}, got {places}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a mapping of camelCase or snake_case keys.

        Unknown keys are ignored. Falsy separators and units fall back to
        the empty string, and a missing or None precision keeps the default.
        """
        known = {field.name for field in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in known:
                values[name] = value

        decimal_places = values.get("decimal_places")
        return cls(
            decimal_places=DEFAULT_DECIMAL_PLACES if decimal_places is None else decimal_places,
            fixed_decimals=bool(values.get("fixed_decimals")),
            thousands_separator=values.get("thousands_separator") or "",
            unit_separator=values.get("unit_separator") or "",
            unit=values.get("unit") or "",
        )


DEFAULT_OPTIONS: Final = FormatOptions()


def resolve_options(options: "FormatOptions | Mapping[str, Any] | None") -> FormatOptions:
    """Normalize the accepted option forms into a FormatOptions instance."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.from_mapping(options)
