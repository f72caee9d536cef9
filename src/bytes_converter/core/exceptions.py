"""Custom exceptions for the byte converter.

Conversion failures on data are reported through a ``None`` return value, not
exceptions. The exceptions below cover programmer errors, such as building
format options with an unusable precision.

Example:
    try:
        options = FormatOptions(decimal_places=-1)
    except InvalidOptionError as e:
        console.print(f"[red]Bad options: {e}")
"""


class ByteConverterError(Exception):
    """Base exception for byte converter errors."""


class InvalidOptionError(ByteConverterError, ValueError):
    """Raised when a format option has an unsupported value."""
