"""Convert byte counts to human-readable strings and back."""

import pathlib
import tomllib

from loguru import logger

from bytes_converter.core.converter import convert
from bytes_converter.core.formatter import format_bytes
from bytes_converter.core.options import FormatOptions
from bytes_converter.core.parser import parse_bytes


def get_version() -> str:
    """Read version from pyproject.toml."""
    current_dir = pathlib.Path(__file__).parent
    for parent in [current_dir] + list(current_dir.parents):
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            with pyproject_path.open("rb") as f:
                pyproject_data = tomllib.load(f)
            return pyproject_data["project"]["version"]

    return "0.0.0"


__version__ = get_version()

# Library code stays quiet unless the application enables it
logger.disable("bytes_converter")

format = format_bytes  # noqa: A001
parse = parse_bytes

__all__ = [
    "convert",
    "format",
    "format_bytes",
    "FormatOptions",
    "parse",
    "parse_bytes",
    "__version__",
]
