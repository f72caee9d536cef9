"""Byte units and their multipliers.

Units are powers of 1024, from bytes up to petabytes. Lookups are
case-insensitive and the table itself is read-only.

Example:
    select_unit(1536)  # Unit.KB
    lookup_multiplier("mb")  # 1048576
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Final

BYTES_PER_KB: Final = 1 << 10
BYTES_PER_MB: Final = 1 << 20
BYTES_PER_GB: Final = 1 << 30
BYTES_PER_TB: Final = 1024**4
BYTES_PER_PB: Final = 1024**5


class Unit(StrEnum):
    """Supported unit labels, as printed for auto-selected units."""

    B = "B"
    KB = "KB"
    MB = "MB"
    GB = "GB"
    TB = "TB"
    PB = "PB"


BYTE_MULTIPLIERS: Final = MappingProxyType(
    {
        "b": 1,
        "kb": BYTES_PER_KB,
        "mb": BYTES_PER_MB,
        "gb": BYTES_PER_GB,
        "tb": BYTES_PER_TB,
        "pb": BYTES_PER_PB,
    }
)

# Largest first, for magnitude-based selection
_SELECTION_ORDER: Final = (Unit.PB, Unit.TB, Unit.GB, Unit.MB, Unit.KB)


def lookup_multiplier(code: str) -> int | None:
    """Return the multiplier for a unit code, ignoring case.

    Args:
        code: Unit code such as ``"KB"`` or ``"kb"``

    Returns:
        int | None: The multiplier, or None for empty or unknown codes
    """
    if not code:
        return None
    return BYTE_MULTIPLIERS.get(code.lower())


def select_unit(magnitude: float) -> Unit:
    """Pick the largest unit whose multiplier does not exceed ``magnitude``."""
    for unit in _SELECTION_ORDER:
        if magnitude >= BYTE_MULTIPLIERS[unit.lower()]:
            return unit
    return Unit.B
