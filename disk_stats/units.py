"""
Byte-rate unit conversion.
"""

from typing import Dict

from disk_stats.errors import InvalidUnitError


KiB = 1024
MiB = 1024 * KiB
GiB = 1024 * MiB

# Divisor per output unit, each applied to the original byte value
UNITS: Dict[str, int] = {
    'bytes': 1,
    'KiB': KiB,
    'MiB': MiB,
    'GiB': GiB,
}


def validate_unit(unit: str) -> str:
    """
    Check that a unit name is supported.

    Args:
        unit: Unit name (case-sensitive)

    Returns:
        The unit name unchanged

    Raises:
        InvalidUnitError: If the unit is not one of UNITS
    """
    if not isinstance(unit, str) or unit not in UNITS:
        raise InvalidUnitError(unit, UNITS)
    return unit


def convert(value: float, unit: str) -> float:
    """
    Convert a byte quantity into the requested unit.

    Args:
        value: Quantity in bytes (or bytes/sec)
        unit: One of 'bytes', 'KiB', 'MiB', 'GiB'

    Returns:
        Converted value
    """
    return value / UNITS[validate_unit(unit)]
