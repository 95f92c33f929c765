"""
Unit string normalization.

Learners type units freely ("N", "newtons", "kN", "N·m", "N m"). Unit
strings are compared after lowercasing, expanding spelled-out names to
their symbols and dropping whitespace and product separators.
"""

from __future__ import annotations

import re
from types import MappingProxyType

UNIT_SYNONYMS = MappingProxyType(
    {
        "kilonewtons": "kn",
        "kilonewton": "kn",
        "newtons": "n",
        "newton": "n",
        "megapascals": "mpa",
        "megapascal": "mpa",
        "kilopascals": "kpa",
        "kilopascal": "kpa",
        "pascals": "pa",
        "pascal": "pa",
        "millimeters": "mm",
        "millimeter": "mm",
        "millimetres": "mm",
        "millimetre": "mm",
        "meters": "m",
        "meter": "m",
        "metres": "m",
        "metre": "m",
        "mètres": "m",
        "mètre": "m",
        "kilograms": "kg",
        "kilogram": "kg",
        "seconds": "s",
        "second": "s",
        "hertz": "hz",
        "radians": "rad",
        "radian": "rad",
        "degrees": "deg",
        "degree": "deg",
        "°": "deg",
    }
)

_SYNONYM_PATTERN = re.compile(
    r"(?<![a-zè])("
    + "|".join(re.escape(name) for name in sorted(UNIT_SYNONYMS, key=len, reverse=True))
    + r")(?![a-zè])"
)
_SEPARATORS = re.compile(r"[\s·.*⋅]+")


def normalize_unit(unit: str | None) -> str:
    """
    Normalize a unit string for comparison.

    >>> normalize_unit("Newton meters")
    'nm'
    >>> normalize_unit(" kN ")
    'kn'
    """
    if not unit:
        return ""
    text = unit.strip().lower()
    text = _SYNONYM_PATTERN.sub(lambda match: UNIT_SYNONYMS[match.group(1)], text)
    return _SEPARATORS.sub("", text)


def units_are_equivalent(unit1: str | None, unit2: str | None) -> bool:
    """Check whether two unit strings denote the same unit."""
    return normalize_unit(unit1) == normalize_unit(unit2)
