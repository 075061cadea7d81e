"""Code units: addresses, the unit-ops protocol and its concrete policies."""

from strview.core.units.core import (
    CHAR8,
    CHAR16,
    CHAR32,
    WCHAR,
    IntegerUnitOps,
    TextUnitOps,
    UnitOpsBase,
)
from strview.core.units.models import Address, UnitOps, UnterminatedBufferWarning

__all__ = [
    # Models
    "Address",
    "UnitOps",
    "UnterminatedBufferWarning",
    # Policies
    "UnitOpsBase",
    "IntegerUnitOps",
    "TextUnitOps",
    "CHAR8",
    "CHAR16",
    "CHAR32",
    "WCHAR",
]
