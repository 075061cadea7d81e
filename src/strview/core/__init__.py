"""Core primitives: code units, policies and views."""

from strview.core.types import NPOS, Span
from strview.core.units import (
    CHAR8,
    CHAR16,
    CHAR32,
    WCHAR,
    Address,
    IntegerUnitOps,
    TextUnitOps,
    UnitOps,
    UnitOpsBase,
    UnterminatedBufferWarning,
)
from strview.core.view import (
    BasicStringView,
    OutOfRangeError,
    PreconditionError,
    StringView,
    U16StringView,
    U32StringView,
    WStringView,
)

__all__ = [
    # Types
    "NPOS",
    "Span",
    # Units
    "Address",
    "UnitOps",
    "UnitOpsBase",
    "IntegerUnitOps",
    "TextUnitOps",
    "UnterminatedBufferWarning",
    "CHAR8",
    "CHAR16",
    "CHAR32",
    "WCHAR",
    # Views
    "BasicStringView",
    "StringView",
    "U16StringView",
    "U32StringView",
    "WStringView",
    "OutOfRangeError",
    "PreconditionError",
]
