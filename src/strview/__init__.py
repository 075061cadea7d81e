"""strview: non-owning, read-only string views for Python.

Usage:
    from strview import StringView, NPOS

    data = b"hello world"
    v = StringView(data)            # borrows data, nothing is copied
    v.find(b"world")                # 6
    v.rfind(ord("o"))               # 7
    v.find_first_of(b"lo")          # 2
    v.substr(6) == b"world"         # True

    with open("out.txt", "w") as f:
        v.write_to(f)
"""

__version__ = "0.1.0"

# Core primitives
from strview.core import (
    CHAR8,
    CHAR16,
    CHAR32,
    NPOS,
    WCHAR,
    Address,
    IntegerUnitOps,
    TextUnitOps,
    UnitOps,
    UnitOpsBase,
    UnterminatedBufferWarning,
)

# Views
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
    # Version
    "__version__",
    # Core
    "NPOS",
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
    # Errors
    "OutOfRangeError",
    "PreconditionError",
]
