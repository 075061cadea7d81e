"""View functionality: the view type, its aliases and the search operations."""

from strview.core.view import operations
from strview.core.view.aliases import StringView, U16StringView, U32StringView, WStringView
from strview.core.view.core import BasicStringView
from strview.core.view.models import OutOfRangeError, PreconditionError

__all__ = [
    # Models
    "OutOfRangeError",
    "PreconditionError",
    # View
    "BasicStringView",
    "StringView",
    "U16StringView",
    "U32StringView",
    "WStringView",
    # Operations
    "operations",
]
