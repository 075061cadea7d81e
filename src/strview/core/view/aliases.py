"""Named view instantiations for the common code unit widths."""

from strview.core.units import CHAR8, CHAR16, CHAR32, WCHAR
from strview.core.view.core import BasicStringView


class StringView(BasicStringView[int]):
    """View over 8-bit code units (bytes, bytearray, mmap, ...)."""

    traits = CHAR8
    __slots__ = ()


class U16StringView(BasicStringView[int]):
    """View over 16-bit code units (e.g. array.array("H"))."""

    traits = CHAR16
    __slots__ = ()


class U32StringView(BasicStringView[int]):
    """View over 32-bit code units (e.g. array.array("I"))."""

    traits = CHAR32
    __slots__ = ()


class WStringView(BasicStringView[str]):
    """View over a Python str, the platform-native wide string."""

    traits = WCHAR
    __slots__ = ()
