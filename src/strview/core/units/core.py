"""Concrete unit-ops policies.

IntegerUnitOps covers fixed-width integer code units held in any buffer-protocol
object (bytes, bytearray, array.array, mmap, memoryview). TextUnitOps covers
Python str, whose code units are one-character strings.

Usage:
    buf = CHAR8.bind(b"abc")             # memoryview, no copy
    CHAR8.compare(buf, 0, buf, 1, 2)     # -1
    WCHAR.length("ab\\0cd", 0)           # 2
"""

from __future__ import annotations

import io
import warnings
from array import array
from collections.abc import Buffer
from pathlib import Path
from typing import IO, Any

from strview.config import get_settings
from strview.core.units.models import UnterminatedBufferWarning

# Warnings are attributed to the first caller outside this package
_PACKAGE_DIR = str(Path(__file__).resolve().parents[2])

_TYPECODES = {
    8: "B",
    16: "H",
    32: "I" if array("I").itemsize == 4 else "L",
}


class UnitOpsBase[U]:
    """Generic unit-ops built on eq() and lt().

    Subclasses relaxing eq()/lt() (e.g. case folding) get compare() and length()
    for free, but must override hash() to stay consistent with equality.
    """

    terminator: Any = None
    empty: Any = None

    def eq(self, a: U, b: U) -> bool:
        return a == b

    def lt(self, a: U, b: U) -> bool:
        return a < b  # type: ignore[operator]

    def length(self, buffer: Any, offset: int) -> int:
        """Count units from offset up to the first terminator.

        Args:
            buffer: Bound buffer to scan.
            offset: Index of the first unit.

        Returns:
            Number of units before the terminator. If the buffer ends first, the
            remaining unit count (and an UnterminatedBufferWarning is emitted).
        """
        end = len(buffer)
        i = offset
        while i < end:
            if self.eq(buffer[i], self.terminator):
                return i - offset
            i += 1
        self._unterminated(end - offset)
        return end - offset

    def compare(self, b1: Any, o1: int, b2: Any, o2: int, count: int) -> int:
        for i in range(count):
            a, b = b1[o1 + i], b2[o2 + i]
            if not self.eq(a, b):
                return -1 if self.lt(a, b) else 1
        return 0

    def assign(self, dst: Any, dst_off: int, src: Any, src_off: int, count: int) -> None:
        for i in range(count):
            dst[dst_off + i] = src[src_off + i]

    def _unterminated(self, scanned: int) -> None:
        if get_settings().warn_unterminated:
            warnings.warn(
                f"No terminator found in {scanned} code units. "
                f"The end of the buffer is used instead.",
                UnterminatedBufferWarning,
                stacklevel=2,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )


class IntegerUnitOps(UnitOpsBase[int]):
    """Integer code units of a fixed bit width, bound through memoryview.

    Args:
        bits: Code unit width, one of 8, 16 or 32.
    """

    terminator = 0

    def __init__(self, bits: int):
        if bits not in _TYPECODES:
            raise ValueError(f"Unsupported code unit width {bits}, expected one of 8, 16, 32")
        self.bits = bits
        self.width = bits // 8
        self.typecode = _TYPECODES[bits]
        self.empty = memoryview(array(self.typecode)).toreadonly()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bits={self.bits})"

    def bind(self, source: Any) -> memoryview:
        """Wrap source in a 1-D memoryview of this width's format.

        Raises:
            TypeError: If source is not a buffer or its items have another width.
        """
        view = memoryview(source)
        if view.itemsize != self.width:
            raise TypeError(
                f"{type(source).__name__} holds {view.itemsize}-byte items, "
                f"expected {self.width}-byte code units"
            )
        if view.ndim != 1 or view.format != self.typecode:
            view = view.cast("B").cast(self.typecode)
        return view

    def accepts(self, source: Any) -> bool:
        if not isinstance(source, Buffer):
            return False
        with memoryview(source) as view:
            return view.itemsize == self.width

    def is_unit(self, obj: Any) -> bool:
        return isinstance(obj, int)

    def unit_buffer(self, unit: int) -> memoryview:
        return memoryview(array(self.typecode, [unit]))

    def compare(self, b1: Any, o1: int, b2: Any, o2: int, count: int) -> int:
        # memoryview equality runs in C, only walk the units on a mismatch
        if b1[o1 : o1 + count] == b2[o2 : o2 + count]:
            return 0
        return super().compare(b1, o1, b2, o2, count)

    def to_str(self, buffer: Any, offset: int, count: int) -> str:
        units = buffer[offset : offset + count]
        if self.bits == 8:
            return units.tobytes().decode("latin-1")
        return "".join(map(chr, units.tolist()))

    def materialize(self, buffer: Any, offset: int, count: int) -> bytes | array:
        raw = buffer[offset : offset + count].tobytes()
        if self.bits == 8:
            return raw
        return array(self.typecode, raw)

    def export(self, buffer: Any, offset: int, count: int) -> memoryview:
        return buffer[offset : offset + count].toreadonly()

    def write(self, stream: IO[Any], buffer: Any, offset: int, count: int) -> None:
        """Write the raw units to stream.

        Binary streams get the units' bytes in native byte order. Text streams
        backed by a binary layer (open files, sys.stdout) are flushed and the
        bytes go to that layer, bypassing the text encoder. A text stream with no
        binary layer (io.StringIO) gets the one-character-per-unit rendering.
        """
        units = self.export(buffer, offset, count)
        if isinstance(stream, io.TextIOBase):
            raw = getattr(stream, "buffer", None)
            if raw is None:
                stream.write(self.to_str(buffer, offset, count))
                return
            stream.flush()
            stream = raw
        stream.write(units)

    def hash(self, buffer: Any, offset: int, count: int) -> int:
        units = buffer[offset : offset + count]
        if self.bits == 8:
            return hash(units.tobytes())
        return hash(tuple(units.tolist()))


class TextUnitOps(UnitOpsBase[str]):
    """Code units of a Python str (one character each)."""

    terminator = "\0"
    empty = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def bind(self, source: Any) -> str:
        if not isinstance(source, str):
            raise TypeError(f"Expected str, got {type(source).__name__}")
        return source

    def accepts(self, source: Any) -> bool:
        return isinstance(source, str)

    def is_unit(self, obj: Any) -> bool:
        return isinstance(obj, str) and len(obj) == 1

    def unit_buffer(self, unit: str) -> str:
        return unit

    def length(self, buffer: Any, offset: int) -> int:
        end = buffer.find(self.terminator, offset)
        if end == -1:
            self._unterminated(len(buffer) - offset)
            return len(buffer) - offset
        return end - offset

    def to_str(self, buffer: Any, offset: int, count: int) -> str:
        return buffer[offset : offset + count]

    def materialize(self, buffer: Any, offset: int, count: int) -> str:
        return buffer[offset : offset + count]

    def export(self, buffer: Any, offset: int, count: int) -> memoryview:
        raise TypeError("str-backed views do not support the buffer protocol")

    def write(self, stream: IO[Any], buffer: Any, offset: int, count: int) -> None:
        if not isinstance(stream, io.TextIOBase):
            raise TypeError(f"str-backed views need a text stream, got {type(stream).__name__}")
        stream.write(buffer[offset : offset + count])

    def hash(self, buffer: Any, offset: int, count: int) -> int:
        return hash(buffer[offset : offset + count])


CHAR8 = IntegerUnitOps(8)
CHAR16 = IntegerUnitOps(16)
CHAR32 = IntegerUnitOps(32)
WCHAR = TextUnitOps()
