"""Unit-ops models: the policy protocol and code unit addresses.

A unit-ops policy is the small set of pure functions a view is parameterized over.
It knows how to compare code units, how to find a terminator, and how to turn a
Python container into a readable buffer without copying it.

Usage:
    addr = Address(b"hello\\0world")
    addr[1]          # 101
    (addr + 6)[0]    # 119
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any, Protocol, runtime_checkable


class UnterminatedBufferWarning(UserWarning):
    """Terminator scan reached the end of the buffer without finding a terminator."""

    pass


@dataclass(frozen=True, slots=True, eq=False)
class Address:
    """Position of a code unit inside a buffer.

    Addresses never own or copy the buffer, they only remember where to read.
    """

    buffer: Any
    offset: int = 0

    def __add__(self, n: int) -> Address:
        return Address(self.buffer, self.offset + n)

    def __getitem__(self, i: int) -> Any:
        return self.buffer[self.offset + i]


@runtime_checkable
class UnitOps[U](Protocol):
    """Policy a view instantiation is parameterized over."""

    empty: Any
    """Empty buffer used for views that do not reference any storage."""

    def eq(self, a: U, b: U) -> bool:
        """Unit equality."""
        ...

    def lt(self, a: U, b: U) -> bool:
        """Unit ordering."""
        ...

    def length(self, buffer: Any, offset: int) -> int:
        """Run length from offset to the first terminator."""
        ...

    def compare(self, b1: Any, o1: int, b2: Any, o2: int, count: int) -> int:
        """Lexicographic compare of count units. Returns -1, 0 or 1."""
        ...

    def bind(self, source: Any) -> Any:
        """Readable zero-copy buffer over source. Raises TypeError if incompatible."""
        ...

    def accepts(self, source: Any) -> bool:
        """Check if bind() would accept source."""
        ...

    def is_unit(self, obj: Any) -> bool:
        """Check if obj is a single code unit."""
        ...

    def unit_buffer(self, unit: U) -> Any:
        """One-element buffer holding unit."""
        ...

    def assign(self, dst: Any, dst_off: int, src: Any, src_off: int, count: int) -> None:
        """Copy count units from src into the mutable dst."""
        ...

    def to_str(self, buffer: Any, offset: int, count: int) -> str:
        """Text rendering with one character per code unit."""
        ...

    def materialize(self, buffer: Any, offset: int, count: int) -> Any:
        """Owned copy of the range."""
        ...

    def export(self, buffer: Any, offset: int, count: int) -> memoryview:
        """Read-only memoryview of the range for the buffer protocol."""
        ...

    def write(self, stream: IO[Any], buffer: Any, offset: int, count: int) -> None:
        """Write the range to stream without transcoding the units."""
        ...

    def hash(self, buffer: Any, offset: int, count: int) -> int:
        """Hash consistent with compare() == 0."""
        ...
