"""Non-owning, read-only view over a contiguous run of code units.

A view is a (buffer, offset, size) triple plus the operations of a read-only
string. It never copies or owns the buffer: sub-views produced by slicing,
substr() or trimming keep referencing the same storage.

Usage:
    data = b"hello world"
    v = StringView(data)
    v.find(b"world")               # 6
    v.substr(0, 5) == b"hello"     # True, no copy of data made
    v.remove_prefix(6)
    str(v)                         # 'world'

Borrow contract:
    A view keeps a reference to its buffer, so the buffer cannot be freed under
    it, and exporters such as bytearray refuse to resize while a view exists.
    Mutating the buffer in place is still visible through every view over it.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import IO, Any, ClassVar, Self

from strview.config import get_settings
from strview.core.types import NPOS, Span
from strview.core.units import Address, UnitOps
from strview.core.view import operations
from strview.core.view.models import OutOfRangeError, PreconditionError


def _checking() -> bool:
    return get_settings().check_preconditions


class BasicStringView[U](Sequence[U]):
    """View generic over its code unit type U.

    Concrete views subclass this and bind a unit-ops policy to ``traits``:

        class StringView(BasicStringView[int]):
            traits = CHAR8

    Construction:
        View()                      -- empty view without storage
        View(container)             -- borrow the container's full size
        View(container, n)          -- first n units of container
        View(Address(buf, i))       -- units from i up to the terminator
        View(Address(buf, i), n)    -- n units from i, no scan
        View(other_view[, n])       -- same storage as other_view

    Only at(), copy() and substr() check positions at run time. Other
    preconditions are the caller's responsibility and are only checked when
    ``check_preconditions`` is enabled in the settings.
    """

    traits: ClassVar[UnitOps[Any]]
    npos: ClassVar[int] = NPOS

    __slots__ = ("_buffer", "_offset", "_size")

    def __init__(self, source: Any = None, length: int | None = None) -> None:
        ops = self.traits
        if source is None:
            buffer, offset, size = None, 0, 0
        elif isinstance(source, BasicStringView):
            self._require_compatible(source)
            buffer, offset = source._buffer, source._offset
            size = source._size if length is None else length
        elif isinstance(source, Address):
            buffer, offset = ops.bind(source.buffer), source.offset
            size = ops.length(buffer, offset) if length is None else length
        else:
            buffer, offset = ops.bind(source), 0
            size = len(buffer) if length is None else length

        if length is not None and _checking():
            available = 0 if buffer is None else len(buffer) - offset
            if not 0 <= length <= available:
                raise PreconditionError(
                    f"Length {length} exceeds the {available} code units available"
                )

        self._buffer = buffer
        self._offset = offset
        self._size = size

    @classmethod
    def _make(cls, buffer: Any, offset: int, size: int) -> Self:
        view = cls.__new__(cls)
        view._buffer = buffer
        view._offset = offset
        view._size = size
        return view

    def _span(self) -> Span:
        buffer = self.traits.empty if self._buffer is None else self._buffer
        return buffer, self._offset, self._size

    def _compatible(self, other: BasicStringView[Any]) -> bool:
        return type(other).traits is type(self).traits

    def _require_compatible(self, other: BasicStringView[Any]) -> None:
        if not self._compatible(other):
            raise TypeError(f"Cannot mix {type(self).__name__} and {type(other).__name__}")

    def _coerce(self, pattern: Any, count: int | None = None) -> BasicStringView[U]:
        """Turn a search/compare argument into a view of the same kind.

        Single units become one-element views. When count is given the pattern
        is bound to exactly that many units without a terminator scan.
        """
        cls = type(self)
        if isinstance(pattern, BasicStringView):
            self._require_compatible(pattern)
            return pattern if count is None else cls(pattern, count)
        if self.traits.is_unit(pattern):
            return cls._make(self.traits.unit_buffer(pattern), 0, 1)
        return cls(pattern) if count is None else cls(pattern, count)

    # Capacity

    def size(self) -> int:
        return self._size

    def length(self) -> int:
        return self._size

    def max_size(self) -> int:
        return NPOS

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    # Element access

    def data(self) -> Address | None:
        """Address of the first unit, or None for a view without storage."""
        if self._buffer is None:
            return None
        return Address(self._buffer, self._offset)

    def __getitem__(self, key: Any) -> Any:
        """Unchecked unit access, or a sub-view for a step-1 slice.

        Slices follow Python clamping rules and never raise.
        """
        if isinstance(key, slice):
            start, stop, step = key.indices(self._size)
            if step != 1:
                raise ValueError(f"{type(self).__name__} slicing does not support a step")
            return self._make(self._buffer, self._offset + start, max(stop - start, 0))
        if _checking() and not 0 <= key < self._size:
            raise PreconditionError(f"Index {key} out of range for view of length {self._size}")
        return self._buffer[self._offset + key]  # type: ignore[index]

    def at(self, pos: int) -> U:
        """Checked unit access.

        Raises:
            OutOfRangeError: If pos is not in [0, size()).
        """
        if not 0 <= pos < self._size:
            raise OutOfRangeError(
                f"{type(self).__name__}.at: position {pos} out of range "
                f"for view of length {self._size}"
            )
        return self._buffer[self._offset + pos]  # type: ignore[index]

    def front(self) -> U:
        if _checking() and self._size == 0:
            raise PreconditionError("front() called on an empty view")
        return self._buffer[self._offset]  # type: ignore[index]

    def back(self) -> U:
        if _checking() and self._size == 0:
            raise PreconditionError("back() called on an empty view")
        return self._buffer[self._offset + self._size - 1]  # type: ignore[index]

    # Iteration

    def __iter__(self) -> Iterator[U]:
        buffer, offset = self._buffer, self._offset
        for i in range(offset, offset + self._size):
            yield buffer[i]  # type: ignore[index]

    def __reversed__(self) -> Iterator[U]:
        buffer, offset = self._buffer, self._offset
        for i in range(offset + self._size - 1, offset - 1, -1):
            yield buffer[i]  # type: ignore[index]

    # Modifiers

    def remove_prefix(self, n: int) -> None:
        """Narrow the view by dropping its first n units. Requires n <= size()."""
        if _checking() and not 0 <= n <= self._size:
            raise PreconditionError(f"remove_prefix({n}) on a view of length {self._size}")
        self._offset += n
        self._size -= n

    def remove_suffix(self, n: int) -> None:
        """Narrow the view by dropping its last n units. Requires n <= size()."""
        if _checking() and not 0 <= n <= self._size:
            raise PreconditionError(f"remove_suffix({n}) on a view of length {self._size}")
        self._size -= n

    def swap(self, other: BasicStringView[U]) -> None:
        """Exchange storage and bounds with other. The referenced data is untouched."""
        self._require_compatible(other)
        self._buffer, other._buffer = other._buffer, self._buffer
        self._offset, other._offset = other._offset, self._offset
        self._size, other._size = other._size, self._size

    # String operations

    def copy(self, destination: Any, max_count: int, pos: int = 0) -> int:
        """Copy up to max_count units starting at pos into destination.

        Args:
            destination: Mutable sequence, or an Address into one, with room for
                the copied units.
            max_count: Maximum number of units to copy.
            pos: First unit of this view to copy.

        Returns:
            Number of units copied, min(max_count, size() - pos).

        Raises:
            OutOfRangeError: If pos > size().
        """
        if not 0 <= pos <= self._size:
            raise OutOfRangeError(
                f"{type(self).__name__}.copy: position {pos} out of range "
                f"for view of length {self._size}"
            )
        rlen = min(max_count, self._size - pos)
        dst = destination if isinstance(destination, Address) else Address(destination)
        buffer, offset, _ = self._span()
        self.traits.assign(dst.buffer, dst.offset, buffer, offset + pos, rlen)
        return rlen

    def substr(self, pos: int = 0, count: int = NPOS) -> Self:
        """Sub-view over [pos, pos + min(count, size() - pos)).

        Raises:
            OutOfRangeError: If pos > size().
        """
        if not 0 <= pos <= self._size:
            raise OutOfRangeError(
                f"{type(self).__name__}.substr: position {pos} out of range "
                f"for view of length {self._size}"
            )
        return self._make(self._buffer, self._offset + pos, min(count, self._size - pos))

    def to_string(self) -> Any:
        """Owned copy of the viewed units (bytes, array.array or str)."""
        return self.traits.materialize(*self._span())

    def compare(
        self,
        other: Any,
        pos: int = 0,
        count: int = NPOS,
        other_pos: int = 0,
        other_count: int = NPOS,
    ) -> int:
        """Three-way compare substr(pos, count) with other's sub-range.

        Args:
            other: View, Address (terminator-delimited) or container.
            pos: Start of this view's sub-range.
            count: Length of this view's sub-range.
            other_pos: Start of other's sub-range.
            other_count: Length of other's sub-range.

        Returns:
            Negative, zero or positive (-1, 0, 1).

        Raises:
            OutOfRangeError: If pos or other_pos exceeds its view's length.
        """
        this = self.substr(pos, count)
        that = self._coerce(other).substr(other_pos, other_count)
        return operations.compare_spans(self.traits, this._span(), that._span())

    # Searching

    def find(self, pattern: Any, pos: int = 0, count: int | None = None) -> int:
        """Index of the first occurrence of pattern at or after pos, or NPOS.

        pattern may be a view, a single unit, an Address or a container; count
        restricts it to its first count units.
        """
        needle = self._coerce(pattern, count)
        return operations.find(self.traits, self._span(), needle._span(), pos)

    def rfind(self, pattern: Any, pos: int = NPOS, count: int | None = None) -> int:
        """Index of the last occurrence of pattern starting at or before pos, or NPOS."""
        needle = self._coerce(pattern, count)
        return operations.rfind(self.traits, self._span(), needle._span(), pos)

    def find_first_of(self, units: Any, pos: int = 0, count: int | None = None) -> int:
        units = self._coerce(units, count)
        return operations.find_first_of(self.traits, self._span(), units._span(), pos)

    def find_last_of(self, units: Any, pos: int = NPOS, count: int | None = None) -> int:
        units = self._coerce(units, count)
        return operations.find_last_of(self.traits, self._span(), units._span(), pos)

    def find_first_not_of(self, units: Any, pos: int = 0, count: int | None = None) -> int:
        units = self._coerce(units, count)
        return operations.find_first_not_of(self.traits, self._span(), units._span(), pos)

    def find_last_not_of(self, units: Any, pos: int = NPOS, count: int | None = None) -> int:
        units = self._coerce(units, count)
        return operations.find_last_not_of(self.traits, self._span(), units._span(), pos)

    def __contains__(self, item: Any) -> bool:
        return self.find(item) != NPOS

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        """Sequence.index over the units, bounded by the view rather than by IndexError."""
        start, stop, _ = slice(start, stop).indices(self._size)
        buffer, offset, _ = self._span()
        for i in range(start, stop):
            if self.traits.eq(buffer[offset + i], value):
                return i
        raise ValueError(f"{value!r} is not in {type(self).__name__}")

    # Comparison operators

    def _order(self, other: Any) -> int | None:
        if isinstance(other, BasicStringView):
            if not self._compatible(other):
                return None
        elif self.traits.accepts(other):
            other = type(self)(other)
        else:
            return None
        return operations.compare_spans(self.traits, self._span(), other._span())

    def __eq__(self, other: object) -> bool:
        result = self._order(other)
        return NotImplemented if result is None else result == 0

    def __ne__(self, other: object) -> bool:
        result = self._order(other)
        return NotImplemented if result is None else result != 0

    def __lt__(self, other: Any) -> bool:
        result = self._order(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._order(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._order(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._order(other)
        return NotImplemented if result is None else result >= 0

    def __hash__(self) -> int:
        return self.traits.hash(*self._span())

    # Output

    def __str__(self) -> str:
        """Render each code unit as one character (chr of its value).

        For 8-bit views this is a latin-1 decode, not a UTF-8 one. Use
        write_to() or bytes(view) to get the units unmodified.
        """
        return self.traits.to_str(*self._span())

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        limit = get_settings().repr_limit
        buffer, offset, size = self._span()
        text = self.traits.to_str(buffer, offset, min(size, limit))
        if size > limit:
            return f"{type(self).__name__}({text!r}..., length={size})"
        return f"{type(self).__name__}({text!r})"

    def write_to(self, stream: IO[Any]) -> IO[Any]:
        """Write the units, unmodified and unescaped, to stream.

        Integer views write their raw bytes. A text file or sys.stdout receives
        them through its underlying binary buffer, so UTF-8 held in a StringView
        comes out as the same UTF-8. str-backed views need a text stream.

        Returns:
            The stream, so writes can be chained.
        """
        self.traits.write(stream, *self._span())
        return stream

    def __buffer__(self, flags: int) -> memoryview:
        return self.traits.export(*self._span())

    # Value semantics

    def __copy__(self) -> Self:
        return self._make(self._buffer, self._offset, self._size)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        # Views never own their storage, so a deep copy still aliases it
        return self.__copy__()
