"""Pure functions for comparing and searching code unit spans.

These are stateless and know nothing about view objects: each takes a unit-ops
policy and one or two (buffer, offset, size) spans, and returns an index or NPOS.
Matching is a naive linear scan.
"""

from __future__ import annotations

from typing import Any

from strview.core.types import NPOS, Span
from strview.core.units import UnitOps


def compare_spans(ops: UnitOps[Any], a: Span, b: Span) -> int:
    """Three-way compare two spans.

    Compares the common prefix with the policy; if equal, the shorter span
    sorts first.

    Args:
        ops: Unit-ops policy.
        a: Left span.
        b: Right span.

    Returns:
        -1, 0 or 1.
    """
    a_buf, a_off, a_len = a
    b_buf, b_off, b_len = b
    result = ops.compare(a_buf, a_off, b_buf, b_off, min(a_len, b_len))
    if result == 0 and a_len != b_len:
        result = -1 if a_len < b_len else 1
    return result


def _member(ops: UnitOps[Any], unit: Any, units: Span) -> bool:
    buffer, offset, size = units
    for i in range(offset, offset + size):
        if ops.eq(buffer[i], unit):
            return True
    return False


# Substring search


def find(ops: UnitOps[Any], hay: Span, needle: Span, pos: int = 0) -> int:
    """First index >= pos where needle occurs in hay.

    An empty needle matches at min(pos, len(hay)).
    """
    h_buf, h_off, h_len = hay
    n_buf, n_off, n_len = needle
    if n_len == 0:
        return min(pos, h_len)
    if pos > h_len:
        return NPOS
    first = n_buf[n_off]
    for i in range(pos, h_len - n_len + 1):
        at = h_off + i
        if ops.eq(h_buf[at], first) and ops.compare(h_buf, at, n_buf, n_off, n_len) == 0:
            return i
    return NPOS


def rfind(ops: UnitOps[Any], hay: Span, needle: Span, pos: int = NPOS) -> int:
    """Last index <= min(pos, len(hay) - len(needle)) where needle occurs in hay.

    An empty needle matches at min(pos, len(hay)).
    """
    h_buf, h_off, h_len = hay
    n_buf, n_off, n_len = needle
    if n_len > h_len:
        return NPOS
    i = min(pos, h_len - n_len)
    if n_len == 0:
        return i
    first = n_buf[n_off]
    while i >= 0:
        at = h_off + i
        if ops.eq(h_buf[at], first) and ops.compare(h_buf, at, n_buf, n_off, n_len) == 0:
            return i
        i -= 1
    return NPOS


# Character-set search


def _scan_forward(ops: UnitOps[Any], hay: Span, units: Span, pos: int, member: bool) -> int:
    h_buf, h_off, h_len = hay
    for i in range(pos, h_len):
        if _member(ops, h_buf[h_off + i], units) is member:
            return i
    return NPOS


def _scan_backward(ops: UnitOps[Any], hay: Span, units: Span, pos: int, member: bool) -> int:
    h_buf, h_off, h_len = hay
    if h_len == 0:
        return NPOS
    for i in range(min(pos, h_len - 1), -1, -1):
        if _member(ops, h_buf[h_off + i], units) is member:
            return i
    return NPOS


def find_first_of(ops: UnitOps[Any], hay: Span, units: Span, pos: int = 0) -> int:
    """First index >= pos whose unit is in units."""
    return _scan_forward(ops, hay, units, pos, True)


def find_last_of(ops: UnitOps[Any], hay: Span, units: Span, pos: int = NPOS) -> int:
    """Last index <= pos whose unit is in units."""
    return _scan_backward(ops, hay, units, pos, True)


def find_first_not_of(ops: UnitOps[Any], hay: Span, units: Span, pos: int = 0) -> int:
    """First index >= pos whose unit is not in units."""
    return _scan_forward(ops, hay, units, pos, False)


def find_last_not_of(ops: UnitOps[Any], hay: Span, units: Span, pos: int = NPOS) -> int:
    """Last index <= pos whose unit is not in units."""
    return _scan_backward(ops, hay, units, pos, False)
