"""Core type definitions for strview."""

import sys
from typing import Any

NPOS = sys.maxsize
"""Not-found / unbounded-length sentinel. Never a valid match position."""

type Span = tuple[Any, int, int]
"""A (buffer, offset, size) triple describing a code unit range.

Spans are what the pure search and compare functions operate on. A view with no
storage uses its policy's empty buffer.
"""
