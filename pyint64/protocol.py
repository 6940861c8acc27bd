# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Wire constants for 64-bit protocol fields.

Field Format:
    +------+------+------+------+------+------+------+------+
    | MSB  |      |      |      |      |      |      | LSB  |
    +------+------+------+------+------+------+------+------+

    - 8 bytes, big-endian
    - Non-negative values are stored as their unsigned magnitude
    - Offset requests use two reserved negative values (sentinels)
      stored as their two's-complement bit pattern
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bigvalue import BigValue

INT64_SIZE: int = 8
INT64_HEX_DIGITS: int = INT64_SIZE * 2
UINT64_MAX: int = 2**64 - 1

# True when the interpreter's native word holds a 64-bit integer
BITS64: bool = sys.maxsize > 2**32


class ErrorCode(IntEnum):
    """Error codes carried by pyint64 exceptions."""

    NO_ERROR = 0
    MISMATCH_ARGUMENT = -1000


class OffsetSentinel(IntEnum):
    """Reserved offset values with special meaning in offset requests."""

    LATEST_OFFSET = -1  # only ever returns one offset
    EARLIEST_OFFSETS = -2

    @property
    def wire(self) -> bytes:
        """Fixed two's-complement bit pattern for this sentinel."""
        return _SENTINEL_PATTERNS[self]


_SENTINEL_PATTERNS: dict[OffsetSentinel, bytes] = {
    OffsetSentinel.LATEST_OFFSET: b"\xff" * 8,
    OffsetSentinel.EARLIEST_OFFSETS: b"\xff" * 7 + b"\xfe",
}


def as_offset(value: int) -> OffsetSentinel | BigValue:
    """
    Reinterpret a decoded unsigned value as an offset.

    ``decode`` always returns the unsigned magnitude. Callers that read an
    offset field and need sentinel semantics pass the result through here:
    the two largest unsigned values map back to their sentinel, everything
    else is returned as a BigValue.
    """
    from .bigvalue import BigValue

    if value == UINT64_MAX:
        return OffsetSentinel.LATEST_OFFSET
    if value == UINT64_MAX - 1:
        return OffsetSentinel.EARLIEST_OFFSETS
    return BigValue(value)
