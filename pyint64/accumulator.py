# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Running offset arithmetic for walking log entries."""

from __future__ import annotations

from typing import Any

from .bigvalue import BigValue, add


def advance(current: Any, delta: Any) -> BigValue:
    """
    Advance an offset or byte position by ``delta``.

    Used when iterating a fetched message set: the next offset is the
    current offset plus one, and the next entry starts at the current
    position plus the entry's on-wire length.

    The sum is exact and unbounded. It is not checked against the 64-bit
    range, callers only ever pass in-range offsets.

    Raises:
        InvalidOperandError: If either argument is not numeric.
        NotANumberError: If either argument is NaN or infinite.
    """
    return add(current, delta)
