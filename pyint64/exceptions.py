# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Custom exceptions for pyint64.

All exceptions inherit from Int64Error, making it easy to catch every codec
failure with a single except clause:

    try:
        wire = encode(offset)
    except Int64Error as e:
        print(f"Cannot encode offset: {e}")

For more granular error handling, catch specific exception types:

    try:
        offset = decode(data[pos:pos + 8])
    except InvalidLengthError as e:
        print(f"Truncated field: got {e.length} bytes")

Every error is fatal for the call that raised it. Nothing is clamped,
truncated or replaced by a default value.
"""

from __future__ import annotations

from typing import Any

from .protocol import INT64_SIZE, ErrorCode


class Int64Error(Exception):
    """
    Base exception for all pyint64 errors.

    Carries the numeric error ``code`` used by Kafka client libraries for an
    invalid argument, and an optional hint appended to the message.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        code: ErrorCode = ErrorCode.MISMATCH_ARGUMENT,
    ) -> None:
        self.hint = hint
        self.code = code
        if hint:
            message = f"{message}\n\n  Hint: {hint}"
        super().__init__(message)


class InvalidOperandError(Int64Error):
    """
    Raised when an argument is not something the operation can work with.

    Common causes:
    - A non-numeric object (list, None, arbitrary text) was passed
    - A float with a fractional part was passed where an integer is required
    - A value does not fit in 64 bits
    """

    def __init__(self, operation: str, value: Any, reason: str | None = None) -> None:
        self.operation = operation
        self.value = value
        message = f"Invalid argument for {operation}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidLengthError(Int64Error):
    """Raised when a buffer to decode is not exactly 8 bytes long."""

    def __init__(self, length: int, expected: int = INT64_SIZE) -> None:
        self.length = length
        self.expected = expected
        super().__init__(
            f"Invalid buffer length: {length}, expected {expected}",
            hint="Slice exactly one 64-bit field out of the response before decoding",
        )


class UnsupportedNegativeError(Int64Error):
    """
    Raised when encoding a negative value other than -1 or -2.

    Only the two offset sentinels have a defined wire form.
    """

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"Cannot encode negative value {value}",
            hint="Only -1 (latest offset) and -2 (earliest offsets) may be negative",
        )


class NotANumberError(Int64Error):
    """Raised when an operand or result is NaN or infinite."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Result of {operation} is not a number")
