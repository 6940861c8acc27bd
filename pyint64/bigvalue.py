# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Arbitrary-precision integers for 64-bit protocol fields.

Offsets and timestamps in the wire protocol are 64-bit quantities. BigValue
holds them without precision loss regardless of the platform's native word
size, and all arithmetic on them is exact: there is no 64-bit wraparound.

Example:
    >>> offset = BigValue.from_hex("0x123456789abcdef0")
    >>> offset
    BigValue(1311768467463790320)
    >>> add(offset, 1)
    BigValue(1311768467463790321)
"""

from __future__ import annotations

import numbers
import re
from decimal import Decimal
from typing import Any

from .exceptions import InvalidOperandError, NotANumberError

_DECIMAL_STRING = re.compile(r"\s*[+-]?[0-9]+\s*")
_NAN_STRING = re.compile(r"\s*[+-]?nan\s*", re.IGNORECASE)
_HEX_STRING = re.compile(r"(0[xX])?[0-9a-fA-F]+")
_INFINITIES = (float("inf"), float("-inf"))


class BigValue(int):
    """
    Immutable arbitrary-precision integer.

    A BigValue is an ``int``: it compares and hashes like the plain integer
    of the same value and can be passed anywhere an integer is expected.
    Addition is routed through :func:`add`, so operands are validated and
    the result stays a BigValue.
    """

    __slots__ = ()

    @classmethod
    def from_hex(cls, text: str) -> BigValue:
        """Build a value from a hex string, with or without ``0x`` prefix."""
        if not isinstance(text, str) or not _HEX_STRING.fullmatch(text):
            raise InvalidOperandError("from_hex", text, "not a hexadecimal string")
        return cls(int(text, 16))

    def as_hex(self) -> str:
        """Return the ``0x``-prefixed lowercase hex form of the value."""
        return hex(self)

    def __add__(self, other: Any) -> BigValue:
        return add(self, other)

    def __radd__(self, other: Any) -> BigValue:
        return add(other, self)

    def __repr__(self) -> str:
        return f"BigValue({self})"

    def __str__(self) -> str:
        try:
            return int.__repr__(self)
        except ValueError:
            # past the interpreter's int-to-decimal digit limit
            return hex(self)


def to_big(value: Any, operation: str) -> BigValue:
    """
    Coerce a numeric operand to a BigValue.

    Accepts integers (including BigValue), integral floats, Decimals and
    Fractions, and strings of decimal digits. Fractional values are
    rejected rather than truncated.

    Raises:
        InvalidOperandError: If the value is not numeric or not integral.
        NotANumberError: If the value is NaN or infinite.
    """
    # bool is an int subclass but never a valid offset
    if isinstance(value, bool):
        raise InvalidOperandError(operation, value, "booleans are not numbers")

    if isinstance(value, numbers.Integral):
        return BigValue(value)

    if isinstance(value, (numbers.Real, Decimal)):
        # Decimal sNaN raises on comparison, so ask it directly
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise NotANumberError(operation)
        elif value != value or value in _INFINITIES:
            raise NotANumberError(operation)
        integral = int(value)
        if integral != value:
            raise InvalidOperandError(operation, value, "has a fractional part")
        return BigValue(integral)

    if isinstance(value, str):
        if _DECIMAL_STRING.fullmatch(value):
            try:
                return BigValue(int(value))
            except ValueError as e:
                raise InvalidOperandError(operation, value, "too many digits") from e
        if _NAN_STRING.fullmatch(value):
            raise NotANumberError(operation)
        raise InvalidOperandError(operation, value, "not a decimal number")

    raise InvalidOperandError(operation, value)


def add(a: Any, b: Any) -> BigValue:
    """
    Add two numbers exactly.

    Either operand may be a BigValue or a plain number. The sum is computed
    with unbounded precision; values beyond 64 bits are neither wrapped nor
    rejected.

    Raises:
        InvalidOperandError: If either operand is not numeric.
        NotANumberError: If either operand is NaN or infinite.
    """
    return BigValue(int(to_big(a, "add")) + int(to_big(b, "add")))
