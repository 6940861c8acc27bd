# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for wire constants, sentinels and exceptions."""

import sys

import pytest

from pyint64.bigvalue import BigValue
from pyint64.codec import decode, encode
from pyint64.exceptions import (
    Int64Error,
    InvalidLengthError,
    InvalidOperandError,
    NotANumberError,
    UnsupportedNegativeError,
)
from pyint64.protocol import (
    BITS64,
    INT64_HEX_DIGITS,
    INT64_SIZE,
    UINT64_MAX,
    ErrorCode,
    OffsetSentinel,
    as_offset,
)


class TestConstants:
    """Tests for protocol constants."""

    def test_sizes(self) -> None:
        """Test field size constants."""
        assert INT64_SIZE == 8
        assert INT64_HEX_DIGITS == 16
        assert UINT64_MAX == 18446744073709551615

    def test_bits64(self) -> None:
        """Test platform detection follows the native word size."""
        assert BITS64 == (sys.maxsize > 2**32)

    def test_error_codes(self) -> None:
        """Test error code values."""
        assert ErrorCode.NO_ERROR == 0
        assert ErrorCode.MISMATCH_ARGUMENT == -1000


class TestOffsetSentinel:
    """Tests for OffsetSentinel enum."""

    def test_values(self) -> None:
        """Test sentinel values."""
        assert OffsetSentinel.LATEST_OFFSET == -1
        assert OffsetSentinel.EARLIEST_OFFSETS == -2

    def test_wire_patterns(self) -> None:
        """Test sentinel bit patterns."""
        assert OffsetSentinel.LATEST_OFFSET.wire == b"\xff" * 8
        assert OffsetSentinel.EARLIEST_OFFSETS.wire == b"\xff" * 7 + b"\xfe"


class TestAsOffset:
    """Tests for as_offset function."""

    def test_maps_unsigned_maxima(self) -> None:
        """Test decoded sentinel patterns map back to sentinels."""
        assert as_offset(decode(encode(-1))) is OffsetSentinel.LATEST_OFFSET
        assert as_offset(decode(encode(-2))) is OffsetSentinel.EARLIEST_OFFSETS

    def test_passes_other_values(self) -> None:
        """Test ordinary offsets come back unchanged."""
        result = as_offset(decode(encode(1234)))
        assert result == 1234
        assert isinstance(result, BigValue)
        assert not isinstance(result, OffsetSentinel)
        assert as_offset(UINT64_MAX - 2) == UINT64_MAX - 2


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidOperandError("encode", [1]),
            InvalidLengthError(7),
            UnsupportedNegativeError(-3),
            NotANumberError("add"),
        ],
    )
    def test_hierarchy_and_code(self, exc: Int64Error) -> None:
        """Test every error is an Int64Error with the argument error code."""
        assert isinstance(exc, Int64Error)
        assert exc.code == ErrorCode.MISMATCH_ARGUMENT

    def test_hint_in_message(self) -> None:
        """Test hints are appended to the message."""
        exc = UnsupportedNegativeError(-3)
        assert "Cannot encode negative value -3" in str(exc)
        assert "Hint:" in str(exc)
        assert exc.hint is not None

    def test_no_hint(self) -> None:
        """Test errors without a hint."""
        exc = InvalidOperandError("encode", None, "not numeric")
        assert exc.hint is None
        assert str(exc) == "Invalid argument for encode: None (not numeric)"

    def test_length_attributes(self) -> None:
        """Test InvalidLengthError attributes."""
        exc = InvalidLengthError(9)
        assert exc.length == 9
        assert exc.expected == INT64_SIZE
        assert "Invalid buffer length: 9, expected 8" in str(exc)
