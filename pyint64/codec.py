# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
64-bit Field Encoding/Decoding.

Converts logical integers to and from the 8-byte big-endian form used by
offset, timestamp and timeout fields.

Encoding Rules:
- -1 and -2 are offset sentinels, emitted as their two's-complement pattern
- Other negative values are rejected
- Non-negative values up to 2**64 - 1 are emitted as their unsigned magnitude
- Decoding always yields the unsigned magnitude, sentinels included

Two implementations share these rules. ``encode``/``decode`` rebuild the
field from hex digits of an arbitrary-precision value and never depend on
the native word size. ``encode_native``/``decode_native`` use fixed-width
``struct`` packing. ``Int64Codec`` picks one of them from a CodecConfig.
"""

from __future__ import annotations

import logging
import struct
from typing import Any

from .accumulator import advance
from .bigvalue import BigValue, to_big
from .exceptions import InvalidLengthError, InvalidOperandError, UnsupportedNegativeError
from .models import Backend, CodecConfig
from .protocol import INT64_HEX_DIGITS, INT64_SIZE, UINT64_MAX, OffsetSentinel

logger = logging.getLogger(__name__)


def _check_encodable(n: Any) -> BigValue | OffsetSentinel:
    """Coerce an encode argument and classify it as a sentinel or a magnitude."""
    value = to_big(n, "encode")
    if value == OffsetSentinel.LATEST_OFFSET:
        return OffsetSentinel.LATEST_OFFSET
    if value == OffsetSentinel.EARLIEST_OFFSETS:
        return OffsetSentinel.EARLIEST_OFFSETS
    if value < 0:
        raise UnsupportedNegativeError(value)
    if value > UINT64_MAX:
        raise InvalidOperandError("encode", value, "does not fit in 64 bits")
    return value


def _check_decodable(buf: Any) -> bytes:
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise InvalidOperandError("decode", buf, "not a byte sequence")
    data = bytes(buf)
    if len(data) != INT64_SIZE:
        raise InvalidLengthError(len(data))
    return data


def encode(n: Any) -> bytes:
    """
    Encode a value as an 8-byte big-endian field.

    Format: [8B big-endian]

    Raises:
        InvalidOperandError: If ``n`` is not numeric or exceeds 64 bits.
        UnsupportedNegativeError: If ``n`` is negative but not -1 or -2.
        NotANumberError: If ``n`` is NaN or infinite.
    """
    value = _check_encodable(n)
    if isinstance(value, OffsetSentinel):
        return value.wire
    return bytes.fromhex(value.as_hex()[2:].rjust(INT64_HEX_DIGITS, "0"))


def decode(buf: Any) -> BigValue:
    """
    Decode an 8-byte big-endian field as an unsigned value.

    The bytes of a sentinel decode to their unsigned magnitude: encoding -1
    and decoding the result gives ``2**64 - 1``.

    Raises:
        InvalidOperandError: If ``buf`` is not a byte sequence.
        InvalidLengthError: If ``buf`` is not exactly 8 bytes.
    """
    return BigValue.from_hex(_check_decodable(buf).hex())


def encode_native(n: Any) -> bytes:
    """Encode like :func:`encode` using fixed-width packing."""
    value = _check_encodable(n)
    if isinstance(value, OffsetSentinel):
        return struct.pack(">q", value)
    return struct.pack(">Q", value)


def decode_native(buf: Any) -> BigValue:
    """Decode like :func:`decode` using fixed-width unpacking."""
    return BigValue(struct.unpack(">Q", _check_decodable(buf))[0])


class Int64Codec:
    """
    Encoder/decoder for 64-bit wire fields with a configurable backend.

    Example:
        >>> codec = Int64Codec(CodecConfig(backend="bigint"))
        >>> codec.encode(42).hex()
        '000000000000002a'
        >>> codec.advance(codec.decode(b"\\x00" * 7 + b"\\x2a"), 1)
        BigValue(43)
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self._config = config or CodecConfig()
        self._backend = self._config.resolve_backend()
        if self._backend is Backend.NATIVE:
            self._encode, self._decode = encode_native, decode_native
        else:
            self._encode, self._decode = encode, decode
        logger.debug("Int64Codec using %s backend", self._backend.value)

    @property
    def backend(self) -> Backend:
        """The resolved backend (never AUTO)."""
        return self._backend

    @property
    def config(self) -> CodecConfig:
        return self._config

    def _reject_string(self, value: Any, operation: str) -> None:
        if self._config.strict_strings and isinstance(value, str):
            raise InvalidOperandError(operation, value, "strings are not accepted")

    def encode(self, n: Any) -> bytes:
        self._reject_string(n, "encode")
        return self._encode(n)

    def decode(self, buf: Any) -> BigValue:
        return self._decode(buf)

    def advance(self, current: Any, delta: Any) -> BigValue:
        self._reject_string(current, "add")
        self._reject_string(delta, "add")
        return advance(current, delta)
