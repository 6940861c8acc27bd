# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
pyint64 - 64-bit integer fields for binary log protocols.

Encodes and decodes the 8-byte big-endian offset and timestamp fields of
Kafka-style wire protocols, and advances running offsets, without ever
losing precision to a native word size.

Quick Start:
    >>> from pyint64 import encode, decode, advance
    >>>
    >>> wire = encode(1311768467463790320)
    >>> wire.hex()
    '123456789abcdef0'
    >>> offset = decode(wire)
    >>> advance(offset, 1)
    BigValue(1311768467463790321)

Offset Sentinels:
    >>> from pyint64 import OffsetSentinel, as_offset
    >>>
    >>> encode(OffsetSentinel.EARLIEST_OFFSETS).hex()
    'fffffffffffffffe'
    >>> decode(b"\\xff" * 8)  # decode is always unsigned
    BigValue(18446744073709551615)
    >>> as_offset(decode(b"\\xff" * 8))
    <OffsetSentinel.LATEST_OFFSET: -1>

Configured Codec:
    >>> from pyint64 import CodecConfig, Int64Codec
    >>>
    >>> codec = Int64Codec(CodecConfig(backend="bigint", strict_strings=True))
    >>> codec.decode(codec.encode(7))
    BigValue(7)
"""

import logging

from .accumulator import advance
from .bigvalue import BigValue, add, to_big
from .codec import Int64Codec, decode, decode_native, encode, encode_native
from .exceptions import (
    Int64Error,
    InvalidLengthError,
    InvalidOperandError,
    NotANumberError,
    UnsupportedNegativeError,
)
from .models import Backend, CodecConfig
from .protocol import (
    BITS64,
    INT64_SIZE,
    UINT64_MAX,
    ErrorCode,
    OffsetSentinel,
    as_offset,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.8.6"
__author__ = "Firefly Software Solutions Inc."
__license__ = "Apache-2.0"

__all__ = [
    # Values
    "BigValue",
    "add",
    "to_big",
    "advance",
    # Codec
    "encode",
    "decode",
    "encode_native",
    "decode_native",
    "Int64Codec",
    # Configuration
    "Backend",
    "CodecConfig",
    # Protocol
    "BITS64",
    "INT64_SIZE",
    "UINT64_MAX",
    "ErrorCode",
    "OffsetSentinel",
    "as_offset",
    # Exceptions
    "Int64Error",
    "InvalidOperandError",
    "InvalidLengthError",
    "UnsupportedNegativeError",
    "NotANumberError",
]
