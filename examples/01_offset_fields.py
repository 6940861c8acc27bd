#!/usr/bin/env python3
"""
01_offset_fields.py - Encoding and Walking 64-bit Offset Fields

What this example demonstrates:
- Encoding an offset request field, including the sentinels
- Decoding offsets out of a fetched message set
- Advancing the running offset and byte position without precision loss
- Handling codec errors

Key Concepts:
- encode()/decode(): 8-byte big-endian fields
- advance(): exact "current + delta"
- as_offset(): sentinel reinterpretation on the read side

Expected Output:
    === Offset Request Fields ===
    fetch offset 4294967296 -> 0000000100000000
    latest offset           -> ffffffffffffffff
    earliest offsets        -> fffffffffffffffe

    === Walking a Message Set ===
    offset 4294967296: b'first'
    offset 4294967297: b'second'
    next offset to fetch: 4294967298

    === Error Handling ===
    ✓ Caught UnsupportedNegativeError
    ✓ Caught InvalidLengthError

Run with:
    python 01_offset_fields.py
"""

import struct

from pyint64 import (
    Int64Codec,
    InvalidLengthError,
    OffsetSentinel,
    UnsupportedNegativeError,
    as_offset,
)


def offset_request_fields(codec):
    print("=== Offset Request Fields ===")
    print(f"fetch offset 4294967296 -> {codec.encode(4294967296).hex()}")
    print(f"latest offset           -> {codec.encode(OffsetSentinel.LATEST_OFFSET).hex()}")
    print(f"earliest offsets        -> {codec.encode(OffsetSentinel.EARLIEST_OFFSETS).hex()}")


def walk_message_set(codec):
    print("\n=== Walking a Message Set ===")
    # [8B offset][4B size][payload] per entry
    data = b"".join(
        codec.encode(4294967296 + i) + struct.pack(">I", len(payload)) + payload
        for i, payload in enumerate([b"first", b"second"])
    )

    pos = 0
    next_offset = None
    while pos < len(data):
        offset = as_offset(codec.decode(data[pos:pos + 8]))
        size = struct.unpack(">I", data[pos + 8:pos + 12])[0]
        print(f"offset {offset}: {data[pos + 12:pos + 12 + size]!r}")
        next_offset = codec.advance(offset, 1)
        pos = codec.advance(pos, 12 + size)
    print(f"next offset to fetch: {next_offset}")


def error_handling(codec):
    print("\n=== Error Handling ===")
    try:
        codec.encode(-3)
    except UnsupportedNegativeError:
        print("✓ Caught UnsupportedNegativeError")

    try:
        codec.decode(b"\x00" * 7)
    except InvalidLengthError:
        print("✓ Caught InvalidLengthError")


def main():
    codec = Int64Codec()
    offset_request_fields(codec)
    walk_message_set(codec)
    error_handling(codec)


if __name__ == "__main__":
    main()
