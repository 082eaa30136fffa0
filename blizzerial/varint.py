# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed varint decoding.

Blizzerial varints are little-endian groups of 7 bits with 0x80 as the
continuation flag. The low bit of the accumulated value is the sign
(1 = negative) and the remaining bits are the magnitude.
"""

from typing import Tuple, Union

from .reader import ByteReader
from .values import BigInt

# Varints of this many groups or fewer decode to a plain int
SMALL_INT_MAX_GROUPS = 4


def read_varint(reader: ByteReader) -> Union[int, BigInt]:
    """
    Read one varint from the reader.

    Args:
        reader: Cursor positioned at the first varint byte

    Returns:
        Decoded value: an int for up to 4 groups, a BigInt beyond that

    Raises:
        TruncatedBufferError: If the buffer ends before the last group
    """
    raw = 0
    groups = 0

    while True:
        byte = reader.read_byte("varint")
        raw |= (byte & 0x7F) << (7 * groups)
        groups += 1

        if not (byte & 0x80):
            break

    value = -(raw >> 1) if raw & 1 else raw >> 1
    if groups <= SMALL_INT_MAX_GROUPS:
        return value
    return BigInt(value)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[Union[int, BigInt], int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        TruncatedBufferError: If varint is truncated
    """
    reader = ByteReader(data, offset)
    value = read_varint(reader)
    return value, reader.offset - offset
