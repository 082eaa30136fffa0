# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Tag-dispatching parser for the blizzerial binary format.

Each value starts with a tag byte:

    2  byte string  varint length, then that many raw bytes
    4  array        0x01 0x00, varint count, then that many values
    5  sparse map   varint count, then (varint key, value) pairs
    6  int8         1 byte, low bit is the sign
    7  int32        4 bytes, low bit of byte 0 is the sign
    9  varint       see varint.py

Any other tag decodes to None without consuming a payload. The payload of
such a tag (if any) is then misread as following values, so strict mode
turns it into an UnknownTagError instead.
"""

import logging
from typing import Any, List, Optional, Tuple

from .errors import (
    MalformedArrayError,
    NegativeLengthError,
    TruncatedBufferError,
    UnknownTagError,
)
from .reader import ByteReader
from .values import SparseMap, Tag, UnknownTag
from .varint import read_varint

_log = logging.getLogger(__name__)

ARRAY_MARKER = b"\x01\x00"


def read_int8(reader: ByteReader) -> int:
    """Read a sign+magnitude packed single byte."""
    byte = reader.read_byte("int8")
    magnitude = byte >> 1
    return -magnitude if byte & 1 else magnitude


def read_int32(reader: ByteReader) -> int:
    """Read a sign+magnitude packed four byte integer."""
    b0, b1, b2, b3 = reader.read(4, "int32")
    magnitude = (b3 << 23) | (b2 << 15) | (b1 << 7) | (b0 >> 1)
    return -magnitude if b0 & 1 else magnitude


def read_length(reader: ByteReader, what: str) -> int:
    """Read a varint that must not be negative."""
    offset = reader.offset
    length = read_varint(reader)
    if length < 0:
        raise NegativeLengthError(f"{what} < 0: {length}", offset)
    return int(length)


def read_byte_string(reader: ByteReader) -> bytes:
    """Read a varint length prefixed byte string."""
    length = read_length(reader, "byte string length")
    return reader.read(length, "byte string")


class Parser:
    """
    Recursive decoder over one buffer.

    A Parser is single-use: create one per buffer. Unknown tags seen
    along the way are collected in unknown_tags.

    Example:
        parser = Parser(data)
        values = parser.parse()
        if parser.unknown_tags:
            ...
    """

    def __init__(self, data: bytes, strict: bool = False):
        """
        Args:
            data: Buffer to decode
            strict: Raise UnknownTagError on unknown tags instead of
                decoding them to None
        """
        self._reader = ByteReader(data)
        self.strict = strict
        self.unknown_tags: List[UnknownTag] = []
        self._decoders = {
            Tag.BYTE_STRING: lambda: read_byte_string(self._reader),
            Tag.ARRAY: self._read_array,
            Tag.SPARSE_MAP: self._read_sparse_map,
            Tag.INT8: lambda: read_int8(self._reader),
            Tag.INT32: lambda: read_int32(self._reader),
            Tag.VARINT: lambda: read_varint(self._reader),
        }

    @property
    def offset(self) -> int:
        """Bytes consumed so far."""
        return self._reader.offset

    def parse(self, count: Optional[int] = None) -> Tuple[Any, ...]:
        """
        Decode consecutive values.

        Args:
            count: Number of values to decode, or None to decode until
                the buffer is exhausted

        Returns:
            Tuple of decoded values

        Raises:
            TruncatedBufferError: If the buffer ends before count values
        """
        values = []
        while count is None or len(values) < count:
            if self._reader.at_end():
                if count is None:
                    break
                raise TruncatedBufferError(
                    f"Expected {count} value(s), buffer ended after {len(values)}",
                    self._reader.offset,
                )
            values.append(self.parse_value())
        return tuple(values)

    def parse_value(self) -> Any:
        """Decode one tagged value."""
        offset = self._reader.offset
        tag = self._reader.read_byte("tag")
        decoder = self._decoders.get(tag)
        if decoder is None:
            return self._unknown_tag(tag, offset)
        return decoder()

    def _unknown_tag(self, tag: int, offset: int) -> None:
        if self.strict:
            raise UnknownTagError(tag, offset)
        _log.warning("Unknown tag %d at offset %d, decoding as None", tag, offset)
        self.unknown_tags.append(UnknownTag(offset=offset, tag=tag))
        return None

    def _read_array(self) -> Tuple[Any, ...]:
        offset = self._reader.offset
        marker = self._reader.read(len(ARRAY_MARKER), "array marker")
        if marker != ARRAY_MARKER:
            raise MalformedArrayError(
                f"Malformed array, expected marker {ARRAY_MARKER.hex()}, got {marker.hex()}",
                offset,
            )
        count = read_length(self._reader, "array length")
        return self.parse(count)

    def _read_sparse_map(self) -> SparseMap:
        count = read_length(self._reader, "map length")
        entries = {}
        for _ in range(count):
            key = read_length(self._reader, "map key")
            entries[key] = self.parse(1)[0]
        return SparseMap(entries)


def parse(data: bytes, strict: bool = False) -> Tuple[Any, ...]:
    """
    Decode every top-level value in a buffer.

    Args:
        data: Raw blizzerial bytes
        strict: Raise UnknownTagError on unknown tags

    Returns:
        Tuple of decoded values
    """
    return Parser(data, strict=strict).parse()
