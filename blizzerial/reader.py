# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Bounds-checked read cursor over an immutable byte buffer.
"""

from .errors import TruncatedBufferError


class ByteReader:
    """
    Sequential reader over a bytes buffer.

    The offset only moves forward. Every read checks the remaining length
    first and raises TruncatedBufferError instead of reading past the end.
    """

    def __init__(self, data: bytes, offset: int = 0):
        """
        Args:
            data: Buffer to read from
            offset: Starting offset in data
        """
        self._data = bytes(data)
        self._offset = offset

    @property
    def offset(self) -> int:
        """Current read position."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return max(len(self._data) - self._offset, 0)

    def at_end(self) -> bool:
        """True once every byte has been read."""
        return self._offset >= len(self._data)

    def _require(self, count: int, what: str):
        if self.remaining < count:
            raise TruncatedBufferError(
                f"{what}: need {count} byte(s), {self.remaining} left",
                self._offset,
            )

    def read_byte(self, what: str = "byte") -> int:
        """Read one byte as an int."""
        self._require(1, what)
        byte = self._data[self._offset]
        self._offset += 1
        return byte

    def read(self, count: int, what: str = "bytes") -> bytes:
        """Read exactly count bytes."""
        self._require(count, what)
        chunk = self._data[self._offset:self._offset + count]
        self._offset += count
        return chunk
