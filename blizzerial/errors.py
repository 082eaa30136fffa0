# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised while decoding blizzerial data.

Every error derives from DecodeError, which is itself a ValueError so
callers that only care about "bad input" can catch that.
"""

from typing import Optional


class DecodeError(ValueError):
    """Base exception for decode errors."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class MissingArgumentError(DecodeError):
    """Buffer or schema not supplied."""
    pass


class TruncatedBufferError(DecodeError):
    """A decoder needs more bytes than remain in the buffer."""
    pass


class MalformedArrayError(DecodeError):
    """Array tag not followed by the 0x01 0x00 marker bytes."""
    pass


class NegativeLengthError(DecodeError):
    """A decoded length, count or key is negative."""
    pass


class UnknownTagError(DecodeError):
    """Tag byte with no known decoder (strict mode only)."""

    def __init__(self, tag: int, offset: Optional[int] = None):
        super().__init__(f"Unknown tag: {tag}", offset)
        self.tag = tag


class MappingError(DecodeError):
    """Base for errors raised while applying a schema."""

    def __init__(self, message: str, path: str = ""):
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class SchemaShapeMismatchError(MappingError):
    """Data and schema sequences differ in length."""
    pass


class MalformedSchemaError(MappingError):
    """Schema entry is neither a name nor a well-formed field spec."""
    pass


class TypeMismatchError(MappingError):
    """Value does not have the type the schema entry requires."""
    pass
