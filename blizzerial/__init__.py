# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Blizzerial - decoder for Blizzard's tagged binary serialization format.

This package parses the type-tagged "JSON-ish" binary blobs found in game
state data (replay headers, player details) and maps them onto named
fields using a caller supplied schema.

Example usage:
    from blizzerial import decode

    header = decode(data, [
        "signature",
        {"name": "version", "map": ["flags", "major", "minor", "revision", "build", "base_build"]},
        "length",
    ])
    print(header["version"]["build"])

The raw value tree is available without a schema:

    from blizzerial import parse

    values = parse(data)
"""

import logging
from typing import Any, Dict, Sequence

from .errors import (
    DecodeError,
    MissingArgumentError,
    TruncatedBufferError,
    MalformedArrayError,
    NegativeLengthError,
    UnknownTagError,
    MappingError,
    SchemaShapeMismatchError,
    MalformedSchemaError,
    TypeMismatchError,
)
from .mapper import map_values
from .parser import Parser, parse
from .schema import FieldKind, FieldSpec, load_schema
from .values import BigInt, SparseMap, Tag, UnknownTag
from .varint import decode_varint

__version__ = "0.1.0"

_log = logging.getLogger(__name__)


def decode(data: bytes, schema: Sequence[Any], strict: bool = False) -> Dict[str, Any]:
    """
    Decode a buffer and map its first top-level value onto a schema.

    Args:
        data: Raw blizzerial bytes
        schema: JSON-shaped schema (names and {"name", "type", "map"}
            objects) or already loaded FieldSpec entries
        strict: Raise UnknownTagError on unknown tags

    Returns:
        Dict of field name to mapped value

    Raises:
        MissingArgumentError: If data or schema is None
        DecodeError: If the buffer or schema is malformed
    """
    if data is None or schema is None:
        raise MissingArgumentError("Both data and schema must be set to decode blizzerial data")

    schema = load_schema(schema)
    parser = Parser(data, strict=strict)
    values = parser.parse()
    if not values:
        raise TypeMismatchError("Buffer contains no value to map")
    if len(values) > 1:
        _log.debug("Ignoring %d trailing top-level value(s)", len(values) - 1)

    return map_values(values[0], schema)


__all__ = [
    # Errors
    "DecodeError",
    "MissingArgumentError",
    "TruncatedBufferError",
    "MalformedArrayError",
    "NegativeLengthError",
    "UnknownTagError",
    "MappingError",
    "SchemaShapeMismatchError",
    "MalformedSchemaError",
    "TypeMismatchError",
    # Values
    "BigInt",
    "SparseMap",
    "Tag",
    "UnknownTag",
    # Parsing
    "Parser",
    "parse",
    "decode_varint",
    # Schema
    "FieldKind",
    "FieldSpec",
    "load_schema",
    "map_values",
    # Top level
    "decode",
]
