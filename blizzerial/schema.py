# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Schema types describing how to name and retype a positional value tuple.

A schema is a sequence of entries, one per value position. An entry is
either a bare field name (value copied as-is) or a FieldSpec.

Schemas are usually written as JSON:

    ["version", {"name": "title", "type": "string"},
     {"name": "players", "type": "array", "map": ["name", "race"]}]

load_schema() turns that shape into FieldSpec entries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple, Union

from .errors import MalformedSchemaError


class FieldKind(str, Enum):
    """How a field value is converted."""
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldSpec:
    """Named field with an optional kind and nested schema."""
    name: str
    kind: FieldKind = FieldKind.OBJECT
    nested: Optional[Tuple["SchemaEntry", ...]] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise MalformedSchemaError(f"Field name must be a non-empty string, got {self.name!r}")
        try:
            object.__setattr__(self, "kind", FieldKind(self.kind))
        except ValueError:
            raise MalformedSchemaError(f"Unknown field type {self.kind!r}", self.name) from None
        if self.nested is not None:
            object.__setattr__(self, "nested", tuple(self.nested))


SchemaEntry = Union[str, FieldSpec]
Schema = Tuple[SchemaEntry, ...]

_SPEC_KEYS = {"name", "type", "map"}


def load_schema(raw: Sequence[Any], path: str = "") -> Schema:
    """
    Convert a JSON-shaped schema into typed entries.

    Args:
        raw: List of names and {"name", "type", "map"} objects
        path: Field path used in error messages

    Returns:
        Tuple of schema entries

    Raises:
        MalformedSchemaError: If any entry is malformed
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, (list, tuple)):
        raise MalformedSchemaError(
            f"Schema must be a list, got {type(raw).__name__}", path
        )
    return tuple(_load_entry(entry, path, i) for i, entry in enumerate(raw))


def _load_entry(entry: Any, path: str, index: int) -> SchemaEntry:
    if isinstance(entry, FieldSpec):
        return entry
    if isinstance(entry, str):
        if not entry:
            raise MalformedSchemaError(f"Empty field name at position {index}", path)
        return entry
    if not isinstance(entry, dict):
        raise MalformedSchemaError(
            f"Schema entries must be strings or objects, got {type(entry).__name__} at position {index}",
            path,
        )

    unknown = set(entry) - _SPEC_KEYS
    if unknown:
        raise MalformedSchemaError(
            f"Unknown schema keys {sorted(unknown)} at position {index}", path
        )

    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedSchemaError(f"Missing field name at position {index}", path)

    field_path = f"{path}.{name}" if path else name
    nested = entry.get("map")
    if nested is not None:
        nested = load_schema(nested, field_path)

    return FieldSpec(name=name, kind=entry.get("type") or FieldKind.OBJECT, nested=nested)
