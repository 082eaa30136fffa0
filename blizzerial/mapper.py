# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Schema mapper: turns positional parsed values into named dicts.
"""

from typing import Any, Dict, List, Sequence, Tuple

from .errors import MalformedSchemaError, SchemaShapeMismatchError, TypeMismatchError
from .schema import FieldKind, FieldSpec, SchemaEntry
from .values import SparseMap

# Largest sparse map copied into a positional list by an array field
MAX_SPARSE_POSITIONS = 1 << 20


def as_sequence(value: Any) -> Tuple[Any, ...]:
    """
    Positional view of a parsed value.

    Arrays are returned as-is, sparse maps with None in their gaps.

    Raises:
        TypeMismatchError: If value is neither an array nor a sparse map
    """
    if isinstance(value, tuple):
        return value
    if isinstance(value, SparseMap):
        return value.to_sequence()
    if isinstance(value, list):
        return tuple(value)
    raise TypeMismatchError(f"Expected an array or map, got {_type_name(value)}")


def map_values(values: Any, schema: Sequence[SchemaEntry], path: str = "") -> Dict[str, Any]:
    """
    Map a positional value sequence onto a schema.

    Args:
        values: Parsed array or sparse map
        schema: One entry per position
        path: Field path of values, used in error messages

    Returns:
        Dict of field name to mapped value

    Raises:
        TypeMismatchError: If values is not a sequence, or a field value
            has the wrong type for its kind
        MalformedSchemaError: If schema or one of its entries is malformed
        SchemaShapeMismatchError: If the lengths differ
    """
    if isinstance(schema, (str, bytes)) or not isinstance(schema, (list, tuple)):
        raise MalformedSchemaError(f"Schema must be a sequence, got {_type_name(schema)}", path)
    if isinstance(values, SparseMap) and values.size != len(schema):
        raise SchemaShapeMismatchError(
            f"Data has {values.size} position(s), schema has {len(schema)}", path
        )
    try:
        items = as_sequence(values)
    except TypeMismatchError as e:
        raise TypeMismatchError(str(e), path) from None
    if len(items) != len(schema):
        raise SchemaShapeMismatchError(
            f"Data has {len(items)} value(s), schema has {len(schema)}", path
        )

    result = {}
    for value, entry in zip(items, schema):
        if isinstance(entry, str):
            result[entry] = value
        elif isinstance(entry, FieldSpec):
            field_path = f"{path}.{entry.name}" if path else entry.name
            result[entry.name] = _map_field(value, entry, field_path)
        else:
            raise MalformedSchemaError(
                f"Schema entries must be names or FieldSpec, got {_type_name(entry)}", path
            )
    return result


def _map_field(value: Any, spec: FieldSpec, path: str) -> Any:
    if spec.kind == FieldKind.STRING:
        if not isinstance(value, bytes):
            raise TypeMismatchError(
                f"Cannot map {_type_name(value)} to a string", path
            )
        return value.decode("utf-8", errors="replace")

    if spec.kind == FieldKind.ARRAY:
        return _map_array(value, spec, path)

    if spec.nested is None:
        raise MalformedSchemaError("Object field without a nested map", path)
    return map_values(value, spec.nested, path)


def _map_array(value: Any, spec: FieldSpec, path: str) -> List[Any]:
    if isinstance(value, SparseMap) and value.size > MAX_SPARSE_POSITIONS:
        raise SchemaShapeMismatchError(
            f"Sparse map with {value.size} positions is too large to map as an array",
            path,
        )
    try:
        items = as_sequence(value)
    except TypeMismatchError as e:
        raise TypeMismatchError(str(e), path) from None

    if spec.nested is None:
        return list(items)

    result = []
    for i, item in enumerate(items):
        item_path = f"{path}[{i}]"
        if not isinstance(item, (tuple, SparseMap)):
            raise TypeMismatchError(
                f"Array elements must be arrays, got {_type_name(item)}", item_path
            )
        result.append(map_values(item, spec.nested, item_path))
    return result


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__
