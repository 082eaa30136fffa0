# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Parsed value types.

A parsed value is one of:
    None       unknown tag placeholder
    bytes      byte string
    int        int8, int32 or a varint of at most 4 groups
    BigInt     varint of more than 4 groups
    tuple      array of parsed values
    SparseMap  index -> parsed value, possibly with gaps
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Tuple


class Tag(IntEnum):
    """Wire type tags."""
    BYTE_STRING = 2
    ARRAY = 4
    SPARSE_MAP = 5
    INT8 = 6
    INT32 = 7
    VARINT = 9

    def __str__(self) -> str:
        return self.name


class BigInt(int):
    """Arbitrary-precision varint result (more than 4 encoded groups)."""

    def __repr__(self) -> str:
        return f"BigInt({int(self)})"


@dataclass(frozen=True)
class UnknownTag:
    """An unknown tag byte seen while parsing."""
    offset: int
    tag: int


class SparseMap:
    """
    Immutable index -> value collection decoded from a map tag.

    Keys need not be contiguous. len() is max_key + 1 so that the map
    lines up with a positional schema; absent positions are gaps, not
    errors.
    """

    def __init__(self, entries: Optional[Mapping[int, Any]] = None):
        self._entries: Dict[int, Any] = dict(entries or {})

    def __getitem__(self, key: int) -> Any:
        return self._entries[key]

    def __len__(self) -> int:
        """
        Positional length, max_key + 1.

        Keys past sys.maxsize make len() raise OverflowError; use size
        for maps decoded from untrusted data.
        """
        return self.size

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __eq__(self, other) -> bool:
        if isinstance(other, SparseMap):
            return self._entries == other._entries
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"SparseMap({dict(sorted(self._entries.items()))!r})"

    @property
    def size(self) -> int:
        """Positional length, max_key + 1 (0 when empty)."""
        if not self._entries:
            return 0
        return max(self._entries) + 1

    @property
    def count(self) -> int:
        """Number of populated keys."""
        return len(self._entries)

    def get(self, key: int, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def keys(self) -> List[int]:
        """Populated keys in ascending order."""
        return sorted(self._entries)

    def items(self) -> List[Tuple[int, Any]]:
        """(key, value) pairs of populated keys in ascending order."""
        return [(key, self._entries[key]) for key in self.keys()]

    def to_sequence(self) -> Tuple[Any, ...]:
        """Positional view with None at absent positions."""
        return tuple(self._entries.get(i) for i in range(self.size))
