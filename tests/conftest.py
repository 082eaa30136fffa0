# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import pytest

from helpers import array, byte_string, int8, int32, sparse_map, tagged_varint


@pytest.fixture
def player_blob():
    """
    A details-like payload: one array holding a title, a list of players
    and a sparse map with keys 0, 1, 2 and 4.
    """
    players = array(
        array(byte_string(b"Alice"), byte_string(b"Protoss"), int8(1)),
        array(byte_string(b"Bob"), byte_string(b"Zerg"), int8(2)),
    )
    ident = sparse_map({
        0: int8(2),
        1: byte_string(b"S2"),
        2: int8(1),
        4: int32(1234567),
    })
    return array(byte_string(b"Lost Temple"), players, ident, tagged_varint(-42))


@pytest.fixture
def player_schema():
    """JSON-shaped schema matching player_blob."""
    return [
        {"name": "title", "type": "string"},
        {"name": "players", "type": "array", "map": [
            {"name": "name", "type": "string"},
            {"name": "race", "type": "string"},
            "team",
        ]},
        {"name": "ident", "map": ["region", {"name": "program", "type": "string"}, "realm", "unused", "id"]},
        "elapsed",
    ]
