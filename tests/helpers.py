# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Builders for hand-constructed blizzerial payloads used by the tests."""


def varint(value: int) -> bytes:
    """Encode value as a signed varint (no tag byte)."""
    raw = (abs(value) << 1) | (1 if value < 0 else 0)
    result = []
    while raw >= 0x80:
        result.append((raw & 0x7F) | 0x80)
        raw >>= 7
    result.append(raw)
    return bytes(result)


def tagged_varint(value: int) -> bytes:
    return b"\x09" + varint(value)


def int8(value: int) -> bytes:
    raw = (abs(value) << 1) | (1 if value < 0 else 0)
    assert raw <= 0xFF
    return bytes([0x06, raw])


def int32(value: int) -> bytes:
    magnitude = abs(value)
    b0 = ((magnitude & 0x7F) << 1) | (1 if value < 0 else 0)
    return bytes([
        0x07,
        b0,
        (magnitude >> 7) & 0xFF,
        (magnitude >> 15) & 0xFF,
        (magnitude >> 23) & 0xFF,
    ])


def byte_string(data: bytes) -> bytes:
    return b"\x02" + varint(len(data)) + data


def array(*items: bytes) -> bytes:
    return b"\x04\x01\x00" + varint(len(items)) + b"".join(items)


def sparse_map(entries: dict) -> bytes:
    body = b"".join(varint(key) + item for key, item in entries.items())
    return b"\x05" + varint(len(entries)) + body
