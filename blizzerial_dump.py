#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Dump tool for blizzerial encoded files.

Usage:
    python blizzerial_dump.py replay.header
    python blizzerial_dump.py replay.header --schema header_schema.json
    python blizzerial_dump.py replay.details --schema details.json --strict
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from blizzerial import DecodeError, SparseMap, decode, parse


def to_json(value: Any) -> Any:
    """Convert parsed or mapped values into JSON-serializable data."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.hex()
    if isinstance(value, SparseMap):
        return {str(key): to_json(item) for key, item in value.items()}
    if isinstance(value, dict):
        return {key: to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return value


def cmd_dump(data: bytes, schema_path: Path, strict: bool, indent: int) -> bool:
    """Decode data and print it as JSON."""
    if schema_path is None:
        result = parse(data, strict=strict)
    else:
        try:
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            print(f"Error reading schema {schema_path}: {e}", file=sys.stderr)
            return False
        result = decode(data, schema, strict=strict)

    print(json.dumps(to_json(result), indent=indent))
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Dump blizzerial encoded data as JSON"
    )
    parser.add_argument("file", type=Path, help="Blizzerial encoded file")
    parser.add_argument("--schema", "-s", type=Path, default=None,
                        help="JSON schema file (dump the raw value tree if omitted)")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on unknown tags instead of decoding them as null")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation (default 2)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    try:
        ok = cmd_dump(args.file.read_bytes(), args.schema, args.strict, args.indent)
    except DecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
