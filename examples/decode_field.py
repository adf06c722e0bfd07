"""
Decode a Base64 field from an OTA job document into a fixed-size buffer.

Demonstrates:
- status-returning decode (`try_decode_into`)
- standard vs URL-safe alphabets
- padding strictness
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from pyotab64 import DEFAULT_CONFIG, URLSAFE_CONFIG, try_decode_into
from pyotab64.constants import OTA_MAX_SIGNATURE_SIZE


def main() -> int:
    ap = argparse.ArgumentParser(prog="decode_field.py")
    ap.add_argument("field", nargs="?", help="base64 text (default: read stdin)")
    ap.add_argument(
        "--size",
        type=int,
        default=OTA_MAX_SIGNATURE_SIZE,
        help=f"output buffer size (default: {OTA_MAX_SIGNATURE_SIZE})",
    )
    ap.add_argument("--urlsafe", action="store_true", help="use the URL-safe alphabet")
    ap.add_argument("--strict", action="store_true", help="require '=' padding on the final group")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.field if args.field is not None else sys.stdin.read()
    base = URLSAFE_CONFIG if args.urlsafe else DEFAULT_CONFIG
    config = dataclasses.replace(base, require_padding=args.strict)

    buf = bytearray(args.size)
    result = try_decode_into(text, buf, config=config)
    if not result.ok:
        where = f" at offset {result.position}" if result.position >= 0 else ""
        print(f"error: {result.status.value}{where}", file=sys.stderr)
        return 1
    print(buf[: result.length].hex())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
