"""
Pre-flight checks run once per decode call, before the engine writes anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import BYTES_PER_GROUP, INT64_MAX, SYMBOLS_PER_GROUP
from .table import STANDARD_TABLE, SymbolTable
from .types import Base64Status, DecodeResult, SymbolKind

# Bytes produced by an unpadded trailing group of 0..3 symbols.
_TAIL_BYTES = (0, 0, 1, 2)


@dataclass(frozen=True, slots=True)
class SymbolCounts:
    data: int
    padding: int
    whitespace: int
    invalid_at: int = -1


def max_decoded_length(input_length: int) -> int:
    """Worst-case decoded size of `input_length` encoded bytes."""

    if input_length < 0:
        raise ValueError("input_length must be >= 0")
    groups, tail = divmod(input_length, SYMBOLS_PER_GROUP)
    return groups * BYTES_PER_GROUP + _TAIL_BYTES[tail]


def required_output_length(data_symbols: int) -> int:
    """Exact decoded size of a well-formed input carrying `data_symbols` alphabet symbols."""

    if data_symbols < 0:
        raise ValueError("data_symbols must be >= 0")
    return (data_symbols * BYTES_PER_GROUP) // SYMBOLS_PER_GROUP


def scan_symbols(
    src: bytes | bytearray | memoryview, table: SymbolTable = STANDARD_TABLE
) -> SymbolCounts:
    data = padding = whitespace = 0
    symbols = table.symbols
    for pos, b in enumerate(src):
        kind = symbols[b].kind
        if kind is SymbolKind.INDEX:
            data += 1
        elif kind is SymbolKind.WHITESPACE:
            whitespace += 1
        elif kind is SymbolKind.PADDING:
            padding += 1
        else:
            return SymbolCounts(data=data, padding=padding, whitespace=whitespace, invalid_at=pos)
    return SymbolCounts(data=data, padding=padding, whitespace=whitespace)


def preflight(
    src: bytes | bytearray | memoryview,
    capacity: int,
    *,
    table: SymbolTable = STANDARD_TABLE,
    counter_max: int = INT64_MAX,
) -> DecodeResult:
    if capacity < 0:
        raise ValueError("capacity must be >= 0")

    # Each counter can grow by at most one per input byte.
    if len(src) > counter_max:
        return DecodeResult(Base64Status.COUNTER_OVERFLOW_RISK)

    counts = scan_symbols(src, table)
    if counts.invalid_at >= 0:
        return DecodeResult(Base64Status.INVALID_SYMBOL, position=counts.invalid_at)

    # One leftover data symbol cannot form a byte, wherever padding sits.
    if counts.data % SYMBOLS_PER_GROUP == 1:
        return DecodeResult(Base64Status.DANGLING_SYMBOL, position=len(src))

    required = required_output_length(counts.data)
    if capacity < required:
        return DecodeResult(Base64Status.OUTPUT_BUFFER_TOO_SMALL, required=required)
    return DecodeResult(Base64Status.SUCCESS, required=required)
