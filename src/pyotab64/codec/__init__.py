from __future__ import annotations

from .bounds import (
    SymbolCounts,
    max_decoded_length,
    preflight,
    required_output_length,
    scan_symbols,
)
from .classify import Classification, preprocess
from .decode import (
    DecodeSession,
    DecodeState,
    decode,
    decode_into,
    run_decode,
    try_decode_into,
)
from .table import (
    STANDARD_ALPHABET,
    STANDARD_TABLE,
    URLSAFE_ALPHABET,
    URLSAFE_TABLE,
    SymbolTable,
    build_symbol_table,
)
from .types import Base64Status, DecodeResult, Symbol, SymbolKind

__all__ = [
    "STANDARD_ALPHABET",
    "STANDARD_TABLE",
    "URLSAFE_ALPHABET",
    "URLSAFE_TABLE",
    "Base64Status",
    "Classification",
    "DecodeResult",
    "DecodeSession",
    "DecodeState",
    "Symbol",
    "SymbolCounts",
    "SymbolKind",
    "SymbolTable",
    "build_symbol_table",
    "decode",
    "decode_into",
    "max_decoded_length",
    "preflight",
    "preprocess",
    "required_output_length",
    "run_decode",
    "scan_symbols",
    "try_decode_into",
]
