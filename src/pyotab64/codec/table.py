"""
Byte -> symbol lookup for one Base64 alphabet.

Every byte value 0..255 maps to exactly one `Symbol`. Tables are built once
and never mutated, so any number of decode calls can share one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .types import INVALID, PADDING, WHITESPACE, Symbol, SymbolKind

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URLSAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
DEFAULT_PADDING = "="
DEFAULT_WHITESPACE = " \t\r\n"

_ALPHABET_SIZE = 64
_TABLE_SIZE = 256


@dataclass(frozen=True, slots=True)
class SymbolTable:
    alphabet: str
    padding: str
    whitespace: str
    symbols: tuple[Symbol, ...]

    def classify(self, byte: int) -> Symbol:
        if not 0 <= byte < _TABLE_SIZE:
            raise ValueError(f"byte out of range: {byte}")
        return self.symbols[byte]

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)


def _single_ascii(value: str, *, field: str) -> int:
    if len(value) != 1 or not value.isascii():
        raise ValueError(f"{field} must be a single ASCII character, got {value!r}")
    return ord(value)


def build_symbol_table(
    alphabet: str = STANDARD_ALPHABET,
    *,
    padding: str = DEFAULT_PADDING,
    whitespace: str = DEFAULT_WHITESPACE,
) -> SymbolTable:
    if len(alphabet) != _ALPHABET_SIZE or not alphabet.isascii():
        raise ValueError("alphabet must be 64 ASCII characters")
    if len(set(alphabet)) != _ALPHABET_SIZE:
        raise ValueError("alphabet characters must be distinct")
    pad = _single_ascii(padding, field="padding")
    if padding in alphabet:
        raise ValueError(f"padding {padding!r} is part of the alphabet")
    if not whitespace.isascii():
        raise ValueError("whitespace must be ASCII")
    overlap = set(whitespace) & (set(alphabet) | {padding})
    if overlap:
        raise ValueError(f"whitespace overlaps alphabet/padding: {sorted(overlap)!r}")

    symbols: list[Symbol] = [INVALID] * _TABLE_SIZE
    for i, ch in enumerate(alphabet):
        symbols[ord(ch)] = Symbol(SymbolKind.INDEX, i)
    symbols[pad] = PADDING
    for ch in whitespace:
        symbols[ord(ch)] = WHITESPACE

    return SymbolTable(
        alphabet=alphabet, padding=padding, whitespace=whitespace, symbols=tuple(symbols)
    )


STANDARD_TABLE = build_symbol_table(STANDARD_ALPHABET)
URLSAFE_TABLE = build_symbol_table(URLSAFE_ALPHABET)
