from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .codec.table import (
    DEFAULT_PADDING,
    DEFAULT_WHITESPACE,
    STANDARD_ALPHABET,
    URLSAFE_ALPHABET,
    SymbolTable,
    build_symbol_table,
)
from .constants import INT64_MAX


@lru_cache(maxsize=16)
def _cached_table(alphabet: str, padding: str, whitespace: str) -> SymbolTable:
    return build_symbol_table(alphabet, padding=padding, whitespace=whitespace)


@dataclass(frozen=True, slots=True)
class DecoderConfig:
    alphabet: str = STANDARD_ALPHABET
    padding: str = DEFAULT_PADDING
    whitespace: str = DEFAULT_WHITESPACE

    # Representable maximum of the padding/whitespace counters.
    counter_max: int = INT64_MAX

    # Reject a final group of 2 or 3 symbols that has no padding.
    require_padding: bool = False

    def __post_init__(self) -> None:
        if self.counter_max < 1:
            raise ValueError("counter_max must be >= 1")

    @property
    def table(self) -> SymbolTable:
        return _cached_table(self.alphabet, self.padding, self.whitespace)


DEFAULT_CONFIG = DecoderConfig()
URLSAFE_CONFIG = DecoderConfig(alphabet=URLSAFE_ALPHABET)
