from __future__ import annotations

import enum
from dataclasses import dataclass


class SymbolKind(enum.Enum):
    INDEX = "index"
    PADDING = "padding"
    WHITESPACE = "whitespace"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class Symbol:
    """
    Classification of one input byte.

    - `kind`: what the byte means to the decoder
    - `index`: 6-bit alphabet value (0..63) for `INDEX`, -1 for the sentinels
    """

    kind: SymbolKind
    index: int = -1


PADDING = Symbol(SymbolKind.PADDING)
WHITESPACE = Symbol(SymbolKind.WHITESPACE)
INVALID = Symbol(SymbolKind.INVALID)


class Base64Status(enum.Enum):
    SUCCESS = "success"
    INVALID_SYMBOL = "invalid_symbol"
    INVALID_PADDING_PLACEMENT = "invalid_padding_placement"
    DANGLING_SYMBOL = "dangling_symbol"
    OUTPUT_BUFFER_TOO_SMALL = "output_buffer_too_small"
    COUNTER_OVERFLOW_RISK = "counter_overflow_risk"


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """
    Outcome of one decode call.

    `length` is how many bytes were written. On any status other than
    `SUCCESS` those bytes are not to be trusted.
    """

    status: Base64Status
    length: int = 0
    position: int = -1
    required: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is Base64Status.SUCCESS
