from __future__ import annotations

from dataclasses import dataclass

from ..constants import INT64_MAX
from .table import STANDARD_TABLE, SymbolTable
from .types import Base64Status, SymbolKind


@dataclass(frozen=True, slots=True)
class Classification:
    status: Base64Status
    kind: SymbolKind
    index: int
    num_padding: int
    num_whitespace: int


def preprocess(
    byte: int,
    num_padding: int,
    num_whitespace: int,
    *,
    table: SymbolTable = STANDARD_TABLE,
    counter_max: int = INT64_MAX,
) -> Classification:
    """
    Classify one input byte and update the padding/whitespace counters.

    A counter is only incremented when it is strictly below `counter_max`, so
    it can reach `counter_max` but never pass it. When the increment is not
    possible the status is `COUNTER_OVERFLOW_RISK` and both counts are returned
    unchanged. Invalid bytes also leave the counts unchanged.
    """

    if num_padding < 0 or num_whitespace < 0:
        raise ValueError("counters must be non-negative")

    sym = table.classify(byte)
    kind = sym.kind
    status = Base64Status.SUCCESS

    if kind is SymbolKind.PADDING:
        if num_padding < counter_max:
            num_padding += 1
        else:
            status = Base64Status.COUNTER_OVERFLOW_RISK
    elif kind is SymbolKind.WHITESPACE:
        if num_whitespace < counter_max:
            num_whitespace += 1
        else:
            status = Base64Status.COUNTER_OVERFLOW_RISK
    elif kind is SymbolKind.INVALID:
        status = Base64Status.INVALID_SYMBOL

    return Classification(
        status=status,
        kind=kind,
        index=sym.index,
        num_padding=num_padding,
        num_whitespace=num_whitespace,
    )
