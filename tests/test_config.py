from __future__ import annotations

import pytest

from pyotab64 import DEFAULT_CONFIG, URLSAFE_CONFIG, DecoderConfig
from pyotab64.codec.table import STANDARD_ALPHABET, URLSAFE_ALPHABET
from pyotab64.codec.types import Base64Status
from pyotab64.constants import INT64_MAX
from pyotab64.exceptions import (
    Base64DecodeError,
    CounterOverflowRiskError,
    DanglingSymbolError,
    InvalidPaddingPlacementError,
    InvalidSymbolError,
    MalformedInputError,
    OutputBufferTooSmallError,
    error_for_status,
)


def test_defaults() -> None:
    assert DEFAULT_CONFIG.alphabet == STANDARD_ALPHABET
    assert DEFAULT_CONFIG.padding == "="
    assert DEFAULT_CONFIG.counter_max == INT64_MAX
    assert DEFAULT_CONFIG.require_padding is False
    assert URLSAFE_CONFIG.table.alphabet == URLSAFE_ALPHABET


def test_tables_are_shared_between_equal_configs() -> None:
    assert DecoderConfig().table is DecoderConfig().table
    assert DecoderConfig(require_padding=True).table is DEFAULT_CONFIG.table


def test_invalid_config_values() -> None:
    with pytest.raises(ValueError, match="counter_max"):
        DecoderConfig(counter_max=0)
    with pytest.raises(ValueError, match="64 ASCII"):
        _ = DecoderConfig(alphabet="ABC").table


@pytest.mark.parametrize(
    ("status", "cls"),
    [
        (Base64Status.INVALID_SYMBOL, InvalidSymbolError),
        (Base64Status.INVALID_PADDING_PLACEMENT, InvalidPaddingPlacementError),
        (Base64Status.DANGLING_SYMBOL, DanglingSymbolError),
        (Base64Status.OUTPUT_BUFFER_TOO_SMALL, OutputBufferTooSmallError),
        (Base64Status.COUNTER_OVERFLOW_RISK, CounterOverflowRiskError),
    ],
)
def test_error_for_status(status: Base64Status, cls: type[Base64DecodeError]) -> None:
    err = error_for_status(status, position=3)
    assert type(err) is cls
    assert err.status is status
    assert err.position == 3
    assert "offset 3" in str(err)
    assert isinstance(err, MalformedInputError) == (
        status
        in (
            Base64Status.INVALID_SYMBOL,
            Base64Status.INVALID_PADDING_PLACEMENT,
            Base64Status.DANGLING_SYMBOL,
        )
    )


def test_error_for_success_is_a_bug() -> None:
    with pytest.raises(ValueError):
        error_for_status(Base64Status.SUCCESS)
