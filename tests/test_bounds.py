from __future__ import annotations

import base64
import random

import pytest

from pyotab64.codec.bounds import (
    max_decoded_length,
    preflight,
    required_output_length,
    scan_symbols,
)
from pyotab64.codec.types import Base64Status


@pytest.mark.parametrize(
    ("n", "expected"),
    [(0, 0), (1, 0), (2, 1), (3, 2), (4, 3), (7, 5), (8, 6), (344, 258)],
)
def test_max_decoded_length(n: int, expected: int) -> None:
    assert max_decoded_length(n) == expected


def test_required_length_matches_payload_for_padded_and_spaced_input() -> None:
    rng = random.Random(99)
    for n in range(0, 50):
        data = rng.randbytes(n)
        enc = base64.b64encode(data) + b"\r\n"
        counts = scan_symbols(enc)
        assert counts.invalid_at == -1
        assert counts.whitespace == 2
        assert counts.padding == (-n) % 3
        assert required_output_length(counts.data) == n
        assert required_output_length(counts.data) <= max_decoded_length(len(enc))


def test_scan_symbols_stops_at_first_invalid_byte() -> None:
    counts = scan_symbols(b"TW Fu!?")
    assert counts.invalid_at == 5
    assert counts.data == 4
    assert counts.whitespace == 1


def test_preflight_accepts_exact_capacity() -> None:
    result = preflight(b"TWFuTQ==", 4)
    assert result.status is Base64Status.SUCCESS
    assert result.required == 4


def test_preflight_rejects_short_capacity() -> None:
    result = preflight(b"TWFuTQ==", 3)
    assert result.status is Base64Status.OUTPUT_BUFFER_TOO_SMALL
    assert result.required == 4
    assert result.length == 0


def test_preflight_checks_counter_domain_first() -> None:
    result = preflight(b"TWFu!", 0, counter_max=4)
    assert result.status is Base64Status.COUNTER_OVERFLOW_RISK

    result = preflight(b"TWFu", 3, counter_max=4)
    assert result.status is Base64Status.SUCCESS


def test_preflight_reports_invalid_symbol_before_capacity() -> None:
    result = preflight(b"TWFu TWFu #", 0)
    assert result.status is Base64Status.INVALID_SYMBOL
    assert result.position == 10


def test_negative_sizes_are_caller_errors() -> None:
    with pytest.raises(ValueError):
        max_decoded_length(-1)
    with pytest.raises(ValueError):
        required_output_length(-4)
    with pytest.raises(ValueError):
        preflight(b"", -1)


def test_preflight_reports_dangling_symbol_before_capacity() -> None:
    result = preflight(b"TQ==TQ==T", 0)
    assert result.status is Base64Status.DANGLING_SYMBOL
    assert result.position == 9

    result = preflight(b"TWFuT!", 0)
    assert result.status is Base64Status.INVALID_SYMBOL
