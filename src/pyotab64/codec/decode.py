"""
Bounded Base64 decode engine.

The engine walks the input once, classifying each byte, and keeps all of its
state in a `DecodeSession` that lives for a single call. Decoded bytes are
written into a caller-owned buffer and never past its length.

Group rules:
- whitespace is skipped anywhere, including inside a group and between
  padding symbols
- four data symbols emit three bytes, most significant first
- padding may only close the final group: two data symbols need `==`,
  three need `=`
- nothing but whitespace may follow padding
- a final group holding a single data symbol cannot form a byte
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any

from ..config import DEFAULT_CONFIG, DecoderConfig
from ..constants import BITS_PER_SYMBOL, BYTES_PER_GROUP, INT64_MAX, SYMBOLS_PER_GROUP
from ..exceptions import error_for_status
from ..util.bytes import BytesLike, WritableBuffer, as_input_bytes, as_output_buffer
from .bounds import max_decoded_length, preflight
from .classify import Classification, preprocess
from .table import STANDARD_TABLE, SymbolTable
from .types import Base64Status, DecodeResult, SymbolKind

logger = logging.getLogger(__name__)


class DecodeState(enum.Enum):
    SCANNING_GROUP = "scanning_group"
    SAW_PADDING = "saw_padding"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class DecodeSession:
    capacity: int
    position: int = 0
    group_position: int = 0
    accumulator: int = 0
    group_padding: int = 0
    num_padding: int = 0
    num_whitespace: int = 0
    out_position: int = 0
    state: DecodeState = DecodeState.SCANNING_GROUP
    status: Base64Status = Base64Status.SUCCESS
    failed_at: int = -1

    def fail(self, status: Base64Status, position: int) -> None:
        self.state = DecodeState.FAILED
        self.status = status
        self.failed_at = position

    def result(self) -> DecodeResult:
        return DecodeResult(self.status, length=self.out_position, position=self.failed_at)


def _emit(session: DecodeSession, dest: WritableBuffer | None, count: int) -> None:
    # `accumulator` holds a left-aligned 24-bit group here.
    for shift in (16, 8, 0)[:count]:
        if session.out_position >= session.capacity:
            session.fail(Base64Status.OUTPUT_BUFFER_TOO_SMALL, session.position)
            return
        if dest is not None:
            dest[session.out_position] = (session.accumulator >> shift) & 0xFF
        session.out_position += 1


def _emit_tail(session: DecodeSession, dest: WritableBuffer | None) -> None:
    gp = session.group_position
    session.accumulator <<= BITS_PER_SYMBOL * (SYMBOLS_PER_GROUP - gp)
    _emit(session, dest, gp - 1)
    session.accumulator = 0
    session.group_position = 0


def _on_scanning(
    session: DecodeSession, sym: Classification, dest: WritableBuffer | None
) -> None:
    if sym.kind is SymbolKind.INDEX:
        session.accumulator = (session.accumulator << BITS_PER_SYMBOL) | sym.index
        session.group_position += 1
        if session.group_position == SYMBOLS_PER_GROUP:
            _emit(session, dest, BYTES_PER_GROUP)
            session.accumulator = 0
            session.group_position = 0
        return

    # padding
    if session.group_position == 0:
        session.fail(Base64Status.INVALID_PADDING_PLACEMENT, session.position)
    elif session.group_position == 1:
        session.fail(Base64Status.DANGLING_SYMBOL, session.position)
    else:
        session.state = DecodeState.SAW_PADDING
        session.group_padding = 1


def _on_padding_seen(session: DecodeSession, sym: Classification) -> None:
    if sym.kind is SymbolKind.INDEX:
        session.fail(Base64Status.INVALID_PADDING_PLACEMENT, session.position)
        return
    session.group_padding += 1
    if session.group_position + session.group_padding > SYMBOLS_PER_GROUP:
        session.fail(Base64Status.INVALID_PADDING_PLACEMENT, session.position)


def _finish(
    session: DecodeSession, dest: WritableBuffer | None, end: int, *, require_padding: bool
) -> None:
    session.position = end
    gp = session.group_position

    if session.state is DecodeState.SAW_PADDING:
        if gp + session.group_padding != SYMBOLS_PER_GROUP:
            session.fail(Base64Status.INVALID_PADDING_PLACEMENT, end)
            return
        _emit_tail(session, dest)
    elif gp == 1:
        session.fail(Base64Status.DANGLING_SYMBOL, end)
        return
    elif gp > 1:
        if require_padding:
            session.fail(Base64Status.INVALID_PADDING_PLACEMENT, end)
            return
        _emit_tail(session, dest)

    if session.state is not DecodeState.FAILED:
        session.state = DecodeState.DONE


def run_decode(
    src: BytesLike,
    dest: WritableBuffer | None,
    *,
    table: SymbolTable = STANDARD_TABLE,
    counter_max: int = INT64_MAX,
    require_padding: bool = False,
) -> DecodeResult:
    """
    Drive the state machine over `src`, writing into `dest`.

    No pre-flight checks are made here; room is checked before every output
    byte instead. Use `try_decode_into` for the full call.

    With `dest=None` nothing is written: the input is only checked for
    structure, and the output length is counted.
    """

    capacity = len(dest) if dest is not None else max_decoded_length(len(src))
    session = DecodeSession(capacity=capacity)

    for pos, b in enumerate(src):
        session.position = pos
        sym = preprocess(
            b,
            session.num_padding,
            session.num_whitespace,
            table=table,
            counter_max=counter_max,
        )
        if sym.status is not Base64Status.SUCCESS:
            session.fail(sym.status, pos)
            break
        session.num_padding = sym.num_padding
        session.num_whitespace = sym.num_whitespace

        if sym.kind is SymbolKind.WHITESPACE:
            continue
        if session.state is DecodeState.SCANNING_GROUP:
            _on_scanning(session, sym, dest)
        else:
            _on_padding_seen(session, sym)
        if session.state is DecodeState.FAILED:
            break
    else:
        _finish(session, dest, len(src), require_padding=require_padding)

    return session.result()


def try_decode_into(src: Any, dest: Any, *, config: DecoderConfig | None = None) -> DecodeResult:
    """
    Decode `src` into `dest` and report a status instead of raising.

    On any status other than `SUCCESS` the contents of `dest` are unspecified.
    """

    cfg = config or DEFAULT_CONFIG
    data = as_input_bytes(src)
    out = as_output_buffer(dest)
    table = cfg.table

    result = preflight(data, len(out), table=table, counter_max=cfg.counter_max)
    if result.ok:
        result = run_decode(
            data,
            out,
            table=table,
            counter_max=cfg.counter_max,
            require_padding=cfg.require_padding,
        )
    elif result.status is Base64Status.OUTPUT_BUFFER_TOO_SMALL:
        # Malformed input is reported ahead of a short buffer.
        check = run_decode(
            data,
            None,
            table=table,
            counter_max=cfg.counter_max,
            require_padding=cfg.require_padding,
        )
        if not check.ok:
            result = DecodeResult(check.status, position=check.position)

    if not result.ok:
        logger.debug(
            "base64 decode failed: status=%s offset=%d written=%d input_len=%d capacity=%d",
            result.status.value,
            result.position,
            result.length,
            len(data),
            len(out),
        )
    return result


def decode_into(src: Any, dest: Any, *, config: DecoderConfig | None = None) -> int:
    """Decode `src` into `dest`, returning the number of bytes written."""

    result = try_decode_into(src, dest, config=config)
    if not result.ok:
        raise error_for_status(result.status, position=result.position, required=result.required)
    return result.length


def decode(src: Any, *, config: DecoderConfig | None = None) -> bytes:
    data = as_input_bytes(src)
    buf = bytearray(max_decoded_length(len(data)))
    n = decode_into(data, buf, config=config)
    return bytes(buf[:n])
