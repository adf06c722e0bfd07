from __future__ import annotations

from .codec.types import Base64Status


class Pyotab64Error(Exception):
    """Base error for the pyotab64 library."""


class Base64DecodeError(Pyotab64Error):
    """
    A decode call failed.

    Bytes already written to the output buffer for earlier groups must not be
    trusted: the whole call is invalid.
    """

    status: Base64Status = Base64Status.SUCCESS

    def __init__(self, message: str, *, position: int = -1) -> None:
        super().__init__(message)
        self.position = position


class MalformedInputError(Base64DecodeError):
    """The encoded text is not valid Base64."""


class InvalidSymbolError(MalformedInputError):
    status = Base64Status.INVALID_SYMBOL


class InvalidPaddingPlacementError(MalformedInputError):
    status = Base64Status.INVALID_PADDING_PLACEMENT


class DanglingSymbolError(MalformedInputError):
    status = Base64Status.DANGLING_SYMBOL


class OutputBufferTooSmallError(Base64DecodeError):
    """The caller's output buffer cannot hold the decoded bytes."""

    status = Base64Status.OUTPUT_BUFFER_TOO_SMALL

    def __init__(
        self, message: str, *, position: int = -1, required: int | None = None
    ) -> None:
        super().__init__(message, position=position)
        self.required = required


class CounterOverflowRiskError(Base64DecodeError):
    """
    A padding/whitespace counter would exceed its representable maximum.

    This is an internal precondition violation; in practice it means a caller bug.
    """

    status = Base64Status.COUNTER_OVERFLOW_RISK


class SignatureError(Pyotab64Error):
    """OTA signature field could not be used."""


_ERRORS: dict[Base64Status, type[Base64DecodeError]] = {
    Base64Status.INVALID_SYMBOL: InvalidSymbolError,
    Base64Status.INVALID_PADDING_PLACEMENT: InvalidPaddingPlacementError,
    Base64Status.DANGLING_SYMBOL: DanglingSymbolError,
    Base64Status.OUTPUT_BUFFER_TOO_SMALL: OutputBufferTooSmallError,
    Base64Status.COUNTER_OVERFLOW_RISK: CounterOverflowRiskError,
}

_MESSAGES: dict[Base64Status, str] = {
    Base64Status.INVALID_SYMBOL: "invalid base64 symbol",
    Base64Status.INVALID_PADDING_PLACEMENT: "invalid padding placement",
    Base64Status.DANGLING_SYMBOL: "dangling base64 symbol in final group",
    Base64Status.OUTPUT_BUFFER_TOO_SMALL: "output buffer too small",
    Base64Status.COUNTER_OVERFLOW_RISK: "padding/whitespace counter would overflow",
}


def error_for_status(
    status: Base64Status, *, position: int = -1, required: int | None = None
) -> Base64DecodeError:
    cls = _ERRORS.get(status)
    if cls is None:
        raise ValueError(f"no error for status: {status!r}")
    msg = _MESSAGES[status]
    if position >= 0:
        msg = f"{msg} (offset {position})"
    if cls is OutputBufferTooSmallError:
        if required is not None:
            msg = f"{msg}: {required} bytes required"
        return OutputBufferTooSmallError(msg, position=position, required=required)
    return cls(msg, position=position)
