from __future__ import annotations

from typing import Any, TypeAlias

BytesLike: TypeAlias = bytes | bytearray | memoryview
WritableBuffer: TypeAlias = bytearray | memoryview


def as_input_bytes(src: Any) -> BytesLike:
    """
    Accept encoded text as bytes-like or ASCII `str`.

    The caller keeps ownership; bytes-like inputs are not copied.
    """

    if isinstance(src, str):
        try:
            return src.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError("string argument should contain only ASCII characters") from None
    if isinstance(src, (bytes, bytearray)):
        return src
    try:
        mv = memoryview(src)
    except TypeError:
        raise TypeError(
            f"expected bytes-like object or ASCII str, got {type(src).__name__}"
        ) from None
    if not mv.c_contiguous:
        raise BufferError("input buffer is not C-contiguous")
    return mv.cast("B")


def as_output_buffer(dest: Any) -> WritableBuffer:
    if isinstance(dest, bytearray):
        return dest
    try:
        mv = memoryview(dest)
    except TypeError:
        raise TypeError(f"expected writable buffer, got {type(dest).__name__}") from None
    if mv.readonly:
        raise TypeError("output buffer must be writable")
    if not mv.c_contiguous:
        raise BufferError("output buffer is not C-contiguous")
    return mv.cast("B")
