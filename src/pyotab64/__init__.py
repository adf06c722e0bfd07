"""
pyotab64: a bounded Base64 decoder for OTA update metadata.

Decodes Base64 signature and certificate fields into caller-owned,
fixed-size buffers, reporting a distinct status for every way the input can
be rejected.
"""

from __future__ import annotations

from .codec import Base64Status, DecodeResult, decode, decode_into, try_decode_into
from .config import DEFAULT_CONFIG, URLSAFE_CONFIG, DecoderConfig
from .exceptions import Base64DecodeError, Pyotab64Error
from .signature import decode_signature, verify_ecdsa_sha256

__all__ = [
    "DEFAULT_CONFIG",
    "URLSAFE_CONFIG",
    "Base64DecodeError",
    "Base64Status",
    "DecodeResult",
    "DecoderConfig",
    "Pyotab64Error",
    "decode",
    "decode_into",
    "decode_signature",
    "try_decode_into",
    "verify_ecdsa_sha256",
]

__version__ = "0.1.0"
