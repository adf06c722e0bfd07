"""
Decode the Base64 `sig-sha256-ecdsa` field of an OTA job document.

The signature lands in a fixed-size buffer, as on the device; anything that
would not fit is rejected before a byte is written.
"""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from .codec.decode import decode_into
from .config import DecoderConfig
from .constants import OTA_MAX_SIGNATURE_SIZE
from .exceptions import SignatureError


def decode_signature(
    field: Any,
    *,
    max_size: int = OTA_MAX_SIGNATURE_SIZE,
    config: DecoderConfig | None = None,
) -> bytes:
    if max_size <= 0:
        raise ValueError("max_size must be > 0")
    buf = bytearray(max_size)
    n = decode_into(field, buf, config=config)
    if n == 0:
        raise SignatureError("signature field decoded to zero bytes")
    return bytes(buf[:n])


def _load_ec_public_key(public_key_pem: bytes) -> ec.EllipticCurvePublicKey:
    try:
        key = serialization.load_pem_public_key(public_key_pem)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise SignatureError(f"invalid public key: {e}") from e
    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise SignatureError(f"expected an EC public key, got {type(key).__name__}")
    return key


def verify_ecdsa_sha256(
    public_key_pem: bytes,
    data: bytes,
    signature_field: Any,
    *,
    config: DecoderConfig | None = None,
) -> bool:
    """
    Check a DER ECDSA/SHA-256 signature carried as Base64 in a job document.

    A malformed signature field raises `Base64DecodeError`, or `ValueError`
    when it is a `str` holding non-ASCII characters. A well-formed signature
    that does not verify returns False.
    """

    key = _load_ec_public_key(public_key_pem)
    sig = decode_signature(signature_field, config=config)
    try:
        key.verify(sig, data, ec.ECDSA(hashes.SHA256()))
    except InvalidSignature:
        return False
    return True
