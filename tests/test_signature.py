from __future__ import annotations

import base64

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from pyotab64 import decode_signature, verify_ecdsa_sha256
from pyotab64.exceptions import InvalidSymbolError, OutputBufferTooSmallError, SignatureError


def _pem(public_key: object) -> bytes:
    return public_key.public_bytes(  # type: ignore[attr-defined]
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture(scope="module")
def signer() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


def _job_field(sig: bytes) -> str:
    # Job documents commonly wrap long fields.
    b64 = base64.b64encode(sig).decode("ascii")
    return "\n".join(b64[i : i + 32] for i in range(0, len(b64), 32))


def test_verify_ecdsa_sha256_roundtrip(signer: ec.EllipticCurvePrivateKey) -> None:
    image = b"firmware image bytes" * 100
    sig = signer.sign(image, ec.ECDSA(hashes.SHA256()))
    pem = _pem(signer.public_key())

    assert verify_ecdsa_sha256(pem, image, _job_field(sig)) is True
    assert verify_ecdsa_sha256(pem, image + b"!", _job_field(sig)) is False


def test_malformed_signature_field_raises(signer: ec.EllipticCurvePrivateKey) -> None:
    pem = _pem(signer.public_key())
    with pytest.raises(InvalidSymbolError):
        verify_ecdsa_sha256(pem, b"data", "MEUCIQ!!")


def test_decode_signature_respects_fixed_buffer() -> None:
    sig = bytes(range(72))
    assert decode_signature(base64.b64encode(sig)) == sig

    with pytest.raises(OutputBufferTooSmallError) as ei:
        decode_signature(base64.b64encode(bytes(300)))
    assert ei.value.required == 300

    with pytest.raises(OutputBufferTooSmallError):
        decode_signature(base64.b64encode(sig), max_size=71)


def test_decode_signature_rejects_empty_field() -> None:
    with pytest.raises(SignatureError, match="zero bytes"):
        decode_signature(" \r\n")
    with pytest.raises(ValueError):
        decode_signature("TWFu", max_size=0)


def test_non_ec_or_garbage_public_key_is_rejected() -> None:
    ed_pem = _pem(ed25519.Ed25519PrivateKey.generate().public_key())
    with pytest.raises(SignatureError, match="EC public key"):
        verify_ecdsa_sha256(ed_pem, b"data", "TWFu")
    with pytest.raises(SignatureError, match="invalid public key"):
        verify_ecdsa_sha256(b"not a pem", b"data", "TWFu")


def test_non_ascii_signature_field_raises_value_error(
    signer: ec.EllipticCurvePrivateKey,
) -> None:
    pem = _pem(signer.public_key())
    with pytest.raises(ValueError, match="ASCII"):
        verify_ecdsa_sha256(pem, b"data", "MEUCIQé")
