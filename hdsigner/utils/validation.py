"""Validation utilities for keys, digests and signatures."""

from typing import Union

from ..constants import (
    COMPRESSED_PUBKEY_LENGTH,
    DIGEST_LENGTH,
    PRIVATE_KEY_LENGTH,
    SECP256K1_ORDER,
    SIGNATURE_LENGTH,
)
from ..exceptions import InvalidDigestLengthError, ValidationError
from ..types.common import Digest, HexStr
from ..utils.encoding import hex_to_bytes

__all__ = [
    "validate_private_key",
    "validate_public_key",
    "validate_digest",
    "is_valid_signature",
    "validate_signature",
]


def _to_bytes(
    value: Union[HexStr, str, bytes, bytearray, memoryview],
    what: str,
    allow_hex: bool = True
) -> bytes:
    """Normalize hex strings and buffer types to bytes."""
    if isinstance(value, str):
        if not allow_hex:
            raise ValidationError(f"{what} must be bytes, not a string")
        return hex_to_bytes(value)
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, bytes):
        expected = "bytes or hex string" if allow_hex else "bytes"
        raise ValidationError(f"{what} must be {expected}, got {type(value).__name__}")
    return value


def validate_private_key(key: Union[str, bytes]) -> bytes:
    """
    Validate private key and return as bytes.

    Args:
        key: Private key as hex string or bytes

    Returns:
        Private key as 32 bytes

    Raises:
        ValidationError: If private key is invalid
    """
    key = _to_bytes(key, "Private key")

    if len(key) != PRIVATE_KEY_LENGTH:
        raise ValidationError(f"Private key must be 32 bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise ValidationError("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise ValidationError("Private key exceeds curve order")

    return key


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate compressed public key and return as bytes.

    Only the SEC1 framing is checked here; whether the x-coordinate lies on
    the curve is left to coincurve.

    Raises:
        ValidationError: If public key is invalid
    """
    key = _to_bytes(key, "Public key")

    if len(key) != COMPRESSED_PUBKEY_LENGTH:
        raise ValidationError(f"Public key must be 33 bytes, got {len(key)}")
    if key[0] not in (0x02, 0x03):
        raise ValidationError("Compressed public key must start with 0x02 or 0x03")

    return key


def validate_digest(digest: bytes) -> Digest:
    """
    Validate a pre-hashed message digest.

    Hex strings are refused so a hex-encoded digest is never signed by
    accident.

    Args:
        digest: 32-byte digest as bytes, bytearray or memoryview

    Returns:
        Digest bytes

    Raises:
        InvalidDigestLengthError: If digest is not exactly 32 bytes
        ValidationError: If digest is not bytes-like
    """
    digest = _to_bytes(digest, "Digest", allow_hex=False)

    if len(digest) != DIGEST_LENGTH:
        raise InvalidDigestLengthError(len(digest))

    return Digest(digest)


def is_valid_signature(signature: Union[str, bytes]) -> bool:
    """Check if a recoverable signature is well formed."""
    try:
        validate_signature(signature)
        return True
    except ValidationError:
        return False


def validate_signature(signature: Union[str, bytes]) -> bytes:
    """
    Validate a 65-byte recoverable signature.

    Raises:
        ValidationError: If length, scalar range or recovery id is wrong
    """
    signature = _to_bytes(signature, "Signature")

    if len(signature) != SIGNATURE_LENGTH:
        raise ValidationError(f"Signature must be 65 bytes, got {len(signature)}")

    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    if not 0 < r < SECP256K1_ORDER:
        raise ValidationError("Signature r is out of range")
    if not 0 < s < SECP256K1_ORDER:
        raise ValidationError("Signature s is out of range")
    if signature[64] > 3:
        raise ValidationError(f"Invalid recovery id: {signature[64]}")

    return signature
