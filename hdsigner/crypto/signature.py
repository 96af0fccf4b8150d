"""Recoverable signature utilities."""

from typing import Tuple, Union

from ..crypto.keys import PublicKey
from ..exceptions import ValidationError
from ..types.common import Digest, PublicKeyBytes, Signature
from ..utils.validation import is_valid_signature, validate_signature

__all__ = [
    "split_signature",
    "join_signature",
    "recover_public_key",
    "verify_signature",
]


def split_signature(signature: bytes) -> Tuple[int, int, int]:
    """
    Split a recoverable signature into its parts.

    Args:
        signature: 65-byte signature r || s || v

    Returns:
        Tuple of (r, s, v)

    Raises:
        ValidationError: If signature format is invalid
    """
    signature = validate_signature(signature)
    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    return r, s, signature[64]


def join_signature(r: int, s: int, v: int) -> Signature:
    """
    Encode (r, s, v) as a 65-byte signature.

    Raises:
        ValidationError: If a component does not fit its width
    """
    try:
        data = r.to_bytes(32, "big") + s.to_bytes(32, "big") + v.to_bytes(1, "big")
    except OverflowError as e:
        raise ValidationError(f"Signature component too large: {e}") from e
    return Signature(validate_signature(data))


def recover_public_key(digest: Digest, signature: bytes) -> PublicKeyBytes:
    """
    Recover the compressed public key that produced a signature.

    Args:
        digest: 32-byte digest that was signed
        signature: 65-byte signature r || s || v

    Returns:
        33-byte compressed public key

    Raises:
        InvalidDigestLengthError: If digest is not 32 bytes
        ValidationError: If signature format is invalid
        SigningError: If recovery fails
    """
    signature = validate_signature(signature)
    return PublicKey.recover(digest, signature).point


def verify_signature(
    public_key: Union[bytes, str, PublicKey],
    digest: Digest,
    signature: bytes
) -> bool:
    """
    Check that a signature over digest was made by public_key.

    Returns:
        True if signature is valid, False otherwise
    """
    if not is_valid_signature(signature):
        return False
    try:
        return PublicKey(public_key).verify(signature, digest)
    except ValidationError:
        return False
