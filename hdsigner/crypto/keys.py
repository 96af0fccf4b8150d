"""secp256k1 key wrappers for the HD signer."""

from typing import Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey

from ..constants import SECP256K1_ORDER
from ..exceptions import SigningError, ValidationError
from ..types.common import Digest, PrivateKeyBytes, PublicKeyBytes, Signature
from ..utils.validation import validate_digest, validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey"]


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Holds the scalar ``D`` and the coincurve key used for public point
    computation and recoverable signing. Instances are never mutated.
    """

    __slots__ = ("_secret", "_key")

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            ValidationError: If key format is invalid
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        self._secret = PrivateKeyBytes(validate_private_key(key))
        self._key = SecpPrivateKey(self._secret)

    @classmethod
    def from_int(cls, value: int) -> "PrivateKey":
        """
        Create private key from its scalar.

        Raises:
            ValidationError: If value is not in [1, n-1]
        """
        if not 0 < value < SECP256K1_ORDER:
            raise ValidationError("Private key scalar out of range")
        return cls(value.to_bytes(32, "big"))

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    @property
    def d(self) -> int:
        """Get private key scalar."""
        return int.from_bytes(self._secret, "big")

    def public_key(self) -> "PublicKey":
        """Get corresponding compressed public key."""
        return PublicKey(self._key.public_key.format(compressed=True))

    def sign_recoverable(self, message_hash: Digest) -> Signature:
        """
        Create recoverable signature over a 32-byte hash.

        The nonce is derived per RFC 6979 and ``s`` is normalized to the
        lower half of the order, so the result is deterministic.

        Args:
            message_hash: 32-byte hash to sign

        Returns:
            65-byte signature r || s || v

        Raises:
            InvalidDigestLengthError: If hash is not 32 bytes
            SigningError: If signing fails
        """
        message_hash = validate_digest(message_hash)

        try:
            return Signature(self._key.sign_recoverable(message_hash, hasher=None))
        except Exception as e:
            raise SigningError(f"Recoverable signing failed: {e}") from e

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        """String representation."""
        # Only the public half is shown
        return f"PrivateKey(pub={self.public_key().hex()[:10]}...)"


class PublicKey:
    """Compressed secp256k1 public key."""

    __slots__ = ("_point", "_key")

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: 33-byte compressed point as bytes, hex string, or another PublicKey

        Raises:
            ValidationError: If key format is invalid or not on the curve
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            self._key = key._key
            return

        key_bytes = validate_public_key(key)
        try:
            self._key = SecpPublicKey(key_bytes)
        except Exception as e:
            raise ValidationError(f"Public key is not a curve point: {e}") from e
        self._point = PublicKeyBytes(key_bytes)

    @classmethod
    def recover(cls, message_hash: Digest, signature: bytes) -> "PublicKey":
        """
        Recover the signer's public key from a recoverable signature.

        Raises:
            SigningError: If recovery fails
        """
        message_hash = validate_digest(message_hash)
        try:
            recovered = SecpPublicKey.from_signature_and_message(signature, message_hash, hasher=None)
        except Exception as e:
            raise SigningError(f"Public key recovery failed: {e}") from e
        return cls(recovered.format(compressed=True))

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as 33 bytes."""
        return self._point

    def hex(self) -> str:
        """Get public key as hex string."""
        return self._point.hex()

    def verify(self, signature: bytes, message_hash: Digest) -> bool:
        """
        Verify a recoverable signature against this key.

        Args:
            signature: 65-byte signature r || s || v
            message_hash: 32-byte message hash

        Returns:
            True if signature is valid
        """
        try:
            return PublicKey.recover(message_hash, signature) == self
        except (SigningError, ValidationError):
            return False

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self._point == other._point

    def __hash__(self) -> int:
        return hash(self._point)

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"
