"""Signer backed by a key derived from a mnemonic and HD path."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .crypto.hd import derive_from_mnemonic_and_path
from .crypto.keys import PrivateKey
from .crypto.path import PathLevel
from .types.common import DerivationPath, Digest, Mnemonic, PublicKeyBytes, Signature
from .utils.validation import validate_digest

__all__ = ["BaseSigner", "Signer"]

logger = logging.getLogger(__name__)


class BaseSigner(ABC):
    """
    Signing capability consumed by a transaction relayer.

    Every method takes an optional ``ctx`` token so hosts that pass a
    cancellation context and hosts that do not can share one implementation.
    Signing is synchronous and never cancelled, so ``ctx`` is ignored.
    """

    @abstractmethod
    def get_public_key(self, ctx: Optional[Any] = None) -> PublicKeyBytes:
        """
        Get the signer's public key.

        Args:
            ctx: Advisory context token, ignored

        Returns:
            33-byte compressed public key
        """
        raise NotImplementedError

    @abstractmethod
    def sign(self, digest: Digest, ctx: Optional[Any] = None) -> Signature:
        """
        Sign a pre-hashed digest.

        Args:
            digest: 32-byte digest; never hashed again
            ctx: Advisory context token, ignored

        Returns:
            65-byte signature r || s || v

        Raises:
            InvalidDigestLengthError: If digest is not 32 bytes
            SigningError: If the curve library fails
        """
        raise NotImplementedError


class Signer(BaseSigner):
    """
    Holds one derived private key and signs digests with it.

    The key is fixed at construction and never mutated, so a single instance
    can be shared between threads without locking. No mnemonic, seed or chain
    code is kept.
    """

    def __init__(self, key: PrivateKey, path: Optional[DerivationPath] = None) -> None:
        """
        Wrap an already derived key.

        Args:
            key: Leaf private key
            path: Derivation path the key came from, for diagnostics only
        """
        self._key = PrivateKey(key)
        self._public_key = self._key.public_key().point
        self._path = path
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_mnemonic(cls, mnemonic: Mnemonic, path: DerivationPath) -> "Signer":
        """
        Derive the key for path from mnemonic and build a signer around it.

        Args:
            mnemonic: BIP39 mnemonic phrase
            path: Path text like m/44'/60'/0'/0/0

        Returns:
            Ready Signer

        Raises:
            ParseError: If path text is malformed
            ValidationError: If path violates BIP44 purpose/change rules
            InvalidMnemonicError: If mnemonic fails validation
            DerivationError: If derivation yields an invalid scalar
        """
        key = derive_from_mnemonic_and_path(mnemonic, path)
        signer = cls(key, path=DerivationPath(str(PathLevel.parse(path))))
        logger.info(f"Loaded signer for {signer.path} with public key {signer._public_key.hex()}")
        return signer

    @property
    def path(self) -> Optional[DerivationPath]:
        return self._path

    def get_public_key(self, ctx: Optional[Any] = None) -> PublicKeyBytes:
        return self._public_key

    def sign(self, digest: Digest, ctx: Optional[Any] = None) -> Signature:
        digest = validate_digest(digest)
        signature = self._key.sign_recoverable(digest)
        self._logger.debug(f"Signed digest {digest.hex()[:16]}... for {self._path}")
        return signature

    def __repr__(self) -> str:
        return f"Signer(path={self._path!r}, public_key={self._public_key.hex()})"
