"""
HD Signer

Derives a secp256k1 key from a BIP39 mnemonic and a BIP44 path and signs
32-byte digests with it for a transaction relayer.
"""

from .config import SignerConfig, signer_factory
from .crypto import PathLevel, PrivateKey, PublicKey
from .exceptions import (
    HDSignerError,
    ConfigError,
    ValidationError,
    InvalidDigestLengthError,
    CryptoError,
    ParseError,
    InvalidMnemonicError,
    DerivationError,
    SigningError,
)
from .signer import BaseSigner, Signer

__version__ = "1.0.0"

__all__ = [
    # Signer
    "BaseSigner",
    "Signer",

    # Config
    "SignerConfig",
    "signer_factory",

    # Crypto
    "PathLevel",
    "PrivateKey",
    "PublicKey",

    # Exceptions
    "HDSignerError",
    "ConfigError",
    "ValidationError",
    "InvalidDigestLengthError",
    "CryptoError",
    "ParseError",
    "InvalidMnemonicError",
    "DerivationError",
    "SigningError",
]
