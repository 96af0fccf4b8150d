"""Type definitions for the HD signer."""

from ..types.common import (
    HexStr,
    Mnemonic,
    DerivationPath,
    Seed,
    ChainCode,
    PrivateKeyBytes,
    PublicKeyBytes,
    Digest,
    Signature,
)

__all__ = [
    "HexStr",
    "Mnemonic",
    "DerivationPath",
    "Seed",
    "ChainCode",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Digest",
    "Signature",
]
