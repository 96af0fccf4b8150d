"""Common type definitions for the HD signer."""

from typing import NewType

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

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Mnemonic = NewType("Mnemonic", str)
"""BIP39 mnemonic phrase."""

DerivationPath = NewType("DerivationPath", str)
"""Textual BIP44 path like m/44'/60'/0'/0/0."""

# Crypto types
Seed = NewType("Seed", bytes)
"""64-byte BIP39 seed."""

ChainCode = NewType("ChainCode", bytes)
"""32-byte BIP32 chain code."""

PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed public key."""

Digest = NewType("Digest", bytes)
"""32-byte message digest."""

Signature = NewType("Signature", bytes)
"""65-byte recoverable signature r || s || v."""
