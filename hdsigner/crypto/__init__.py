"""Cryptographic primitives for the HD signer."""

from ..crypto.path import PathLevel
from ..crypto.keys import PrivateKey, PublicKey
from ..crypto.bip39 import check_mnemonic, seed_from_mnemonic
from ..crypto.hd import HDNode, derive_private_key, derive_from_mnemonic_and_path
from ..crypto.signature import (
    split_signature,
    join_signature,
    recover_public_key,
    verify_signature,
)

__all__ = [
    # Path
    "PathLevel",

    # Keys
    "PrivateKey",
    "PublicKey",

    # Derivation
    "check_mnemonic",
    "seed_from_mnemonic",
    "HDNode",
    "derive_private_key",
    "derive_from_mnemonic_and_path",

    # Signatures
    "split_signature",
    "join_signature",
    "recover_public_key",
    "verify_signature",
]
