"""Hierarchical Deterministic key derivation (BIP32 / BIP44)."""

import logging
from typing import Iterable

from ..constants import (
    BIP32_SEED_KEY,
    CHAIN_CODE_LENGTH,
    HARDENED_OFFSET,
    SECP256K1_ORDER,
)
from ..crypto.bip39 import seed_from_mnemonic
from ..crypto.keys import PrivateKey
from ..crypto.path import PathLevel
from ..exceptions import DerivationError
from ..types.common import ChainCode, DerivationPath, Mnemonic
from ..utils.encoding import hmac_sha512, parse256, ser32, ser256, split_halves

__all__ = ["HDNode", "derive_private_key", "derive_from_mnemonic_and_path"]

logger = logging.getLogger(__name__)


class HDNode:
    """
    Extended private key (BIP32).

    Pairs a private scalar with its chain code. Only used while walking a
    path; callers get the leaf PrivateKey, never the node.
    """

    __slots__ = ("private_key", "chain_code", "depth", "index")

    def __init__(
        self,
        private_key: PrivateKey,
        chain_code: ChainCode,
        depth: int = 0,
        index: int = 0
    ):
        if len(chain_code) != CHAIN_CODE_LENGTH:
            raise ValueError("Chain code must be 32 bytes")
        self.private_key = private_key
        self.chain_code = chain_code
        self.depth = depth
        self.index = index

    @classmethod
    def from_seed(cls, seed: bytes) -> "HDNode":
        """
        Create master node from seed.

        Raises:
            ValueError: If seed length is outside 16..64 bytes
            DerivationError: If the master scalar is zero or >= n
        """
        if len(seed) < 16 or len(seed) > 64:
            raise ValueError("Seed must be between 16 and 64 bytes")

        key_bytes, chain_code = split_halves(hmac_sha512(BIP32_SEED_KEY, seed))

        key_int = parse256(key_bytes)
        if key_int == 0 or key_int >= SECP256K1_ORDER:
            raise DerivationError("Invalid master key")

        return cls(
            private_key=PrivateKey(key_bytes),
            chain_code=ChainCode(chain_code)
        )

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED_OFFSET

    def derive(self, index: int) -> "HDNode":
        """
        Derive child node (CKDpriv).

        Args:
            index: Child index; values >= 2^31 select hardened derivation

        Raises:
            ValueError: If index does not fit in 32 bits
            DerivationError: If the tweak is >= n or the child scalar is zero
        """
        if not 0 <= index <= 0xFFFFFFFF:
            raise ValueError(f"Child index out of range: {index}")

        if index >= HARDENED_OFFSET:
            data = b"\x00" + ser256(self.private_key.d) + ser32(index)
        else:
            data = self.private_key.public_key().point + ser32(index)

        tweak, child_chain_code = split_halves(hmac_sha512(self.chain_code, data))

        tweak_int = parse256(tweak)
        if tweak_int == 0 or tweak_int >= SECP256K1_ORDER:
            raise DerivationError(
                f"Invalid tweak at depth {self.depth + 1}, index {index}",
                index=index
            )

        child_int = (tweak_int + self.private_key.d) % SECP256K1_ORDER
        if child_int == 0:
            # BIP32 would move on to index + 1; the caller decides that
            raise DerivationError(
                f"Zero child key at depth {self.depth + 1}, index {index}",
                index=index
            )

        logger.debug(f"Derived child at depth {self.depth + 1}, index {index:#010x}")

        return HDNode(
            private_key=PrivateKey.from_int(child_int),
            chain_code=ChainCode(child_chain_code),
            depth=self.depth + 1,
            index=index
        )

    def derive_indices(self, indices: Iterable[int]) -> "HDNode":
        """Derive through a sequence of raw child indices."""
        node = self
        for index in indices:
            node = node.derive(index)
        return node

    def derive_path(self, path: PathLevel) -> "HDNode":
        """Derive along a BIP44 path like m/44'/60'/0'/0/0."""
        return self.derive_indices(path.indices())

    def __repr__(self) -> str:
        return f"HDNode(depth={self.depth}, index={self.index:#x})"


def derive_private_key(seed: bytes, path: PathLevel) -> PrivateKey:
    """
    Derive the leaf private key for a path from a BIP39 seed.

    Args:
        seed: Seed bytes (64 bytes for BIP39)
        path: Parsed path

    Returns:
        Leaf PrivateKey

    Raises:
        DerivationError: If any step yields an invalid scalar
    """
    master = HDNode.from_seed(seed)
    return master.derive_path(path).private_key


def derive_from_mnemonic_and_path(mnemonic: Mnemonic, path: DerivationPath) -> PrivateKey:
    """
    Derive a private key from a mnemonic and path text.

    Parses, validates, seeds and derives in that order; the first failure
    propagates unchanged.

    Raises:
        ParseError: If path text is malformed
        ValidationError: If path violates BIP44 purpose/change rules
        InvalidMnemonicError: If mnemonic fails validation
        DerivationError: If derivation yields an invalid scalar
    """
    path_level = PathLevel.parse(path)
    path_level.validate()
    seed = seed_from_mnemonic(mnemonic)
    return derive_private_key(seed, path_level)
