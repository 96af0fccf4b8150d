"""BIP39 mnemonic to seed conversion."""

import hashlib
import logging
import unicodedata
from functools import lru_cache

from mnemonic import Mnemonic

from ..constants import BIP39_ITERATIONS, BIP39_LANGUAGE, BIP39_SALT_PREFIX, SEED_LENGTH
from ..exceptions import InvalidMnemonicError
from ..types.common import Seed

__all__ = ["normalize_mnemonic", "check_mnemonic", "seed_from_mnemonic"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _wordlist(language: str = BIP39_LANGUAGE) -> Mnemonic:
    # Loading the word list reads a file, so share one instance per language
    return Mnemonic(language)


def normalize_mnemonic(mnemonic: str) -> str:
    """Apply NFKD normalization; whitespace is left as given."""
    return unicodedata.normalize("NFKD", mnemonic)


def check_mnemonic(mnemonic: str, language: str = BIP39_LANGUAGE) -> str:
    """
    Validate mnemonic words and checksum.

    Words may be separated by any run of whitespace.

    Args:
        mnemonic: Mnemonic phrase
        language: BIP39 word list language

    Returns:
        NFKD-normalized mnemonic, spacing untouched

    Raises:
        InvalidMnemonicError: If a word is unknown, the word count is wrong
            or the checksum does not match
    """
    if not isinstance(mnemonic, str):
        raise InvalidMnemonicError("Mnemonic must be a string")

    normalized = normalize_mnemonic(mnemonic)
    words = normalized.split()
    if len(words) not in (12, 15, 18, 21, 24):
        raise InvalidMnemonicError(f"Mnemonic must have 12, 15, 18, 21 or 24 words, got {len(words)}")

    wordlist = _wordlist(language)
    unknown = sum(1 for word in words if word not in wordlist.wordlist)
    if unknown:
        # Never echo the words themselves
        raise InvalidMnemonicError(f"Mnemonic contains {unknown} word(s) outside the {language} word list")

    if not wordlist.check(" ".join(words)):
        raise InvalidMnemonicError("Mnemonic checksum mismatch")

    return normalized


def seed_from_mnemonic(mnemonic: str, passphrase: str = "") -> Seed:
    """
    Convert mnemonic to a 64-byte seed using PBKDF2-HMAC-SHA512.

    The phrase is only NFKD-normalized before hashing, so unusual spacing
    yields a different seed than single spaces would.

    Args:
        mnemonic: BIP39 mnemonic phrase
        passphrase: Optional BIP39 passphrase

    Returns:
        64-byte seed

    Raises:
        InvalidMnemonicError: If mnemonic fails validation
    """
    normalized = check_mnemonic(mnemonic)
    mnemonic_bytes = normalized.encode("utf-8")
    salt = unicodedata.normalize("NFKD", BIP39_SALT_PREFIX + passphrase).encode("utf-8")

    seed = hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic_bytes,
        salt,
        BIP39_ITERATIONS,
        dklen=SEED_LENGTH
    )
    logger.debug(f"Derived {len(seed)}-byte seed from {len(normalized.split())}-word mnemonic")
    return Seed(seed)
