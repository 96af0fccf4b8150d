"""Constants for HD key derivation and signing."""

__all__ = [
    "SECP256K1_ORDER",
    "HARDENED_OFFSET",
    "BIP32_SEED_KEY",
    "BIP39_SALT_PREFIX",
    "BIP39_ITERATIONS",
    "BIP39_LANGUAGE",
    "BIP44_PURPOSE",
    "SEED_LENGTH",
    "PRIVATE_KEY_LENGTH",
    "CHAIN_CODE_LENGTH",
    "COMPRESSED_PUBKEY_LENGTH",
    "DIGEST_LENGTH",
    "SIGNATURE_LENGTH",
]

# secp256k1 group order
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# BIP32
HARDENED_OFFSET = 0x80000000
BIP32_SEED_KEY = b"Bitcoin seed"

# BIP39
BIP39_SALT_PREFIX = "mnemonic"
BIP39_ITERATIONS = 2048
BIP39_LANGUAGE = "english"

# BIP44
BIP44_PURPOSE = 44

# Sizes in bytes
SEED_LENGTH = 64
PRIVATE_KEY_LENGTH = 32
CHAIN_CODE_LENGTH = 32
COMPRESSED_PUBKEY_LENGTH = 33
DIGEST_LENGTH = 32
SIGNATURE_LENGTH = 65
