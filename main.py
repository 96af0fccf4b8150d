"""
HD Signer Usage Examples

This file demonstrates configuring a signer from a mnemonic and path,
exporting its public key and signing digests.
"""

import hashlib
import logging

from hdsigner import PathLevel, SignerConfig, signer_factory
from hdsigner.crypto import recover_public_key, split_signature
from hdsigner.exceptions import HDSignerError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Well-known test mnemonic; never use it for real funds
MNEMONIC = "math razor capable expose worth grape metal sunset metal sudden usage scheme"
PATH = "m/44'/60'/0'/0/0"


def path_example():
    """Example 1: Parsing and validating a path."""
    print("\n=== Path Example ===")

    path = PathLevel.parse(PATH)
    path.validate()
    print(f"Purpose: {path.purpose}")
    print(f"Coin type: {path.coin_type}")
    print(f"Account: {path.account}")
    print(f"Change: {path.change}")
    print(f"Address index: {path.address_index}")
    print(f"BIP32 indices: {[hex(i) for i in path.indices()]}")

    # Parses, but purpose 49 is not BIP44
    try:
        PathLevel.parse("m/49'/0'/0'/0/0").validate()
    except HDSignerError as e:
        print(f"Rejected: {e}")


def config_example():
    """Example 2: Host-style configuration."""
    print("\n=== Config Example ===")

    config = SignerConfig.from_dict({"mnemonic": MNEMONIC, "path": PATH})
    print(f"Config: {config}")

    # Fail early, before the first signing request
    config.validate()
    signer = config.build()
    print(f"Public key: {signer.get_public_key().hex()}")


def signing_example():
    """Example 3: Signing a digest and recovering the key."""
    print("\n=== Signing Example ===")

    signer = signer_factory(MNEMONIC, PATH)

    # The signer never hashes; the caller provides the 32-byte digest
    digest = hashlib.sha256(b"relay packet").digest()
    signature = signer.sign(digest)
    r, s, v = split_signature(signature)
    print(f"Signature: {signature.hex()}")
    print(f"r={r:#x}")
    print(f"s={s:#x}")
    print(f"v={v}")

    recovered = recover_public_key(digest, signature)
    print(f"Recovered public key matches: {recovered == signer.get_public_key()}")

    try:
        signer.sign(b"too short")
    except HDSignerError as e:
        print(f"Rejected: {e}")


def main():
    """Run all examples."""
    examples = [
        path_example,
        config_example,
        signing_example,
    ]

    for example in examples:
        try:
            example()
        except HDSignerError as e:
            print(f"Error in {example.__name__}: {e}")


if __name__ == "__main__":
    main()
