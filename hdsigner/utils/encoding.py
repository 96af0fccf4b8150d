"""Encoding and hashing helpers for HD key derivation."""

import hashlib
import hmac
from typing import Tuple, Union

from ..exceptions import ValidationError
from ..types.common import HexStr

__all__ = [
    "hex_to_bytes",
    "ser32",
    "ser256",
    "parse256",
    "hmac_sha512",
    "split_halves",
]


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise ValidationError(f"Invalid hex string of length {len(hex_str)}") from e


def ser32(i: int) -> bytes:
    """Serialize a 32-bit unsigned integer, most significant byte first."""
    return i.to_bytes(4, "big")


def ser256(p: int) -> bytes:
    """Serialize a 256-bit integer, most significant byte first."""
    return p.to_bytes(32, "big")


def parse256(p: bytes) -> int:
    """Interpret a 32-byte sequence as a big-endian integer."""
    return int.from_bytes(p, "big")


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


def split_halves(data: bytes) -> Tuple[bytes, bytes]:
    """Split a 64-byte HMAC-SHA512 output into its left and right 32 bytes."""
    return data[:32], data[32:]
