import pytest

from hdsigner.constants import SECP256K1_ORDER
from hdsigner.crypto.keys import PrivateKey
from hdsigner.crypto.signature import join_signature, split_signature, verify_signature
from hdsigner.utils import validation as v
from hdsigner.utils.encoding import hex_to_bytes, ser32


def test_hex_to_bytes():
    assert hex_to_bytes("0x0001") == b"\x00\x01"
    assert hex_to_bytes("DEADbeef") == b"\xde\xad\xbe\xef"
    with pytest.raises(v.ValidationError):
        hex_to_bytes("abc")
    with pytest.raises(v.ValidationError):
        hex_to_bytes("zzzz")


def test_ser32_is_big_endian():
    assert ser32(1) == b"\x00\x00\x00\x01"
    assert ser32(0x8000002C) == b"\x80\x00\x00\x2c"


def test_private_key_validation():
    assert v.validate_private_key("01" * 32) == b"\x01" * 32
    assert v.validate_private_key("0x" + "01" * 32) == b"\x01" * 32
    with pytest.raises(v.ValidationError):
        v.validate_private_key(b"\x00" * 32)
    with pytest.raises(v.ValidationError):
        v.validate_private_key(SECP256K1_ORDER.to_bytes(32, "big"))
    with pytest.raises(v.ValidationError):
        v.validate_private_key(b"\x01" * 31)
    with pytest.raises(v.ValidationError):
        v.validate_private_key("xyz")


def test_public_key_validation():
    key = PrivateKey.from_int(1).public_key()
    assert key.hex() == "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    assert v.validate_public_key(key.hex()) == key.point
    with pytest.raises(v.ValidationError):
        v.validate_public_key(b"\x04" + key.point[1:])
    with pytest.raises(v.ValidationError):
        v.validate_public_key(key.point[:-1])


def test_digest_validation():
    assert v.validate_digest(bytearray(32)) == b"\x00" * 32
    assert v.validate_digest(memoryview(bytes(range(32)))) == bytes(range(32))
    with pytest.raises(v.InvalidDigestLengthError):
        v.validate_digest(b"\x00" * 20)
    with pytest.raises(v.ValidationError):
        v.validate_digest(12345)


def test_digest_rejects_hex_string():
    with pytest.raises(v.ValidationError) as exc_info:
        v.validate_digest("00" * 32)
    assert not isinstance(exc_info.value, v.InvalidDigestLengthError)


def test_signature_validation():
    signature = join_signature(1, 2, 1)
    assert split_signature(signature) == (1, 2, 1)
    assert v.is_valid_signature(signature)
    assert not v.is_valid_signature(signature[:64])
    assert not v.is_valid_signature(join_signature(1, 2, 0)[:64] + b"\x04")
    assert not v.is_valid_signature(b"\x00" * 32 + b"\x01" * 32 + b"\x00")
    with pytest.raises(v.ValidationError):
        join_signature(2 ** 256, 1, 0)


def test_verify_signature_mismatch():
    key = PrivateKey.from_int(7)
    digest = bytes(range(32))
    signature = key.sign_recoverable(digest)
    assert verify_signature(key.public_key(), digest, signature)
    assert not verify_signature(PrivateKey.from_int(8).public_key(), digest, signature)
    assert not verify_signature(key.public_key(), bytes(32), signature)
    assert not verify_signature(key.public_key(), digest, signature[:10])
