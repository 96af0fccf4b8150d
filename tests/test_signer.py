from concurrent.futures import ThreadPoolExecutor

import coincurve
import pytest

from hdsigner.crypto.hd import derive_from_mnemonic_and_path
from hdsigner.crypto.keys import PublicKey
from hdsigner.crypto.signature import recover_public_key, split_signature, verify_signature
from hdsigner.exceptions import (
    InvalidDigestLengthError,
    InvalidMnemonicError,
    ParseError,
    SigningError,
    ValidationError,
)
from hdsigner.signer import BaseSigner, Signer

MNEMONIC = "math razor capable expose worth grape metal sunset metal sudden usage scheme"
PATH = "m/44'/60'/0'/0/0"
PUBLIC_KEY_HEX = "039091a0bc2537530b4eb35672624c147db7c70c986929ede18c8efc2299153399"
SIGNATURE_HEX = (
    "26ea079b2a54dcec61c9988d4d92eb7ec8922114304d63a3ea2181e39d463484"
    "079db88a00f56630fda76a2fd5d83d57dc551784521d8160e6695483f0997397"
    "00"
)
DIGEST = bytes(range(32))


@pytest.fixture(scope="module")
def signer():
    return Signer.from_mnemonic(MNEMONIC, PATH)


def test_signer_implements_interface():
    assert issubclass(Signer, BaseSigner)
    with pytest.raises(TypeError):
        BaseSigner()


def test_incomplete_signer_cannot_be_instantiated():
    class PublicKeyOnly(BaseSigner):
        def get_public_key(self, ctx=None):
            return b""

    with pytest.raises(TypeError):
        PublicKeyOnly()


def test_get_public_key(signer):
    public_key = signer.get_public_key()
    assert public_key.hex() == PUBLIC_KEY_HEX
    assert len(public_key) == 33
    assert public_key[0] in (0x02, 0x03)


def test_sign_known_vector(signer):
    signature = signer.sign(DIGEST)
    assert signature.hex() == SIGNATURE_HEX
    assert len(signature) == 65


def test_context_token_is_ignored(signer):
    ctx = object()
    assert signer.get_public_key(ctx) == signer.get_public_key()
    assert signer.sign(DIGEST, ctx=ctx) == signer.sign(DIGEST)


def test_sign_is_deterministic():
    first = Signer.from_mnemonic(MNEMONIC, PATH)
    second = Signer.from_mnemonic(MNEMONIC, PATH)
    assert first.get_public_key() == second.get_public_key()
    assert first.sign(DIGEST) == second.sign(DIGEST)


@pytest.mark.parametrize("digest", [b"", b"\x00" * 31, b"\x00" * 33, b"\x00" * 64])
def test_sign_rejects_digest_length(signer, digest):
    with pytest.raises(InvalidDigestLengthError) as exc_info:
        signer.sign(digest)
    assert exc_info.value.length == len(digest)
    assert isinstance(exc_info.value, ValidationError)


def test_sign_rejects_hex_string(signer):
    with pytest.raises(ValidationError):
        signer.sign(DIGEST.hex())
    with pytest.raises(ValidationError):
        signer.sign("ab" * 32)


def test_sign_wraps_curve_failure(signer, monkeypatch):
    def fail(self, message, hasher=None):
        raise RuntimeError("secp256k1 context unavailable")

    monkeypatch.setattr(coincurve.PrivateKey, "sign_recoverable", fail)
    with pytest.raises(SigningError) as exc_info:
        signer.sign(DIGEST)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_recover_wraps_curve_failure(signer, monkeypatch):
    signature = signer.sign(DIGEST)

    def fail(*args, **kwargs):
        raise ValueError("recovery failed")

    monkeypatch.setattr(coincurve.PublicKey, "from_signature_and_message", fail)
    with pytest.raises(SigningError):
        recover_public_key(DIGEST, signature)
    assert not verify_signature(signer.get_public_key(), DIGEST, signature)


def test_signature_recovers_public_key(signer):
    signature = signer.sign(DIGEST)
    assert recover_public_key(DIGEST, signature) == signer.get_public_key()
    assert verify_signature(signer.get_public_key(), DIGEST, signature)


def test_signature_is_low_s(signer):
    _, s, v = split_signature(signer.sign(DIGEST))
    order = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    assert s <= order // 2
    assert v in (0, 1)


def test_concurrent_signing(signer):
    with ThreadPoolExecutor(max_workers=8) as pool:
        signatures = list(pool.map(lambda _: signer.sign(DIGEST), range(32)))
        public_keys = list(pool.map(lambda _: signer.get_public_key(), range(32)))
    assert set(signatures) == {bytes.fromhex(SIGNATURE_HEX)}
    assert set(public_keys) == {bytes.fromhex(PUBLIC_KEY_HEX)}


def test_signer_from_private_key():
    key = derive_from_mnemonic_and_path(MNEMONIC, PATH)
    signer = Signer(key)
    assert signer.get_public_key().hex() == PUBLIC_KEY_HEX
    assert signer.path is None
    assert key.public_key() == PublicKey(PUBLIC_KEY_HEX)


def test_signer_keeps_no_secrets(signer):
    assert signer.path == PATH
    text = repr(signer)
    assert MNEMONIC.split()[0] not in text
    assert signer._key.secret.hex() not in text
    assert signer._key.secret.hex() not in repr(signer._key)
    assert not any(MNEMONIC in str(value) for value in vars(signer).values())


@pytest.mark.parametrize("mnemonic, path, error", [
    (MNEMONIC, "m/44'/60'/0'/0/0/7parts", ParseError),
    (MNEMONIC, "m/44'/60'/0'/2/0", ValidationError),
    ("math razor", PATH, InvalidMnemonicError),
])
def test_from_mnemonic_errors(mnemonic, path, error):
    with pytest.raises(error):
        Signer.from_mnemonic(mnemonic, path)
