import hashlib

import pytest

from utilkit.ecc import EccError, KeyPair, make_key, shared_secret, sign, verify
from utilkit.ecc_curves import (
    SECP128R1,
    SECP192R1,
    SECP256R1,
    SECP384R1,
    compress_point,
    decompress_point,
    point_multiply,
)

ALL_CURVES = [SECP128R1, SECP192R1, SECP256R1, SECP384R1]


def _hash(message: bytes, size: int) -> bytes:
    return hashlib.blake2b(message, digest_size=size).digest()


@pytest.mark.parametrize("curve", ALL_CURVES, ids=lambda c: c.name)
def test_make_key_shape_and_consistency(curve):
    pair = make_key(curve)
    assert isinstance(pair, KeyPair)
    assert len(pair.public_key) == curve.size + 1
    assert len(pair.private_key) == curve.size
    assert pair.public_key[0] in (2, 3)
    d = int.from_bytes(pair.private_key, "big")
    assert 1 <= d < curve.n
    expected = compress_point(curve, point_multiply(curve, curve.generator, d))
    assert pair.public_key == expected


def test_make_key_defaults_to_secp256r1():
    pair = make_key()
    assert len(pair.public_key) == 33
    assert len(pair.private_key) == 32


@pytest.mark.parametrize("curve", ALL_CURVES, ids=lambda c: c.name)
def test_shared_secret_agrees(curve):
    alice = make_key(curve)
    bob = make_key(curve)
    first = shared_secret(bob.public_key, alice.private_key, curve)
    second = shared_secret(alice.public_key, bob.private_key, curve)
    assert first == second
    assert len(first) == curve.size


def test_private_key_one_gives_generator():
    one = (1).to_bytes(32, "big")
    generator = compress_point(SECP256R1, SECP256R1.generator)
    assert generator[0] == 3
    assert generator[1:] == bytes.fromhex(
        "6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296"
    )
    assert shared_secret(generator, one) == generator[1:]


def test_shared_secret_zero_private_key_raises():
    pair = make_key()
    with pytest.raises(EccError):
        shared_secret(pair.public_key, bytes(32))


def test_shared_secret_wrong_private_length():
    pair = make_key()
    with pytest.raises(ValueError):
        shared_secret(pair.public_key, bytes(31))


@pytest.mark.parametrize("curve", ALL_CURVES, ids=lambda c: c.name)
def test_sign_verify_round_trip(curve):
    pair = make_key(curve)
    digest = _hash(b"hello world", curve.size)
    signature = sign(pair.private_key, digest, curve)
    assert len(signature) == 2 * curve.size
    assert verify(pair.public_key, digest, signature, curve) is True


def test_verify_rejects_other_hash():
    pair = make_key()
    signature = sign(pair.private_key, hashlib.sha256(b"one").digest())
    assert verify(pair.public_key, hashlib.sha256(b"two").digest(), signature) is False


def test_verify_rejects_other_key():
    signer = make_key()
    other = make_key()
    digest = hashlib.sha256(b"message").digest()
    signature = sign(signer.private_key, digest)
    assert verify(other.public_key, digest, signature) is False


def test_verify_rejects_tampered_signature():
    pair = make_key()
    digest = hashlib.sha256(b"message").digest()
    signature = bytearray(sign(pair.private_key, digest))
    signature[-1] ^= 0x01
    assert verify(pair.public_key, digest, bytes(signature)) is False


def test_verify_rejects_zero_components():
    pair = make_key()
    digest = hashlib.sha256(b"message").digest()
    signature = sign(pair.private_key, digest)
    assert verify(pair.public_key, digest, bytes(32) + signature[32:]) is False
    assert verify(pair.public_key, digest, signature[:32] + bytes(32)) is False


def test_verify_rejects_components_not_below_order():
    pair = make_key()
    digest = hashlib.sha256(b"message").digest()
    signature = sign(pair.private_key, digest)
    n_bytes = SECP256R1.n.to_bytes(32, "big")
    assert verify(pair.public_key, digest, n_bytes + signature[32:]) is False
    assert verify(pair.public_key, digest, signature[:32] + n_bytes) is False


def test_signatures_are_randomised_but_both_valid():
    pair = make_key()
    digest = hashlib.sha256(b"message").digest()
    first = sign(pair.private_key, digest)
    second = sign(pair.private_key, digest)
    assert first != second
    assert verify(pair.public_key, digest, first)
    assert verify(pair.public_key, digest, second)


def test_sign_wrong_hash_length():
    pair = make_key()
    with pytest.raises(ValueError):
        sign(pair.private_key, b"short")


def test_verify_wrong_signature_length():
    pair = make_key()
    with pytest.raises(ValueError):
        verify(pair.public_key, hashlib.sha256(b"x").digest(), bytes(10))


def test_public_key_decompresses_onto_curve():
    pair = make_key()
    point = decompress_point(SECP256R1, pair.public_key)
    p = SECP256R1.p
    assert (point.y * point.y - (point.x ** 3 - 3 * point.x + SECP256R1.b)) % p == 0
    assert compress_point(SECP256R1, point) == pair.public_key