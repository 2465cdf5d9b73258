"""Tests for the ed25519 keypair, signature and random helpers."""
import pytest

from hypercrypto.keys import (
    KeyPair,
    generate_key_pair,
    key_pair_from_seed,
    random_bytes,
    sign,
    validate_key_pair,
    verify,
)


def test_key_pair_from_seed():
    seed = random_bytes(32)
    kp = key_pair_from_seed(seed)

    assert len(kp.public_key) == 32
    assert len(kp.private_key) == 64
    assert kp.private_key[:32] == seed
    assert kp == key_pair_from_seed(seed)


def test_key_pair_from_seed_rejects_bad_length():
    with pytest.raises(ValueError):
        key_pair_from_seed(b"\x00" * 31)


def test_generate_key_pair():
    kp = generate_key_pair()
    assert len(kp.public_key) == 32
    assert len(kp.private_key) == 64
    assert kp != generate_key_pair()


def test_validate_key_pair():
    kp = generate_key_pair()
    assert validate_key_pair(kp)

    other = generate_key_pair()
    assert not validate_key_pair(KeyPair(public_key=other.public_key, private_key=kp.private_key))
    assert not validate_key_pair(KeyPair(public_key=kp.public_key, private_key=kp.private_key[:32]))


def test_sign_verify():
    kp = generate_key_pair()
    message = b"Hello, World!"
    signature = sign(message, kp.private_key)

    assert len(signature) == 64
    assert verify(message, signature, kp.public_key)
    assert not verify(b"Hello, World?", signature, kp.public_key)
    assert not verify(message, signature, generate_key_pair().public_key)


def test_verify_flipped_bits():
    kp = generate_key_pair()
    message = b"tree state"
    signature = sign(message, kp.private_key)

    for i in (0, 31, 32, 63):
        bad = bytearray(signature)
        bad[i] ^= 0x01
        assert not verify(message, bytes(bad), kp.public_key)


def test_verify_wrong_signature_length():
    kp = generate_key_pair()
    signature = sign(b"m", kp.private_key)
    assert not verify(b"m", signature[:63], kp.public_key)


def test_verify_rejects_bad_public_key():
    kp = generate_key_pair()
    signature = sign(b"m", kp.private_key)
    with pytest.raises(ValueError):
        verify(b"m", signature, kp.public_key[:16])


def test_sign_rejects_bad_private_key():
    with pytest.raises(ValueError):
        sign(b"m", b"\x00" * 32)


def test_random_bytes():
    assert random_bytes(0) == b""
    assert len(random_bytes(48)) == 48
    assert random_bytes(32) != random_bytes(32)
    with pytest.raises(ValueError):
        random_bytes(-1)
