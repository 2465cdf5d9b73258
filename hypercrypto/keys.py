# hypercrypto/keys.py

from dataclasses import dataclass

import nacl.utils
from nacl import signing
from nacl.exceptions import BadSignatureError

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 64
SIGNATURE_SIZE = 64


@dataclass(frozen=True)
class KeyPair:
    """
    Ed25519 keypair in the libsodium layout:
    private_key is seed || public_key (64 bytes), public_key is 32 bytes.
    """

    public_key: bytes
    private_key: bytes


def _signing_key(private_key: bytes) -> signing.SigningKey:
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise ValueError(f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}")
    return signing.SigningKey(bytes(private_key[:SEED_SIZE]))


def key_pair_from_seed(seed: bytes) -> KeyPair:
    if len(seed) != SEED_SIZE:
        raise ValueError(f"seed must be {SEED_SIZE} bytes, got {len(seed)}")
    sk = signing.SigningKey(bytes(seed))
    public_key = sk.verify_key.encode()
    return KeyPair(public_key=public_key, private_key=bytes(seed) + public_key)


def generate_key_pair() -> KeyPair:
    return key_pair_from_seed(random_bytes(SEED_SIZE))


def validate_key_pair(key_pair: KeyPair) -> bool:
    """
    True if the private key derives the public key, and carries it in its
    second half as libsodium expects.
    """
    if len(key_pair.public_key) != PUBLIC_KEY_SIZE or len(key_pair.private_key) != PRIVATE_KEY_SIZE:
        return False
    derived = _signing_key(key_pair.private_key).verify_key.encode()
    return derived == key_pair.public_key and key_pair.private_key[SEED_SIZE:] == key_pair.public_key


def sign(message: bytes, private_key: bytes) -> bytes:
    """Detached 64-byte Ed25519 signature over the raw message bytes."""
    return _signing_key(private_key).sign(message).signature


def verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Check a detached signature. A bad signature is a False result, never an
    exception; a public key of the wrong size is a caller error.
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(f"public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}")
    if len(signature) != SIGNATURE_SIZE:
        return False

    try:
        signing.VerifyKey(bytes(public_key)).verify(message, bytes(signature))
    except BadSignatureError:
        return False
    return True


def random_bytes(n: int) -> bytes:
    if n < 0:
        raise ValueError("random_bytes length must be non-negative")
    return nacl.utils.random(n)
