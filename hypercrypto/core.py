# hypercrypto/core.py

import hashlib
from typing import Iterable, List

from .encoding import (
    HASH_SIZE,
    TreeNode,
    leaf_segments,
    parent_segments,
    roots_segments,
)

DISCOVERY_KEY_CONTEXT = b"hypercore"
PUBLIC_KEY_SIZE = 32

# Namespace ids use a single index byte
MAX_NAMESPACE_COUNT = 256


# ---------- BLAKE2b-256 ----------

class HashStream:
    """
    Single-use BLAKE2b-256 accumulator.

    Segments are fed with update(); finalize() returns the 32-byte digest and
    consumes the stream, so a stream is never shared between two hashes.
    """

    def __init__(self, *segments: bytes) -> None:
        self._state = hashlib.blake2b(digest_size=HASH_SIZE)
        for segment in segments:
            self.update(segment)

    def update(self, segment: bytes) -> "HashStream":
        if self._state is None:
            raise ValueError("hash stream already finalized")
        self._state.update(segment)
        return self

    def finalize(self) -> bytes:
        if self._state is None:
            raise ValueError("hash stream already finalized")
        digest = self._state.digest()
        self._state = None
        return digest


def blake2b_256(data: bytes) -> bytes:
    return HashStream(data).finalize()


# ---------- Tree hashing ----------

def hash_leaf(data: bytes) -> bytes:
    """
    Digest of a leaf: BLAKE2b-256([LEAF][varint(len(data))][data]).
    """
    return HashStream(*leaf_segments(data)).finalize()


def hash_parent(a: TreeNode, b: TreeNode) -> bytes:
    """
    Digest of the parent of two child nodes.

    The children are ordered by index before hashing, so the result does not
    depend on argument order. Two children sharing an index is undefined.
    """
    return HashStream(*parent_segments(a, b)).finalize()


def hash_roots(roots: Iterable[TreeNode]) -> bytes:
    """
    Digest of the whole tree from its current roots, in left-to-right order.
    An empty sequence hashes the bare ROOT tag.
    """
    return HashStream(*roots_segments(roots)).finalize()


# ---------- Identifiers ----------

def discovery_key(public_key: bytes) -> bytes:
    """
    Non-secret identifier for a feed: BLAKE2b-256(b"hypercore" || public_key).
    Peers that know the public key can meet on it without sending the key.
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(f"public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}")
    return HashStream(DISCOVERY_KEY_CONTEXT, public_key).finalize()


def namespace(name: bytes, count: int) -> List[bytes]:
    """
    Expand one name into `count` unrelated-looking 32-byte ids.

    seed   = BLAKE2b-256(name)
    ids[i] = BLAKE2b-256(seed || byte(i))

    The index is one raw byte, so count is limited to 1..256. Going past that
    would need a wider index and a new format.
    """
    if not isinstance(count, int) or isinstance(count, bool) or count < 1 or count > MAX_NAMESPACE_COUNT:
        raise ValueError(f"namespace count must be between 1 and {MAX_NAMESPACE_COUNT}, got {count!r}")

    seed = blake2b_256(name)
    return [HashStream(seed, bytes([i])).finalize() for i in range(count)]
