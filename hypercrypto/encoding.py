# hypercrypto/encoding.py

from dataclasses import dataclass
from typing import Iterable, List, Tuple

# ---------- Type tags ----------

LEAF_TYPE = 0
PARENT_TYPE = 1
ROOT_TYPE = 2

HASH_SIZE = 32
MAX_UINT64 = (1 << 64) - 1

# Longest minimal varint for a 64-bit value
MAX_VARINT_LEN64 = 10


# ---------- Varint ----------

def encode_uvarint(x: int) -> bytes:
    """
    Unsigned LEB128 varint, minimal length.

    This is part of the hash preimage, so it MUST stay byte-compatible with
    other implementations of the format (same as Go's binary.PutUvarint).
    """
    if not isinstance(x, int) or isinstance(x, bool) or x < 0 or x > MAX_UINT64:
        raise ValueError(f"varint value must be an unsigned 64-bit integer, got {x!r}")

    out = bytearray()
    while x >= 0x80:
        out.append((x & 0x7F) | 0x80)
        x >>= 7
    out.append(x)
    return bytes(out)


def decode_uvarint(buf: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Read one varint from buf at offset.

    Returns (value, offset just past the varint). Truncated input, values
    that overflow 64 bits and over-encoded (non-minimal) input raise ValueError.
    """
    x = 0
    shift = 0
    for i in range(MAX_VARINT_LEN64):
        pos = offset + i
        if pos >= len(buf):
            raise ValueError("truncated varint")
        b = buf[pos]
        if i == MAX_VARINT_LEN64 - 1 and b > 1:
            raise ValueError("varint overflows a 64-bit integer")
        x |= (b & 0x7F) << shift
        if b < 0x80:
            if b == 0 and i > 0:
                raise ValueError("varint is not minimally encoded")
            return x, pos + 1
        shift += 7
    raise ValueError("varint overflows a 64-bit integer")


# ---------- Tree nodes ----------

@dataclass(frozen=True)
class TreeNode:
    """
    One node of the tree as seen by the hasher: its flat-tree index, its
    32-byte digest and the byte size of the subtree it roots.
    """

    index: int
    hash: bytes
    size: int

    def __post_init__(self) -> None:
        for field in ("index", "size"):
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > MAX_UINT64:
                raise ValueError(f"tree node {field} must be an unsigned 64-bit integer, got {value!r}")
        if not isinstance(self.hash, (bytes, bytearray, memoryview)):
            raise ValueError("tree node hash must be bytes")
        if len(self.hash) != HASH_SIZE:
            raise ValueError(f"tree node hash must be {HASH_SIZE} bytes, got {len(self.hash)}")
        # Freeze the digest so cached nodes can't be mutated through a shared buffer
        object.__setattr__(self, "hash", bytes(self.hash))


def order_children(a: TreeNode, b: TreeNode) -> Tuple[TreeNode, TreeNode]:
    """
    Return (left, right) by ascending index.

    Equal indices are a caller error and keep the given order; nothing is
    validated here.
    """
    if b.index < a.index:
        return b, a
    return a, b


# ---------- Preimages ----------

def leaf_segments(data: bytes) -> List[bytes]:
    return [bytes([LEAF_TYPE]), encode_uvarint(len(data)), bytes(data)]


def parent_segments(a: TreeNode, b: TreeNode) -> List[bytes]:
    left, right = order_children(a, b)
    return [
        bytes([PARENT_TYPE]),
        encode_uvarint(a.size + b.size),
        left.hash,
        right.hash,
    ]


def roots_segments(roots: Iterable[TreeNode]) -> List[bytes]:
    # Caller order is significant, roots are never re-sorted
    segments = [bytes([ROOT_TYPE])]
    for root in roots:
        segments.append(root.hash)
        segments.append(encode_uvarint(root.index))
        segments.append(encode_uvarint(root.size))
    return segments


def encode_leaf(data: bytes) -> bytes:
    return b"".join(leaf_segments(data))


def encode_parent(a: TreeNode, b: TreeNode) -> bytes:
    return b"".join(parent_segments(a, b))


def encode_roots(roots: Iterable[TreeNode]) -> bytes:
    return b"".join(roots_segments(roots))
