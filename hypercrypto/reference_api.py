"""
Stable reference API for hypercrypto test vectors.

This wraps the byte-level core into a hex-in, hex-out surface that the vector
generator and the vector tests can depend on.
"""

from typing import Any, Dict, List

from hypercrypto.core import (
    discovery_key as _discovery_key_impl,
    hash_leaf as _hash_leaf_impl,
    hash_parent as _hash_parent_impl,
    hash_roots as _hash_roots_impl,
    namespace as _namespace_impl,
)
from hypercrypto.encoding import TreeNode


def node_from_dict(node: Dict[str, Any]) -> TreeNode:
    """
    Build a TreeNode from a vector entry: {"index": int, "hash_hex": str, "size": int}.
    """
    try:
        return TreeNode(
            index=node["index"],
            hash=bytes.fromhex(node["hash_hex"]),
            size=node["size"],
        )
    except KeyError as e:
        raise ValueError(f"tree node is missing field {e.args[0]!r}") from e


def leaf_hex(data_hex: str) -> str:
    return _hash_leaf_impl(bytes.fromhex(data_hex)).hex()


def parent_hex(a: Dict[str, Any], b: Dict[str, Any]) -> str:
    return _hash_parent_impl(node_from_dict(a), node_from_dict(b)).hex()


def roots_hex(roots: List[Dict[str, Any]]) -> str:
    return _hash_roots_impl([node_from_dict(r) for r in roots]).hex()


def discovery_key_hex(public_key_hex: str) -> str:
    return _discovery_key_impl(bytes.fromhex(public_key_hex)).hex()


def namespace_hex(name: str, count: int) -> List[str]:
    """
    Namespace ids for a UTF-8 name, as hex strings in index order.
    """
    return [ns.hex() for ns in _namespace_impl(name.encode("utf-8"), count)]


def two_leaf_root_hex(left: str, right: str) -> str:
    """
    Root digest of a two-leaf tree built from UTF-8 leaf data:
    leaves at index 0 and 1, their parent reported as a single root at index 1.
    """
    left_data = left.encode("utf-8")
    right_data = right.encode("utf-8")

    l0 = TreeNode(index=0, hash=_hash_leaf_impl(left_data), size=len(left_data))
    l1 = TreeNode(index=1, hash=_hash_leaf_impl(right_data), size=len(right_data))
    parent = TreeNode(index=1, hash=_hash_parent_impl(l0, l1), size=l0.size + l1.size)
    return _hash_roots_impl([parent]).hex()
