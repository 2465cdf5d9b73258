# hypercrypto/__init__.py

from .encoding import (
    LEAF_TYPE,
    PARENT_TYPE,
    ROOT_TYPE,
    TreeNode,
    encode_uvarint,
    decode_uvarint,
)
from .core import (
    HashStream,
    hash_leaf,
    hash_parent,
    hash_roots,
    discovery_key,
    namespace,
)
from .keys import (
    KeyPair,
    key_pair_from_seed,
    generate_key_pair,
    validate_key_pair,
    sign,
    verify,
    random_bytes,
)

__all__ = [
    "LEAF_TYPE",
    "PARENT_TYPE",
    "ROOT_TYPE",
    "TreeNode",
    "encode_uvarint",
    "decode_uvarint",
    "HashStream",
    "hash_leaf",
    "hash_parent",
    "hash_roots",
    "discovery_key",
    "namespace",
    "KeyPair",
    "key_pair_from_seed",
    "generate_key_pair",
    "validate_key_pair",
    "sign",
    "verify",
    "random_bytes",
]
