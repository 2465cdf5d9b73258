#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Any, Dict
import sys

# Add repo root so Python can import hypercrypto.*
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Project imports: use the stable reference API
from hypercrypto.reference_api import (
    leaf_hex,
    parent_hex,
    roots_hex,
    discovery_key_hex,
    namespace_hex,
    two_leaf_root_hex,
)

VECTORS_PATH = ROOT / "tests" / "vectors" / "hypercore_crypto.v1.json"


def load_vectors() -> Dict[str, Any]:
    with VECTORS_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_vectors(data: Dict[str, Any]) -> None:
    # Pretty-print and keep key order stable
    with VECTORS_PATH.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=False)
        f.write("\n")


def populate_nodes(data: Dict[str, Any]) -> None:
    for leaf in data.get("leaves", []):
        leaf["digest_hex"] = leaf_hex(leaf["data_hex"])

    for parent in data.get("parents", []):
        parent["digest_hex"] = parent_hex(parent["a"], parent["b"])

    for entry in data.get("roots", []):
        entry["digest_hex"] = roots_hex(entry["roots"])


def populate_identifiers(data: Dict[str, Any]) -> None:
    for dk in data.get("discovery_keys", []):
        dk["digest_hex"] = discovery_key_hex(dk["public_key_hex"])

    for ns in data.get("namespaces", []):
        ns["ids_hex"] = namespace_hex(ns["name"], ns["count"])


def populate_trees(data: Dict[str, Any]) -> None:
    for tree in data.get("trees", []):
        leaves = tree["leaves"]
        if len(leaves) != 2:
            raise ValueError(f"tree vector '{tree['id']}' must have exactly two leaves")
        tree["root_hex"] = two_leaf_root_hex(leaves[0], leaves[1])


def main() -> None:
    if not VECTORS_PATH.exists():
        raise SystemExit(f"Vector file not found: {VECTORS_PATH}")

    data = load_vectors()

    populate_nodes(data)
    populate_identifiers(data)
    populate_trees(data)

    save_vectors(data)
    print(f"Updated vectors written to {VECTORS_PATH}")


if __name__ == "__main__":
    main()
