#!/usr/bin/env python3
import argparse
import binascii
import json
import logging
import sys

from .core import discovery_key, hash_leaf, namespace
from .keys import generate_key_pair, key_pair_from_seed, sign, verify

logger = logging.getLogger(__name__)


def _unhex(value: str, what: str) -> bytes:
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"{what} is not valid hex") from e


def cmd_keygen(args):
    """
    hypercrypto keygen [--seed <hex>]
    """
    if args.seed:
        kp = key_pair_from_seed(_unhex(args.seed, "seed"))
        logger.debug("derived keypair from seed")
    else:
        kp = generate_key_pair()
        logger.debug("generated random keypair")

    out = {
        "public_key": kp.public_key.hex(),
        "private_key": kp.private_key.hex(),
        "discovery_key": discovery_key(kp.public_key).hex(),
    }
    print(json.dumps(out, indent=2))


def cmd_discovery_key(args):
    """
    hypercrypto discovery-key <public key hex>
    """
    dk = discovery_key(_unhex(args.public_key, "public key"))
    print(json.dumps({"discovery_key": dk.hex()}, indent=2))


def cmd_namespace(args):
    """
    hypercrypto namespace <name> --count 5
    """
    ids = namespace(args.name.encode("utf-8"), args.count)
    logger.debug("derived %d namespace ids", len(ids))
    print(json.dumps({"name": args.name, "ids": [i.hex() for i in ids]}, indent=2))


def cmd_hash_leaf(args):
    """
    hypercrypto hash-leaf --text hello
    """
    if args.hex is not None:
        data = _unhex(args.hex, "data")
    else:
        data = args.text.encode("utf-8")
    logger.debug("hashing %d byte leaf", len(data))
    print(json.dumps({"hash": hash_leaf(data).hex()}, indent=2))


def cmd_sign(args):
    """
    hypercrypto sign --private-key <hex> <message>
    """
    sig = sign(args.message.encode("utf-8"), _unhex(args.private_key, "private key"))
    print(json.dumps({"signature": sig.hex()}, indent=2))


def cmd_verify(args):
    """
    hypercrypto verify --public-key <hex> --signature <hex> <message>
    """
    ok = verify(
        args.message.encode("utf-8"),
        _unhex(args.signature, "signature"),
        _unhex(args.public_key, "public key"),
    )
    if ok:
        print("valid")
    else:
        print("invalid")
        sys.exit(1)


def build_parser():
    p = argparse.ArgumentParser(prog="hypercrypto", description="Hypercore crypto primitives CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    # keygen
    k = sub.add_parser("keygen", help="generate an ed25519 keypair")
    k.add_argument("--seed", help="optional 32-byte seed in hex for a deterministic keypair")
    k.set_defaults(func=cmd_keygen)

    # discovery-key
    d = sub.add_parser("discovery-key", help="derive the discovery key of a public key")
    d.add_argument("public_key", help="32-byte public key in hex")
    d.set_defaults(func=cmd_discovery_key)

    # namespace
    n = sub.add_parser("namespace", help="derive namespace ids from a name")
    n.add_argument("name", help="namespace name (UTF-8)")
    n.add_argument("--count", type=int, default=1, help="number of ids, 1 to 256 (default: 1)")
    n.set_defaults(func=cmd_namespace)

    # hash-leaf
    h = sub.add_parser("hash-leaf", help="hash leaf data")
    src = h.add_mutually_exclusive_group(required=True)
    src.add_argument("--hex", help="leaf data in hex")
    src.add_argument("--text", help="leaf data as UTF-8 text")
    h.set_defaults(func=cmd_hash_leaf)

    # sign
    s = sub.add_parser("sign", help="sign a message")
    s.add_argument("--private-key", required=True, help="64-byte private key in hex")
    s.add_argument("message", help="message (UTF-8)")
    s.set_defaults(func=cmd_sign)

    # verify
    v = sub.add_parser("verify", help="verify a message signature")
    v.add_argument("--public-key", required=True, help="32-byte public key in hex")
    v.add_argument("--signature", required=True, help="64-byte signature in hex")
    v.add_argument("message", help="message (UTF-8)")
    v.set_defaults(func=cmd_verify)

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
