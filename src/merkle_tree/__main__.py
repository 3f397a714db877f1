"""
Merkle tree command line.

Build a tree from the given items and print its root, produce an inclusion
proof for one item, or check a proof against a root.

Usage::

    python -m merkle_tree root 0 1 2 3 4
    python -m merkle_tree prove --leaf 3 0 1 2 3 4 > proof.json
    python -m merkle_tree verify --root <root-hex> --leaf 3 --proof proof.json
    python -m merkle_tree --hash keccak256 --policy promote root a b c

Items are UTF-8 strings hashed with the selected hash function. With `--hex`
they are taken as ready-made leaf digests instead.

Options:
    --hash      Hash preset (default: $MERKLE_TREE_HASH or sha256)
    --policy    Odd-level policy, duplicate or promote
                (default: $MERKLE_TREE_ODD_POLICY or duplicate)
    --hex       Items are hex-encoded digests
    -v          Enable debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from merkle_tree import config
from merkle_tree.hashing import HASHERS, HashCapability, get_hasher
from merkle_tree.proof import MerkleProof, validate_proof
from merkle_tree.tree import MerkleTree, OddNodePolicy
from merkle_tree.types import Digest, MerkleTreeError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the command line."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def to_leaf(item: str, hasher: HashCapability, hex_input: bool) -> bytes:
    """
    Turn a command line item into a leaf digest.

    Args:
        item: The raw item text, or a hex digest when `hex_input` is set.
        hasher: Hash function applied to raw items.
        hex_input: Whether `item` already is a hex-encoded digest.

    Raises:
        ValueError: If `hex_input` is set and `item` is not valid hex.
    """
    if hex_input:
        return Digest(item)
    return hasher.hash(item.encode("utf-8"))


def _build(args: argparse.Namespace, hasher: HashCapability) -> MerkleTree:
    leaves = [to_leaf(item, hasher, args.hex) for item in args.items]
    return MerkleTree.build(leaves, hasher, OddNodePolicy(args.policy))


def cmd_root(args: argparse.Namespace, hasher: HashCapability) -> int:
    """Print the root of the tree built from the items."""
    tree = _build(args, hasher)
    print(bytes(tree.root_hash()).hex())
    return 0


def cmd_prove(args: argparse.Namespace, hasher: HashCapability) -> int:
    """Print the JSON inclusion proof of `--leaf`."""
    tree = _build(args, hasher)
    proof = tree.get_proof(to_leaf(args.leaf, hasher, args.hex))
    print(proof.to_json())
    return 0


def cmd_verify(args: argparse.Namespace, hasher: HashCapability) -> int:
    """Check a JSON proof; exit status 0 when valid, 1 when not."""
    data = sys.stdin.read() if args.proof == "-" else Path(args.proof).read_text()
    proof = MerkleProof.from_json(data)

    if validate_proof(proof, Digest(args.root), to_leaf(args.leaf, hasher, args.hex), hasher):
        print("valid")
        return 0

    print("invalid")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its three sub-commands."""
    parser = argparse.ArgumentParser(
        prog="merkle-tree",
        description="Merkle tree roots and inclusion proofs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--hash",
        choices=sorted(HASHERS),
        default=config.MERKLE_TREE_HASH,
        help=f"Hash preset (default: {config.MERKLE_TREE_HASH})",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in OddNodePolicy],
        default=config.MERKLE_TREE_ODD_POLICY,
        help=f"Odd-level policy (default: {config.MERKLE_TREE_ODD_POLICY})",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Treat items and leaves as hex-encoded digests",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    root = commands.add_parser("root", help="Print the root hash")
    root.add_argument("items", nargs="+", help="Leaf items, in order")
    root.set_defaults(handler=cmd_root)

    prove = commands.add_parser("prove", help="Print the inclusion proof of one leaf")
    prove.add_argument("--leaf", required=True, help="The item to prove")
    prove.add_argument("items", nargs="+", help="Leaf items, in order")
    prove.set_defaults(handler=cmd_prove)

    verify = commands.add_parser("verify", help="Check an inclusion proof")
    verify.add_argument("--root", required=True, help="Trusted root, hex-encoded")
    verify.add_argument("--leaf", required=True, help="The item claimed to be included")
    verify.add_argument("--proof", required=True, help="Proof JSON file, or '-' for stdin")
    verify.set_defaults(handler=cmd_verify)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    hasher = get_hasher(args.hash)

    try:
        return args.handler(args, hasher)
    except (MerkleTreeError, ValueError, OSError) as e:
        # pydantic's ValidationError is a ValueError, so bad proof files land here too.
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
