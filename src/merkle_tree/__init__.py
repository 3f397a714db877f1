"""
Binary Merkle trees with compact inclusion proofs.

Usage::

    from merkle_tree import SHA256, MerkleTree, validate_proof

    leaves = [SHA256.hash(item) for item in (b"0", b"1", b"2", b"3", b"4")]
    tree = MerkleTree.build(leaves, SHA256)
    root = tree.root_hash()

    proof = tree.get_proof(leaves[3])
    assert validate_proof(proof, root, leaves[3], SHA256)
"""

from .hashing import (
    KECCAK256,
    RFC6962_SHA256,
    SHA3_256,
    SHA256,
    SHA512,
    HashAlgorithm,
    HashCapability,
    Hasher,
    get_hasher,
)
from .proof import MerkleProof, ProofStep, Side, validate_proof
from .tree import MerkleTree, OddNodePolicy
from .types import (
    Digest,
    DigestLengthError,
    EmptyInputError,
    EmptyTreeError,
    LeafNotFoundError,
    MerkleTreeError,
)

__all__ = [
    # Tree and proofs
    "MerkleTree",
    "OddNodePolicy",
    "MerkleProof",
    "ProofStep",
    "Side",
    "validate_proof",
    # Hashing
    "HashCapability",
    "HashAlgorithm",
    "Hasher",
    "get_hasher",
    "SHA256",
    "SHA3_256",
    "KECCAK256",
    "SHA512",
    "RFC6962_SHA256",
    # Types
    "Digest",
    # Exceptions
    "MerkleTreeError",
    "EmptyInputError",
    "EmptyTreeError",
    "LeafNotFoundError",
    "DigestLengthError",
]
