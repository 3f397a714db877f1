"""Pytest configuration and shared fixtures."""

import os

# Pin the command line defaults regardless of the caller's environment.
os.environ["MERKLE_TREE_HASH"] = "sha256"
os.environ["MERKLE_TREE_ODD_POLICY"] = "duplicate"

import pytest  # noqa: E402
from hypothesis import settings  # noqa: E402

from merkle_tree import SHA256, MerkleTree  # noqa: E402

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")


@pytest.fixture
def five_leaves() -> list[bytes]:
    """SHA-256 digests of the strings "0" through "4"."""
    return [SHA256.hash(str(i).encode()) for i in range(5)]


@pytest.fixture
def five_leaf_tree(five_leaves: list[bytes]) -> MerkleTree:
    """A SHA-256 tree over `five_leaves` with the default odd-level policy."""
    return MerkleTree.build(five_leaves, SHA256)
