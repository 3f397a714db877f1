r"""
Binary hash tree over a fixed set of leaf digests.

### Construction

The tree is built bottom-up, one level at a time:

1.  **Leaves**: level 0 is the caller's ordered list of leaf digests. The tree
    never hashes application data itself; leaves arrive already hashed.

2.  **Pairing**: nodes at indices `2i` and `2i + 1` are combined into the
    parent at index `i` of the next level.

3.  **Odd levels**: when a level has an odd number of nodes, the last one has
    no partner. The `OddNodePolicy` of the tree decides what happens to it:

    - `DUPLICATE` pairs the node with itself, `combine(last, last)`.
    - `PROMOTE` carries the node up unchanged.

    The two policies give different roots for the same leaves. Proof
    generation follows the same policy as construction.

4.  **Termination**: the process stops at a level with a single node, the root.

```
              [root]                  DUPLICATE, five leaves
             /      \
        [0123]        [44|44]
        /    \        /     \
     [01]    [23]   [44]   (copy)
     /  \    /  \    /  \
    0    1  2    3  4  (copy)
```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .hashing import SHA256, HashCapability
from .proof import MerkleProof, ProofStep, Side
from .types import Digest, DigestLengthError, EmptyInputError, EmptyTreeError, LeafNotFoundError

logger = logging.getLogger(__name__)

Level = tuple[bytes, ...]
"""One layer of the tree, ordered from left to right."""


class OddNodePolicy(str, Enum):
    """How the unpaired last node of an odd-sized level is lifted."""

    DUPLICATE = "duplicate"
    """Hash the node with a copy of itself."""

    PROMOTE = "promote"
    """Carry the node to the next level without hashing."""


def _parent_level(level: Level, hasher: HashCapability, policy: OddNodePolicy) -> Level:
    """Compute the level above `level`."""
    # Pair up (left, right) siblings; `zip` drops the unpaired tail node.
    parents = [hasher.combine(left, right) for left, right in zip(level[0::2], level[1::2])]

    if len(level) % 2 == 1:
        last = level[-1]
        if policy is OddNodePolicy.DUPLICATE:
            parents.append(hasher.combine(last, last))
        else:
            parents.append(last)

    return tuple(parents)


@dataclass(frozen=True, slots=True)
class MerkleTree:
    """
    An immutable Merkle tree.

    Use `MerkleTree.build` to construct one. Every level is stored, so proofs
    are read off the tree without rehashing.
    """

    levels: tuple[Level, ...]
    """All levels, from the leaves (index 0) to the root level (last)."""

    hasher: HashCapability = SHA256
    """The hash capability used to combine nodes."""

    policy: OddNodePolicy = OddNodePolicy.DUPLICATE
    """The odd-level policy used during construction."""

    def __post_init__(self) -> None:
        if self.levels and len(self.levels[-1]) > 1:
            raise ValueError(
                f"Top level holds {len(self.levels[-1])} nodes; a root level holds exactly one"
            )

    @classmethod
    def build(
        cls,
        leaves: Iterable[bytes],
        hasher: HashCapability = SHA256,
        policy: OddNodePolicy = OddNodePolicy.DUPLICATE,
    ) -> MerkleTree:
        """
        Build a tree from an ordered sequence of leaf digests.

        Args:
            leaves: The leaf digests, in order.
            hasher: The hash capability used to combine nodes.
            policy: How to lift the last node of an odd-sized level.

        Returns:
            The fully constructed tree.

        Raises:
            EmptyInputError: If `leaves` is empty.
            DigestLengthError: If a leaf is not `hasher.digest_size` bytes long.
            ValueError: If a leaf is empty or not valid hex.
        """
        level: list[bytes] = []
        for index, leaf in enumerate(leaves):
            digest = Digest(leaf)
            if len(digest) != hasher.digest_size:
                raise DigestLengthError(expected=hasher.digest_size, actual=len(digest), index=index)
            level.append(digest)

        if not level:
            raise EmptyInputError()

        levels: list[Level] = [tuple(level)]
        while len(levels[-1]) > 1:
            levels.append(_parent_level(levels[-1], hasher, policy))

        tree = cls(levels=tuple(levels), hasher=hasher, policy=policy)
        logger.debug(
            "Built Merkle tree with %d leaves, depth %d, root %s",
            len(level),
            tree.depth,
            bytes(tree.root_hash()).hex()[:16],
        )
        return tree

    @classmethod
    def from_data(
        cls,
        items: Iterable[bytes],
        hasher: HashCapability = SHA256,
        policy: OddNodePolicy = OddNodePolicy.DUPLICATE,
    ) -> MerkleTree:
        """Hash each raw item with `hasher.hash` and build a tree from the results."""
        return cls.build([hasher.hash(item) for item in items], hasher, policy)

    @property
    def leaves(self) -> Level:
        """The leaf digests, in construction order."""
        return self.levels[0] if self.levels else ()

    @property
    def depth(self) -> int:
        """Number of levels above the leaves."""
        return max(len(self.levels) - 1, 0)

    def __len__(self) -> int:
        return len(self.leaves)

    def __contains__(self, leaf: object) -> bool:
        return leaf in self.leaves

    def root_hash(self) -> bytes:
        """
        Return the single digest at the top of the tree.

        Raises:
            EmptyTreeError: If the tree holds no levels or its top level is empty.
        """
        if not self.levels or not self.levels[-1]:
            raise EmptyTreeError()
        return self.levels[-1][0]

    def index_of(self, leaf: bytes) -> int:
        """
        Return the position of the first leaf equal to `leaf`.

        Raises:
            LeafNotFoundError: If no leaf has this value.
        """
        try:
            return self.leaves.index(leaf)
        except ValueError:
            raise LeafNotFoundError(leaf) from None

    def get_proof(self, leaf: bytes) -> MerkleProof:
        """
        Compute the inclusion proof for a leaf, looked up by value.

        With duplicate leaf values the first occurrence is proven.

        Raises:
            LeafNotFoundError: If `leaf` is not one of the leaves.
        """
        return self.get_proof_at(self.index_of(leaf))

    def get_proof_at(self, index: int) -> MerkleProof:
        """
        Compute the inclusion proof for the leaf at `index`.

        The algorithm climbs from the leaf to the level just below the root.
        At each level the sibling is found by flipping the last bit of the
        position. A node without a sibling follows the tree's odd-level policy:
        under `DUPLICATE` it is its own right-hand sibling; under `PROMOTE` it
        rises unchanged and that level adds nothing to the proof.

        Raises:
            IndexError: If `index` does not address a leaf.
        """
        if not 0 <= index < len(self.leaves):
            raise IndexError(f"Leaf index {index} out of range for {len(self.leaves)} leaves")

        steps: list[ProofStep] = []
        position = index

        # The root level contributes no sibling.
        for level in self.levels[:-1]:
            sibling_position = position ^ 1

            if sibling_position < len(level):
                side = Side.LEFT if sibling_position < position else Side.RIGHT
                steps.append(ProofStep(sibling=level[sibling_position], side=side))
            elif self.policy is OddNodePolicy.DUPLICATE:
                steps.append(ProofStep(sibling=level[position], side=Side.RIGHT))

            # Move up to the parent's position for the next iteration.
            position //= 2

        logger.debug("Generated proof for leaf %d with %d steps", index, len(steps))
        return MerkleProof(steps=tuple(steps))

    def validate(self, proof: MerkleProof, leaf: bytes) -> bool:
        """
        Check a proof for `leaf` against this tree's root and hasher.

        Raises:
            EmptyTreeError: If the tree has no root to check against.
        """
        return proof.validate(self.root_hash(), leaf, self.hasher)

    def append(self, leaf: bytes) -> MerkleTree:
        """Return a new tree with `leaf` added after the existing leaves."""
        return self.extend([leaf])

    def extend(self, leaves: Sequence[bytes]) -> MerkleTree:
        """Return a new tree with `leaves` added after the existing leaves."""
        return type(self).build([*self.leaves, *leaves], self.hasher, self.policy)
