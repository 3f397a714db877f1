"""
Inclusion proofs.

A proof is the list of siblings met while climbing from a leaf to the root.
Each entry also records on which side the sibling sits, so a verifier can
rebuild every parent in the correct `(left, right)` order.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import Field

from .hashing import SHA256, HashCapability
from .types import Digest, StrictBaseModel

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """Position of a sibling relative to the node being proven."""

    LEFT = "left"
    RIGHT = "right"


class ProofStep(StrictBaseModel):
    """One level of an inclusion proof."""

    sibling: Digest = Field(description="The digest paired with the running node.")
    side: Side = Field(description="Where the sibling goes when recombining.")


class MerkleProof(StrictBaseModel):
    """
    An ordered sibling path from a leaf up to, but excluding, the root.

    This object is immutable; once created, its contents cannot be changed.
    """

    steps: tuple[ProofStep, ...] = Field(
        default=(), description="Sibling entries, ordered from the leaf level upwards."
    )

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def siblings(self) -> list[Digest]:
        """The sibling digests without their side flags."""
        return [step.sibling for step in self.steps]

    def compute_root(self, leaf: bytes, hasher: HashCapability = SHA256) -> bytes:
        """
        Recompute the root implied by this proof for `leaf`.

        Starting from the leaf, each step combines the running digest with its
        sibling: a left sibling is hashed first, a right sibling second.
        """
        candidate = leaf
        for step in self.steps:
            if step.side is Side.LEFT:
                candidate = hasher.combine(step.sibling, candidate)
            else:
                candidate = hasher.combine(candidate, step.sibling)
        return candidate

    def validate(
        self, claimed_root: bytes, leaf: bytes, hasher: HashCapability = SHA256
    ) -> bool:
        """Check that `leaf` is included under `claimed_root`."""
        return validate_proof(self, claimed_root, leaf, hasher)

    def to_json(self) -> str:
        """Serialize to JSON, with digests as hex strings."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> MerkleProof:
        """
        Parse a proof produced by `to_json`.

        Raises:
            pydantic.ValidationError: If the document is not a valid proof.
        """
        return cls.model_validate_json(data)


def validate_proof(
    proof: MerkleProof,
    claimed_root: bytes,
    leaf: bytes,
    hasher: HashCapability = SHA256,
) -> bool:
    """
    Verify an inclusion proof against a trusted root.

    This is a pure predicate. A proof that is malformed, tampered with or
    built for another leaf or tree yields `False`; it never raises.

    Args:
        proof: The sibling path returned by `MerkleTree.get_proof`.
        claimed_root: The trusted root digest.
        leaf: The leaf digest whose inclusion is claimed.
        hasher: The hash capability the tree was built with.

    Returns:
        `True` if recombining the leaf with the path yields `claimed_root`.
    """
    try:
        candidate = proof.compute_root(leaf, hasher)
    except (TypeError, ValueError) as e:
        logger.debug("Proof could not be evaluated: %s", e)
        return False

    if candidate != claimed_root:
        logger.debug("Proof rejected: recomputed root %s", bytes(candidate).hex()[:16])
        return False
    return True
