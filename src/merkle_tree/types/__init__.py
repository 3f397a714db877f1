"""Value types and errors shared across the package."""

from .base import StrictBaseModel
from .digest import Digest
from .exceptions import (
    DigestLengthError,
    EmptyInputError,
    EmptyTreeError,
    LeafNotFoundError,
    MerkleTreeError,
)

__all__ = [
    # Core types
    "Digest",
    "StrictBaseModel",
    # Exceptions
    "MerkleTreeError",
    "EmptyInputError",
    "EmptyTreeError",
    "LeafNotFoundError",
    "DigestLengthError",
]
