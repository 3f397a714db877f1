"""Exception hierarchy for tree construction and proof generation."""

from __future__ import annotations


class MerkleTreeError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class EmptyInputError(MerkleTreeError, ValueError):
    """Raised when a tree is built from an empty leaf sequence."""

    def __init__(self) -> None:
        super().__init__("Tree must contain at least a single leaf")


class EmptyTreeError(MerkleTreeError, ValueError):
    """Raised when the root is requested from a tree that holds no levels."""

    def __init__(self) -> None:
        super().__init__("Tree has no levels, so it has no root")


class LeafNotFoundError(MerkleTreeError, LookupError):
    """
    Raised when a digest is not among the leaves of a tree.

    Attributes:
        leaf: The digest that was looked up.
    """

    def __init__(self, leaf: bytes) -> None:
        self.leaf = leaf
        super().__init__(f"Leaf {bytes(leaf).hex()} is not part of the tree")


class DigestLengthError(MerkleTreeError, ValueError):
    """
    Raised when a leaf does not have the hash function's digest size.

    Attributes:
        expected: The digest size of the hash function.
        actual: The length of the offending leaf.
        index: Position of the offending leaf in the input sequence.
    """

    def __init__(self, *, expected: int, actual: int, index: int) -> None:
        self.expected = expected
        self.actual = actual
        self.index = index

        super().__init__(f"Leaf {index} has {actual} bytes, expected a {expected}-byte digest")
