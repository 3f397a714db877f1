"""
Concrete hash functions.

All variants are instances of a single `Hasher` model. The model picks one of
a closed set of primitives and optionally adds:

- **Domain separation** (RFC 6962 / Certificate Transparency style): leaves are
  hashed as `H(0x00 || data)` and internal nodes as `H(0x01 || left || right)`.
  A leaf digest can then never be mistaken for an internal node.

- **Sorted pairs**: the two operands of `combine` are ordered before hashing,
  the larger one first. The parent no longer depends on which child was on the
  left, so the side flags in a proof become irrelevant.
"""

from __future__ import annotations

import hashlib
from enum import Enum

from Crypto.Hash import keccak

from ..types import Digest, StrictBaseModel


class HashAlgorithm(str, Enum):
    """The hash primitives a `Hasher` can be built on."""

    SHA256 = "sha256"
    SHA3_256 = "sha3-256"
    KECCAK256 = "keccak256"
    SHA3_512 = "sha3-512"


_DIGEST_SIZES: dict[HashAlgorithm, int] = {
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA3_256: 32,
    HashAlgorithm.KECCAK256: 32,
    HashAlgorithm.SHA3_512: 64,
}


def _keccak256(data: bytes) -> bytes:
    """Original Keccak-256 (pre-NIST padding), as used by Ethereum."""
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


class Hasher(StrictBaseModel):
    """A hash capability backed by a standard primitive."""

    algorithm: HashAlgorithm
    """The underlying hash primitive."""

    leaf_prefix: bytes = b""
    """Bytes prepended to application data in `hash`."""

    node_prefix: bytes = b""
    """Bytes prepended to the concatenated children in `combine`."""

    sort_pairs: bool = False
    """If set, `combine` is order-insensitive."""

    @property
    def digest_size(self) -> int:
        """Number of bytes in every digest this hasher returns."""
        return _DIGEST_SIZES[self.algorithm]

    def _digest(self, data: bytes) -> Digest:
        match self.algorithm:
            case HashAlgorithm.SHA256:
                raw = hashlib.sha256(data).digest()
            case HashAlgorithm.SHA3_256:
                raw = hashlib.sha3_256(data).digest()
            case HashAlgorithm.KECCAK256:
                raw = _keccak256(data)
            case HashAlgorithm.SHA3_512:
                raw = hashlib.sha3_512(data).digest()
        return Digest(raw)

    def hash(self, data: bytes) -> Digest:
        """Hash application data into a leaf digest."""
        return self._digest(self.leaf_prefix + bytes(data))

    def combine(self, left: bytes, right: bytes) -> Digest:
        """
        Hash two children into their parent.

        With `sort_pairs`, the operands are swapped when `left <= right`, so
        the greater digest is always hashed first.
        """
        if self.sort_pairs and left <= right:
            left, right = right, left
        return self._digest(self.node_prefix + bytes(left) + bytes(right))


SHA256 = Hasher(algorithm=HashAlgorithm.SHA256)
"""SHA-256 with plain concatenation."""

SHA3_256 = Hasher(algorithm=HashAlgorithm.SHA3_256)
"""SHA3-256 with plain concatenation."""

KECCAK256 = Hasher(algorithm=HashAlgorithm.KECCAK256)
"""Keccak-256 with plain concatenation."""

SHA512 = Hasher(algorithm=HashAlgorithm.SHA3_512)
"""SHA3-512 with plain concatenation (64-byte digests)."""

RFC6962_SHA256 = Hasher(
    algorithm=HashAlgorithm.SHA256,
    leaf_prefix=b"\x00",
    node_prefix=b"\x01",
)
"""SHA-256 with RFC 6962 leaf and node domain separation."""

HASHERS: dict[str, Hasher] = {
    "sha256": SHA256,
    "sha3-256": SHA3_256,
    "keccak256": KECCAK256,
    "sha512": SHA512,
    "rfc6962-sha256": RFC6962_SHA256,
}
"""Named presets, as accepted by `get_hasher` and the command line."""


def get_hasher(name: str) -> Hasher:
    """
    Look up a preset hasher by name.

    Raises:
        ValueError: If `name` is not a known preset.
    """
    try:
        return HASHERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown hash function: '{name}'. Supported values: {sorted(HASHERS)}"
        ) from None
