"""
The hash capability consumed by the tree.

The tree, proof generator and validator never call a hash primitive directly.
They only need something that can turn bytes into a digest and two digests
into their parent. Anything that provides these members can be plugged in,
including trivial stubs in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HashCapability(Protocol):
    """Structural interface of a hash function usable by the tree."""

    @property
    def digest_size(self) -> int:
        """Number of bytes in every digest this capability returns."""
        ...

    def hash(self, data: bytes) -> bytes:
        """Hash arbitrary application bytes into a leaf digest."""
        ...

    def combine(self, left: bytes, right: bytes) -> bytes:
        """Hash two child digests into their parent digest."""
        ...
