"""Hash capability interface and the concrete hash functions."""

from .capability import HashCapability
from .hasher import (
    HASHERS,
    KECCAK256,
    RFC6962_SHA256,
    SHA3_256,
    SHA256,
    SHA512,
    HashAlgorithm,
    Hasher,
    get_hasher,
)

__all__ = [
    "HashCapability",
    "HashAlgorithm",
    "Hasher",
    "get_hasher",
    "HASHERS",
    # Presets
    "SHA256",
    "SHA3_256",
    "KECCAK256",
    "SHA512",
    "RFC6962_SHA256",
]
