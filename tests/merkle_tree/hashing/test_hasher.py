"""Tests for the concrete hash functions."""

import hashlib

import pytest
from pydantic import ValidationError

from merkle_tree.hashing import (
    HASHERS,
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
from merkle_tree.types import Digest


@pytest.mark.parametrize(
    "hasher, expected",
    [
        (SHA256, "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        (SHA3_256, "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"),
        (KECCAK256, "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"),
        (
            SHA512,
            "a69f73cca23a9ac5c8b567dc185a756e97c982164fe25859e0d1dcc1475c80a6"
            "15b2123af1f5f94c11e3e9402c3ac558f500199d95b6d3e301758586281dcd26",
        ),
    ],
)
def test_hash_of_empty_input(hasher: Hasher, expected: str) -> None:
    """Known digests of the empty string for every primitive."""
    digest = hasher.hash(b"")
    assert isinstance(digest, Digest)
    assert digest.hex() == expected
    assert len(digest) == hasher.digest_size


def test_hash_two_different_values() -> None:
    assert SHA256.hash(b"\x00") != SHA256.hash(b"\x01")


def test_hash_two_identical_values() -> None:
    assert SHA256.hash(b"\x00") == SHA256.hash(b"\x00")


def test_combine_is_hash_of_concatenation() -> None:
    left, right = SHA256.hash(b"a"), SHA256.hash(b"b")
    assert SHA256.combine(left, right) == hashlib.sha256(left + right).digest()


def test_combine_is_order_sensitive_by_default() -> None:
    left, right = SHA256.hash(b"a"), SHA256.hash(b"b")
    assert SHA256.combine(left, right) != SHA256.combine(right, left)


def test_sorted_pairs_combine_is_order_insensitive() -> None:
    """With `sort_pairs`, the greater operand is always hashed first."""
    hasher = Hasher(algorithm=HashAlgorithm.SHA3_256, sort_pairs=True)
    low, high = sorted([hasher.hash(b"a"), hasher.hash(b"b")])

    expected = hashlib.sha3_256(high + low).digest()
    assert hasher.combine(low, high) == expected
    assert hasher.combine(high, low) == expected


def test_rfc6962_domain_separation() -> None:
    """Leaves and nodes are hashed with distinct one-byte prefixes."""
    assert RFC6962_SHA256.hash(b"").hex() == (
        "6e340b9cffb37a989ca544e6bb780a2c78901d3fb33738768511a30617afa01d"
    )

    left, right = RFC6962_SHA256.hash(b"a"), RFC6962_SHA256.hash(b"b")
    assert RFC6962_SHA256.combine(left, right) == hashlib.sha256(b"\x01" + left + right).digest()
    assert RFC6962_SHA256.hash(left + right) != RFC6962_SHA256.combine(left, right)


@pytest.mark.parametrize("name", sorted(HASHERS))
def test_presets_satisfy_capability(name: str) -> None:
    hasher = get_hasher(name)
    assert isinstance(hasher, HashCapability)
    assert hasher is HASHERS[name]


def test_get_hasher_is_case_insensitive() -> None:
    assert get_hasher("SHA256") is SHA256


def test_get_hasher_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown hash function: 'md5'"):
        get_hasher("md5")


def test_hasher_is_immutable() -> None:
    with pytest.raises(ValidationError):
        SHA256.sort_pairs = True  # type: ignore[misc]


def test_hasher_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        Hasher(algorithm=HashAlgorithm.SHA256, rounds=2)  # type: ignore[call-arg]
