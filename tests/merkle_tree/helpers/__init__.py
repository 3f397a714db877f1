"""Shared test helpers."""

from .stubs import StubHasher, combine_value, leaf_value

__all__ = [
    "StubHasher",
    "combine_value",
    "leaf_value",
]
