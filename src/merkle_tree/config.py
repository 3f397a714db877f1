"""
Environment-driven defaults.

These settings only pick defaults for the command line. Library calls always
take their hasher and odd-node policy explicitly.
"""

import os

from .hashing import HASHERS
from .tree import OddNodePolicy

_SUPPORTED_ODD_POLICIES: list[str] = [policy.value for policy in OddNodePolicy]

MERKLE_TREE_HASH = os.environ.get("MERKLE_TREE_HASH", "sha256").lower()
"""Name of the default hash preset. Defaults to 'sha256'."""

if MERKLE_TREE_HASH not in HASHERS:
    raise ValueError(
        f"Invalid MERKLE_TREE_HASH environment variable: '{MERKLE_TREE_HASH}'. "
        f"Supported values: {sorted(HASHERS)}"
    )

MERKLE_TREE_ODD_POLICY = os.environ.get("MERKLE_TREE_ODD_POLICY", "duplicate").lower()
"""Default odd-level policy ('duplicate' or 'promote'). Defaults to 'duplicate'."""

if MERKLE_TREE_ODD_POLICY not in _SUPPORTED_ODD_POLICIES:
    raise ValueError(
        f"Invalid MERKLE_TREE_ODD_POLICY environment variable: '{MERKLE_TREE_ODD_POLICY}'. "
        f"Supported values: {_SUPPORTED_ODD_POLICIES}"
    )
