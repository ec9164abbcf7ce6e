"""Shared type aliases used across the package."""
from __future__ import annotations

from typing import Sequence, TypeAlias

Label: TypeAlias = str
Labels: TypeAlias = Sequence[str]
NodeIndex: TypeAlias = int  # position of a TrieNode in the trie arena

WILDCARD_LABEL = "*"
EXCEPTION_MARKER = "!"
