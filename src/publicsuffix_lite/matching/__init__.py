"""Rule trie construction and suffix matching."""

from publicsuffix_lite.matching.matcher import (
    MatchCandidate,
    SuffixMatch,
    collect_candidates,
    match,
    match_host,
    select_winner,
    validate_labels,
)
from publicsuffix_lite.matching.trie import RuleTrie, TrieNode, build_trie

__all__ = [
    "MatchCandidate",
    "RuleTrie",
    "SuffixMatch",
    "TrieNode",
    "build_trie",
    "collect_candidates",
    "match",
    "match_host",
    "select_winner",
    "validate_labels",
]
