"""Shared fixtures for matcher tests."""
from __future__ import annotations

import pytest

from publicsuffix_lite.domain.rule import Rule, RuleKind
from publicsuffix_lite.matching.trie import RuleTrie, build_trie

RULES = [
    Rule("com"),
    Rule("uk"),
    Rule("co.uk"),
    Rule("*.ck", RuleKind.WILDCARD),
    Rule("www.ck", RuleKind.WILDCARD_EXCEPTION),
    Rule("jp"),
    Rule("*.kawasaki.jp", RuleKind.WILDCARD),
    Rule("city.kawasaki.jp", RuleKind.WILDCARD_EXCEPTION),
    Rule("github.io"),
]


@pytest.fixture
def trie() -> RuleTrie:
    return build_trie(RULES)
