"""publicsuffix-lite: public suffix and registrable domain lookup.

    from publicsuffix_lite import DomainParser, CachedRuleProvider

    parser = DomainParser(CachedRuleProvider())
    parser.load()
    parser.parse("www.example.co.uk").registrable_domain  # "example.co.uk"
"""
from publicsuffix_lite.domain import DomainInfo, Rule, RuleDivision, RuleKind
from publicsuffix_lite.domain_parser import DomainParser
from publicsuffix_lite.errors import (
    DoubleBuildError,
    InvalidInputError,
    NotReadyError,
    PublicSuffixError,
    RuleSourceError,
)
from publicsuffix_lite.matching import RuleTrie, SuffixMatch, build_trie, match, match_host
from publicsuffix_lite.rules import (
    CachedRuleProvider,
    FileRuleProvider,
    RuleProvider,
    StaticRuleProvider,
    parse_rules,
)

__all__ = [
    "CachedRuleProvider",
    "DomainInfo",
    "DomainParser",
    "DoubleBuildError",
    "FileRuleProvider",
    "InvalidInputError",
    "NotReadyError",
    "PublicSuffixError",
    "Rule",
    "RuleDivision",
    "RuleKind",
    "RuleProvider",
    "RuleSourceError",
    "RuleTrie",
    "StaticRuleProvider",
    "SuffixMatch",
    "build_trie",
    "match",
    "match_host",
    "parse_rules",
]
