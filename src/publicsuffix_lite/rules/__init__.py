"""Rule acquisition: text parsing and rule sources."""
from publicsuffix_lite.rules.parser import parse_rule, parse_rules
from publicsuffix_lite.rules.provider import (
    CachedRuleProvider,
    FileRuleProvider,
    RuleProvider,
    StaticRuleProvider,
)

__all__ = [
    "CachedRuleProvider",
    "FileRuleProvider",
    "RuleProvider",
    "StaticRuleProvider",
    "parse_rule",
    "parse_rules",
]
