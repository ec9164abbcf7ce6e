"""Domain model for publicsuffix-lite.

Re-exports all public types for convenient access:
    from publicsuffix_lite.domain import Rule, RuleKind, DomainInfo
"""
from publicsuffix_lite.domain.info import DomainInfo
from publicsuffix_lite.domain.rule import (
    CATCH_ALL_RULE,
    Rule,
    RuleDivision,
    RuleKind,
)
from publicsuffix_lite.domain.types import (
    EXCEPTION_MARKER,
    Label,
    Labels,
    NodeIndex,
    WILDCARD_LABEL,
)

__all__ = [
    "CATCH_ALL_RULE",
    "DomainInfo",
    "Rule",
    "RuleDivision",
    "RuleKind",
    "EXCEPTION_MARKER",
    "Label",
    "Labels",
    "NodeIndex",
    "WILDCARD_LABEL",
]
