"""Exception hierarchy for publicsuffix-lite.

"Host is itself a public suffix" is a normal lookup outcome and has no
exception here.
"""
from __future__ import annotations


class PublicSuffixError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(PublicSuffixError, ValueError):
    """Host or label sequence is empty or malformed."""


class NotReadyError(PublicSuffixError, RuntimeError):
    """A lookup was attempted before the rule trie was published."""


class DoubleBuildError(PublicSuffixError, RuntimeError):
    """Build or publish was invoked on an already-populated trie."""


class RuleSourceError(PublicSuffixError):
    """Rule text could not be obtained from its source."""
