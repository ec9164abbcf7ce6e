"""Rule entity: one line of a public suffix list.

A rule is a dotted pattern plus a kind:
  - NORMAL:             "co.uk"     -- the pattern itself is a suffix
  - WILDCARD:           "*.ck"      -- "*" stands for any single label
  - WILDCARD_EXCEPTION: "!www.ck"   -- carves www.ck out of "*.ck"

The "!" marker is not part of the pattern. "!www.ck" is stored as
pattern ("www", "ck") with kind WILDCARD_EXCEPTION.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

from publicsuffix_lite.domain.types import EXCEPTION_MARKER, WILDCARD_LABEL


class RuleKind(Enum):
    NORMAL = auto()
    WILDCARD = auto()
    WILDCARD_EXCEPTION = auto()


class RuleDivision(Enum):
    """Section of the rule list a rule was read from."""
    UNKNOWN = auto()
    ICANN = auto()
    PRIVATE = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """A single public suffix rule. Immutable once created.

    pattern accepts either a dotted string ("co.uk") or a sequence of
    labels (["co", "uk"]); both are stored as a lower-cased tuple.
    """
    pattern: tuple[str, ...]
    kind: RuleKind = RuleKind.NORMAL
    division: RuleDivision = RuleDivision.UNKNOWN
    label_count: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        raw: str | Sequence[str] = self.pattern
        labels = raw.split(".") if isinstance(raw, str) else list(raw)
        labels = tuple(label.lower() for label in labels)
        if not labels:
            raise ValueError("Rule pattern must contain at least one label")
        if any(label == "" for label in labels):
            raise ValueError(f"Rule pattern has an empty label: {raw!r}")
        object.__setattr__(self, "pattern", labels)
        object.__setattr__(self, "label_count", len(labels))

    @property
    def name(self) -> str:
        """Dotted pattern text without the exception marker."""
        return ".".join(self.pattern)

    @property
    def suffix_label_count(self) -> int:
        """Number of host labels forming the public suffix under this rule.

        For a wildcard exception the leftmost label belongs to the
        registrable domain, so the suffix is one label shorter.
        """
        if self.kind is RuleKind.WILDCARD_EXCEPTION:
            return self.label_count - 1
        return self.label_count

    @property
    def is_wildcard(self) -> bool:
        return self.kind is RuleKind.WILDCARD

    @property
    def is_exception(self) -> bool:
        return self.kind is RuleKind.WILDCARD_EXCEPTION

    def __str__(self) -> str:
        if self.kind is RuleKind.WILDCARD_EXCEPTION:
            return EXCEPTION_MARKER + self.name
        return self.name


# Synthetic rule held by the trie root. Matches any single TLD.
CATCH_ALL_RULE = Rule(WILDCARD_LABEL)
