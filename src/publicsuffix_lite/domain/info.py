"""DomainInfo: the result of a successful host lookup.

Holds the normalized host and the winning rule. Everything else
(suffix, registrable domain, subdomain) is derived from those two:

    host  = "shop.example.co.uk", rule = co.uk
    public_suffix      = "co.uk"
    registrable_domain = "example.co.uk"
    domain             = "example"
    subdomain          = "shop"
"""
from __future__ import annotations

from dataclasses import dataclass

from publicsuffix_lite.domain.rule import Rule, RuleDivision


@dataclass(frozen=True, slots=True)
class DomainInfo:
    normalized_host: str
    public_suffix_rule: Rule

    @property
    def labels(self) -> tuple[str, ...]:
        """Host labels, left to right."""
        return tuple(self.normalized_host.split("."))

    @property
    def public_suffix(self) -> str:
        n = self.public_suffix_rule.suffix_label_count
        return ".".join(self.labels[-n:])

    @property
    def registrable_domain(self) -> str | None:
        """Public suffix plus one label, or None if the host has no owner label."""
        labels = self.labels
        n = self.public_suffix_rule.suffix_label_count
        if len(labels) <= n:
            return None
        return ".".join(labels[-(n + 1):])

    @property
    def domain(self) -> str | None:
        """The registered owner's label (the one just above the suffix)."""
        labels = self.labels
        n = self.public_suffix_rule.suffix_label_count
        if len(labels) <= n:
            return None
        return labels[-(n + 1)]

    @property
    def subdomain(self) -> str | None:
        labels = self.labels
        n = self.public_suffix_rule.suffix_label_count
        rest = labels[:-(n + 1)]
        return ".".join(rest) if rest else None

    @property
    def is_icann(self) -> bool:
        return self.public_suffix_rule.division is RuleDivision.ICANN

    @property
    def is_private(self) -> bool:
        return self.public_suffix_rule.division is RuleDivision.PRIVATE
