"""Longest-match-with-exceptions lookup over a built RuleTrie.

Given host labels ordered rightmost-first ("www.example.co.uk" ->
["uk", "co", "example", "www"]), walk the trie depth-first. At each
node follow both the exact-label child and the "*" child, recording
every terminal rule on every explored path. A host can satisfy a
specific rule and a broader wildcard at different depths, so the
walk returns all candidates rather than a single best-so-far.

The winner is the first candidate after sorting by:
  1. WILDCARD_EXCEPTION before anything else
  2. higher label_count (longer pattern)
  3. descending rule name (stable tie-break, no deeper meaning)
"""
from __future__ import annotations

from dataclasses import dataclass

from publicsuffix_lite.domain.info import DomainInfo
from publicsuffix_lite.domain.rule import CATCH_ALL_RULE, Rule, RuleKind
from publicsuffix_lite.domain.types import Labels, WILDCARD_LABEL
from publicsuffix_lite.errors import InvalidInputError
from publicsuffix_lite.matching.trie import ROOT, RuleTrie, TrieNode


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """A rule found during the walk, kept only long enough to rank it."""
    rule: Rule
    label_count: int
    kind: RuleKind

    @classmethod
    def from_rule(cls, rule: Rule) -> MatchCandidate:
        return cls(rule=rule, label_count=rule.label_count, kind=rule.kind)

    def sort_key(self) -> tuple[bool, int, str]:
        return (
            self.kind is RuleKind.WILDCARD_EXCEPTION,
            self.label_count,
            self.rule.name,
        )


@dataclass(frozen=True, slots=True)
class SuffixMatch:
    """Outcome of match_host().

    labels are rightmost-first, as passed in. host_is_suffix is True
    when the input has exactly as many labels as the winning rule, so
    the whole host is a public suffix with no registrable domain. That
    is a normal result, not an error.
    """
    labels: tuple[str, ...]
    rule: Rule

    @property
    def host_is_suffix(self) -> bool:
        return len(self.labels) == self.rule.label_count

    @property
    def normalized_host(self) -> str:
        return ".".join(reversed(self.labels))

    def to_domain_info(self) -> DomainInfo | None:
        """DomainInfo for this match, or None when the host is itself a suffix."""
        if self.host_is_suffix:
            return None
        return DomainInfo(self.normalized_host, self.rule)


def validate_labels(labels: Labels) -> tuple[str, ...]:
    """Reject empty sequences and empty labels before any traversal."""
    if isinstance(labels, str):
        raise InvalidInputError("Expected a sequence of labels, got a string")
    result = tuple(labels)
    if not result:
        raise InvalidInputError("Label sequence is empty")
    for position, label in enumerate(result):
        if not label:
            raise InvalidInputError(f"Empty label at position {position}")
    return result


def collect_candidates(labels: Labels, trie: RuleTrie) -> list[MatchCandidate]:
    """Return every rule whose reversed pattern is a prefix match on labels."""
    checked = validate_labels(labels)
    results: list[MatchCandidate] = []
    _walk(trie.nodes, ROOT, checked, 0, results)
    return results


def _walk(
    nodes: tuple[TrieNode, ...],
    index: int,
    labels: tuple[str, ...],
    depth: int,
    results: list[MatchCandidate],
) -> None:
    """Recursive DFS through the trie, branching on literal and wildcard."""
    node = nodes[index]
    if node.terminal_rule is not None:
        results.append(MatchCandidate.from_rule(node.terminal_rule))

    if depth == len(labels):
        return

    label = labels[depth]

    child = node.children.get(label)
    if child is not None:
        _walk(nodes, child, labels, depth + 1, results)

    # A literal "*" label already went down the wildcard edge above
    wild = node.children.get(WILDCARD_LABEL)
    if wild is not None and label != WILDCARD_LABEL:
        _walk(nodes, wild, labels, depth + 1, results)


def select_winner(candidates: list[MatchCandidate]) -> Rule:
    """Pick the winning rule; the catch-all rule when nothing matched."""
    if not candidates:
        return CATCH_ALL_RULE
    ranked = sorted(candidates, key=MatchCandidate.sort_key, reverse=True)
    return ranked[0].rule


def match(labels: Labels, trie: RuleTrie) -> Rule:
    """Return the winning rule for rightmost-first, normalized labels."""
    return select_winner(collect_candidates(labels, trie))


def match_host(labels: Labels, trie: RuleTrie) -> SuffixMatch:
    """Match labels and report whether the host is itself a public suffix."""
    checked = validate_labels(labels)
    return SuffixMatch(labels=checked, rule=match(checked, trie))
