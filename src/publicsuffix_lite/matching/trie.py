"""Label trie over reversed rule patterns.

Rule patterns are reversed before insertion so that the TLD comes
first: "*.kawasaki.jp" becomes ["jp", "kawasaki", "*"]. Lookups then
consume a host's labels from the TLD inward without re-reversing.

Nodes live in an arena: a tuple of TrieNode addressed by integer
index, children map a label to a child index. The arena is assembled
in a local list and published with a single attribute assignment, so
a reader either sees no trie or the whole trie, never a partial one.
After publication nothing mutates it and lookups need no lock.

The root (index 0) is keyed "*" and carries the catch-all rule, so
every lookup has at least one candidate.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable

from publicsuffix_lite.domain.rule import CATCH_ALL_RULE, Rule
from publicsuffix_lite.domain.types import NodeIndex, WILDCARD_LABEL
from publicsuffix_lite.errors import DoubleBuildError, NotReadyError

log = logging.getLogger(__name__)

ROOT: NodeIndex = 0


@dataclass(slots=True)
class TrieNode:
    """One label in the trie.

    terminal_rule is the rule whose pattern ends exactly here (or None).
    children maps a label (or "*") to the child's arena index.
    """
    label: str
    terminal_rule: Rule | None = None
    children: dict[str, NodeIndex] = field(default_factory=dict)


class RuleTrie:
    """Immutable-after-build trie of public suffix rules.

    Usage:
        trie = RuleTrie().build(rules)
        trie.find("co.uk")   # Rule terminating at co.uk, or None

    build() may be called exactly once; a second call raises
    DoubleBuildError instead of overwriting the published arena.
    """

    def __init__(self) -> None:
        self._nodes: tuple[TrieNode, ...] = ()
        self._rule_count = 0
        self._build_lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return bool(self._nodes)

    @property
    def rule_count(self) -> int:
        """Number of rules processed by build(), duplicates included."""
        return self._rule_count

    def build(self, rules: Iterable[Rule]) -> RuleTrie:
        """Insert every rule, in input order, then publish the arena.

        For duplicate patterns the last rule wins the terminal slot.
        """
        with self._build_lock:
            if self._nodes:
                raise DoubleBuildError("Rule trie has already been built")

            nodes: list[TrieNode] = [TrieNode(WILDCARD_LABEL, CATCH_ALL_RULE)]
            count = 0
            for rule in rules:
                _insert(nodes, rule)
                count += 1

            self._rule_count = count
            self._nodes = tuple(nodes)  # publish

        log.debug("Built rule trie: %d rules, %d nodes", count, len(nodes))
        return self

    @property
    def nodes(self) -> tuple[TrieNode, ...]:
        """The published arena. Raises NotReadyError before build()."""
        nodes = self._nodes
        if not nodes:
            raise NotReadyError("Rule trie has not been built")
        return nodes

    def node(self, index: NodeIndex) -> TrieNode:
        return self.nodes[index]

    @property
    def root(self) -> TrieNode:
        return self.node(ROOT)

    def find(self, pattern: str | Iterable[str]) -> Rule | None:
        """Return the terminal rule stored for an exact pattern, if any.

        Pattern labels are followed literally, "*" only matches a "*" edge.
        """
        labels = pattern.split(".") if isinstance(pattern, str) else list(pattern)
        nodes = self.nodes
        index = ROOT
        for label in reversed(labels):
            child = nodes[index].children.get(label.lower())
            if child is None:
                return None
            index = child
        return nodes[index].terminal_rule

    def node_count(self) -> int:
        """Count total nodes in the trie (for memory reporting)."""
        return len(self._nodes)


def _insert(nodes: list[TrieNode], rule: Rule) -> None:
    """Walk/create the reversed path for one rule and set its terminal slot."""
    reversed_labels = rule.pattern[::-1]
    index = ROOT
    for label in reversed_labels[:-1]:
        index = _child_or_create(nodes, index, label)

    last = reversed_labels[-1]
    existing = nodes[index].children.get(last)
    if existing is not None:
        nodes[existing].terminal_rule = rule
        return
    nodes.append(TrieNode(last, rule))
    nodes[index].children[last] = len(nodes) - 1


def _child_or_create(nodes: list[TrieNode], index: NodeIndex, label: str) -> NodeIndex:
    child = nodes[index].children.get(label)
    if child is None:
        nodes.append(TrieNode(label))
        child = len(nodes) - 1
        nodes[index].children[label] = child
    return child


def build_trie(rules: Iterable[Rule]) -> RuleTrie:
    """Build and return a new trie from a finalized rule sequence."""
    return RuleTrie().build(rules)
