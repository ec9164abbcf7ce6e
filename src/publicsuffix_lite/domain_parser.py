"""DomainParser: rule loading, trie publication and host lookup in one place.

Two ways to construct it:

    parser = DomainParser.from_rules(rules)          # build now
    parser = DomainParser(CachedRuleProvider())      # build on first load

    parser.load()                      # or: await parser.load_async()
    info = parser.parse("www.example.co.uk")
    info.registrable_domain            # "example.co.uk"

parse() returns None when the host is itself a public suffix
("co.uk"), raises InvalidInputError for malformed hosts and
NotReadyError before the rules are loaded. parse_async() loads the
rules first if needed.

Thread safety: load() and build() hold a lock, so at most one build
ever runs. The finished trie is published through a ReadyGate and
lookups read it without locking.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Iterable

from publicsuffix_lite.concurrency.ready_gate import ReadyGate
from publicsuffix_lite.domain.info import DomainInfo
from publicsuffix_lite.domain.rule import Rule
from publicsuffix_lite.domain.types import Labels
from publicsuffix_lite.errors import DoubleBuildError, NotReadyError
from publicsuffix_lite.matching.matcher import SuffixMatch, match_host
from publicsuffix_lite.matching.trie import RuleTrie, build_trie
from publicsuffix_lite.normalize import host_labels
from publicsuffix_lite.rules.provider import RuleProvider

log = logging.getLogger(__name__)


class DomainParser:
    """Find the public suffix and registrable domain of host names.

    Args:
        provider: Rule source used by load(). May be omitted when the
            rules are supplied through build() or from_rules().
    """

    def __init__(self, provider: RuleProvider | None = None) -> None:
        self._provider = provider
        self._gate: ReadyGate[RuleTrie] = ReadyGate()
        self._load_lock = threading.Lock()

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> DomainParser:
        """Factory: parser with its trie already built from rules."""
        parser = cls()
        parser.build(rules)
        return parser

    @property
    def is_ready(self) -> bool:
        return self._gate.is_ready

    @property
    def trie(self) -> RuleTrie:
        """The published trie. Raises NotReadyError before loading."""
        return self._gate.get()

    def build(self, rules: Iterable[Rule]) -> RuleTrie:
        """Build the trie from rules and publish it. Only allowed once."""
        with self._load_lock:
            if self._gate.is_ready:
                raise DoubleBuildError("Rules have already been loaded")
            trie = build_trie(rules)
            self._gate.publish(trie)
        return trie

    def load(self) -> RuleTrie:
        """Load rules from the provider and publish the trie, once.

        Concurrent callers block until the first load finishes and then
        share its trie. A failed load publishes nothing, so a later
        call may try again.
        """
        if self._gate.is_ready:
            return self._gate.get()
        with self._load_lock:
            if self._gate.is_ready:
                return self._gate.get()
            if self._provider is None:
                raise NotReadyError("No rule provider configured and no rules built")
            rules = self._provider.load_rules()
            log.info("Loaded %d rules from %s", len(rules), type(self._provider).__name__)
            trie = build_trie(rules)
            self._gate.publish(trie)
        return trie

    async def load_async(self) -> RuleTrie:
        """Async variant of load(); the blocking work runs in a worker thread."""
        if self._gate.is_ready:
            return self._gate.get()
        return await asyncio.to_thread(self.load)

    def wait_ready(self, timeout: float | None = None) -> RuleTrie:
        """Block until another thread has loaded the rules."""
        return self._gate.wait(timeout)

    def match_labels(self, labels: Labels) -> SuffixMatch:
        """Match already-normalized, rightmost-first labels."""
        return match_host(labels, self._gate.get())

    def parse(self, host: str) -> DomainInfo | None:
        """Look up a host. None means the host is itself a public suffix."""
        trie = self._gate.get()
        return match_host(host_labels(host), trie).to_domain_info()

    async def parse_async(self, host: str) -> DomainInfo | None:
        """Load the rules if needed, then look up a host."""
        await self.load_async()
        return self.parse(host)
