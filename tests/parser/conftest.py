"""Shared fixtures for DomainParser and CLI tests."""
from __future__ import annotations

import threading

import pytest

from publicsuffix_lite.domain.rule import Rule
from publicsuffix_lite.rules.parser import parse_rules
from publicsuffix_lite.rules.provider import RuleProvider

PSL_TEXT = """\
// ===BEGIN ICANN DOMAINS===
com
uk
co.uk
*.ck
!www.ck
jp
*.kawasaki.jp
!city.kawasaki.jp
cn
公司.cn
// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===
github.io
// ===END PRIVATE DOMAINS===
"""


class CountingProvider(RuleProvider):
    """Provider that counts how many times rules were requested."""

    def __init__(self, rules: list[Rule], delay: threading.Event | None = None) -> None:
        self._rules = rules
        self._delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def load_rules(self) -> list[Rule]:
        with self._lock:
            self.calls += 1
        if self._delay is not None:
            self._delay.wait(timeout=5.0)
        return list(self._rules)


@pytest.fixture
def psl_rules() -> list[Rule]:
    return parse_rules(PSL_TEXT)


@pytest.fixture
def psl_file(tmp_path):
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(PSL_TEXT, encoding="utf-8")
    return path
