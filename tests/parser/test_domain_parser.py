"""Tests for the DomainParser facade."""
from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from publicsuffix_lite.domain.rule import Rule
from publicsuffix_lite.domain_parser import DomainParser
from publicsuffix_lite.errors import DoubleBuildError, InvalidInputError, NotReadyError
from publicsuffix_lite.rules.provider import FileRuleProvider, StaticRuleProvider
from tests.parser.conftest import CountingProvider


class TestParse:

    @pytest.fixture
    def parser(self, psl_rules) -> DomainParser:
        return DomainParser.from_rules(psl_rules)

    def test_registrable_domain(self, parser):
        info = parser.parse("www.example.co.uk")
        assert info.normalized_host == "www.example.co.uk"
        assert info.public_suffix == "co.uk"
        assert info.registrable_domain == "example.co.uk"
        assert info.subdomain == "www"
        assert info.is_icann

    def test_url_and_case_normalized(self, parser):
        info = parser.parse("https://WWW.Example.CO.uk:8443/path?q=1")
        assert info.registrable_domain == "example.co.uk"

    def test_host_is_suffix_returns_none(self, parser):
        assert parser.parse("co.uk") is None
        assert parser.parse("com") is None
        assert parser.parse("foo.ck") is None

    def test_wildcard_and_exception(self, parser):
        assert parser.parse("bar.foo.ck").registrable_domain == "bar.foo.ck"
        assert parser.parse("www.ck") is None
        assert parser.parse("a.www.ck").registrable_domain == "www.ck"
        assert parser.parse("city.kawasaki.jp") is None
        assert parser.parse("a.city.kawasaki.jp").registrable_domain == "city.kawasaki.jp"
        assert parser.parse("a.b.kawasaki.jp").registrable_domain == "a.b.kawasaki.jp"

    def test_unlisted_tld_uses_last_two_labels(self, parser):
        info = parser.parse("www.example.example")
        assert info.public_suffix == "example"
        assert info.registrable_domain == "example.example"

    def test_private_division(self, parser):
        info = parser.parse("user.github.io")
        assert info.registrable_domain == "user.github.io"
        assert info.is_private

    def test_unicode_and_punycode_hosts_agree(self, parser):
        uni = parser.parse("www.食狮.公司.cn")
        puny = parser.parse("www.xn--85x722f.xn--55qx5d.cn")
        assert uni == puny
        assert uni.public_suffix == "公司.cn"
        assert uni.registrable_domain == "食狮.公司.cn"

    @pytest.mark.parametrize("host", ["", "   ", "example..com", ".example.com", "example.com.", "https://"])
    def test_invalid_hosts(self, parser, host):
        with pytest.raises(InvalidInputError):
            parser.parse(host)

    def test_match_labels(self, parser):
        result = parser.match_labels(["uk", "co", "example"])
        assert result.rule == Rule("co.uk")
        assert not result.host_is_suffix


class TestLifecycle:

    def test_not_ready_before_load(self, psl_rules):
        parser = DomainParser(StaticRuleProvider(psl_rules))
        assert not parser.is_ready
        with pytest.raises(NotReadyError):
            parser.parse("example.com")
        with pytest.raises(NotReadyError):
            _ = parser.trie

    def test_not_ready_checked_before_input(self):
        with pytest.raises(NotReadyError):
            DomainParser().parse("")

    def test_load_from_file(self, psl_file):
        parser = DomainParser(FileRuleProvider(psl_file))
        trie = parser.load()
        assert parser.is_ready
        assert parser.trie is trie
        assert trie.rule_count == 11
        assert parser.parse("example.com").registrable_domain == "example.com"

    def test_load_runs_provider_once(self, psl_rules):
        provider = CountingProvider(psl_rules)
        parser = DomainParser(provider)
        first = parser.load()
        assert parser.load() is first
        assert provider.calls == 1

    def test_load_without_provider(self):
        with pytest.raises(NotReadyError):
            DomainParser().load()

    def test_build_twice_fails(self, psl_rules):
        parser = DomainParser.from_rules(psl_rules)
        with pytest.raises(DoubleBuildError):
            parser.build([Rule("com")])

    def test_build_after_load_fails(self, psl_rules):
        parser = DomainParser(StaticRuleProvider(psl_rules))
        parser.load()
        with pytest.raises(DoubleBuildError):
            parser.build(psl_rules)

    def test_failed_load_can_be_retried(self, psl_rules):
        class FlakyProvider(StaticRuleProvider):
            attempts = 0

            def load_rules(self):
                FlakyProvider.attempts += 1
                if FlakyProvider.attempts == 1:
                    raise OSError("disk unavailable")
                return super().load_rules()

        parser = DomainParser(FlakyProvider(psl_rules))
        with pytest.raises(OSError):
            parser.load()
        assert not parser.is_ready
        parser.load()
        assert parser.is_ready


class TestConcurrency:

    def test_concurrent_loads_build_once(self, psl_rules):
        gate = threading.Event()
        provider = CountingProvider(psl_rules, delay=gate)
        parser = DomainParser(provider)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(parser.load) for _ in range(8)]
            gate.set()
            tries = [f.result(timeout=10.0) for f in futures]

        assert provider.calls == 1
        assert all(t is tries[0] for t in tries)

    def test_wait_ready(self, psl_rules):
        parser = DomainParser(StaticRuleProvider(psl_rules))
        loader = threading.Thread(target=parser.load)
        loader.start()
        trie = parser.wait_ready(timeout=5.0)
        loader.join(timeout=5.0)
        assert trie is parser.trie

    def test_1000_concurrent_lookups(self, psl_rules):
        parser = DomainParser.from_rules(psl_rules)
        nodes_before = parser.trie.node_count()

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: parser.parse("a.b.example.co.uk"), range(1000)))

        assert all(r == results[0] for r in results)
        assert results[0].registrable_domain == "example.co.uk"
        assert parser.trie.node_count() == nodes_before


class TestAsync:

    @pytest.mark.asyncio
    async def test_parse_async_loads_lazily(self, psl_rules):
        provider = CountingProvider(psl_rules)
        parser = DomainParser(provider)
        info = await parser.parse_async("www.example.co.uk")
        assert info.registrable_domain == "example.co.uk"
        assert parser.is_ready
        await parser.parse_async("example.com")
        assert provider.calls == 1

    @pytest.mark.asyncio
    async def test_concurrent_async_lookups_share_one_load(self, psl_rules):
        provider = CountingProvider(psl_rules)
        parser = DomainParser(provider)
        hosts = ["a.example.com", "b.example.co.uk", "www.ck", "co.uk"]
        results = await asyncio.gather(*(parser.parse_async(h) for h in hosts))
        assert provider.calls == 1
        assert [r.registrable_domain if r else None for r in results] == [
            "example.com", "example.co.uk", None, None,
        ]

    @pytest.mark.asyncio
    async def test_load_async_returns_published_trie(self, psl_rules):
        parser = DomainParser.from_rules(psl_rules)
        assert await parser.load_async() is parser.trie
