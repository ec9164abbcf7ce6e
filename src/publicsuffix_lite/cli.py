"""publicsuffix-lite CLI entry point.

Usage: publicsuffix-lite [command]

    publicsuffix-lite lookup www.example.co.uk
    publicsuffix-lite lookup --rules ./public_suffix_list.dat a.b.ck
    publicsuffix-lite stats
"""
import argparse
import logging
import sys
from datetime import timedelta

from publicsuffix_lite.domain_parser import DomainParser
from publicsuffix_lite.errors import InvalidInputError, PublicSuffixError
from publicsuffix_lite.normalize import normalize_host
from publicsuffix_lite.rules.provider import (
    DEFAULT_LIST_URL,
    CachedRuleProvider,
    FileRuleProvider,
    RuleProvider,
)


def _add_source_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--rules", default=None,
        help="Read rules from this file instead of downloading them.",
    )
    p.add_argument(
        "--url", default=DEFAULT_LIST_URL,
        help=f"Rule list URL (default: {DEFAULT_LIST_URL})",
    )
    p.add_argument(
        "--cache", default=None,
        help="Cache file for the downloaded list (default: temp dir)",
    )
    p.add_argument(
        "--ttl", type=float, default=24.0,
        help="Refresh the cached list after this many hours (default: 24)",
    )


def _add_lookup_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "lookup",
        help="Print public suffix and registrable domain for each host.",
    )
    p.add_argument("hosts", nargs="+", help="Host names or URLs")
    _add_source_arguments(p)


def _add_stats_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "stats",
        help="Print rule and trie node counts for the loaded list.",
    )
    _add_source_arguments(p)


def _make_provider(args: argparse.Namespace) -> RuleProvider:
    if args.rules:
        return FileRuleProvider(args.rules)
    return CachedRuleProvider(
        cache_file=args.cache,
        url=args.url,
        ttl=timedelta(hours=args.ttl),
    )


def _run_lookup(parser: DomainParser, hosts: list[str]) -> int:
    status = 0
    for host in hosts:
        try:
            info = parser.parse(host)
        except InvalidInputError as exc:
            print(f"{host}: {exc}", file=sys.stderr)
            status = 1
            continue
        if info is None:
            suffix = ".".join(normalize_host(host))
            print(f"{suffix}\t{suffix}\t-")
        else:
            print(f"{info.normalized_host}\t{info.public_suffix}\t{info.registrable_domain}")
    return status


def _run_stats(parser: DomainParser) -> None:
    trie = parser.trie
    print(f"rules: {trie.rule_count}")
    print(f"nodes: {trie.node_count()}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="publicsuffix-lite",
        description="Public suffix and registrable domain lookup.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log rule loading details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_lookup_parser(subparsers)
    _add_stats_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    domains = DomainParser(_make_provider(args))
    try:
        domains.load()
    except PublicSuffixError as exc:
        print(f"Cannot load rules: {exc}", file=sys.stderr)
        return 1

    if args.command == "lookup":
        return _run_lookup(domains, args.hosts)
    if args.command == "stats":
        _run_stats(domains)
    return 0


if __name__ == "__main__":
    sys.exit(main())
