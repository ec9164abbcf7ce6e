"""Host normalization: arbitrary host or URL -> canonical labels.

The matcher only accepts non-empty, lower-cased labels. This module
turns user input into that form:

    "WWW.Example.CO.UK"            -> ("www", "example", "co", "uk")
    "https://shop.example.com/x"   -> ("shop", "example", "com")
    "xn--85x722f.xn--55qx5d.cn"    -> ("食狮", "公司", "cn")

Punycode labels are decoded to Unicode because the public suffix list
is published in Unicode. Anything that cannot be turned into labels
raises InvalidInputError before the matcher is reached.
"""
from __future__ import annotations

from urllib.parse import urlsplit

import idna

from publicsuffix_lite.errors import InvalidInputError

_ACE_PREFIX = "xn--"


def canonical_label(label: str) -> str:
    """Lower-case a label and decode it if it is punycode."""
    lowered = label.lower()
    if lowered.startswith(_ACE_PREFIX):
        try:
            return idna.decode(lowered)
        except (idna.IDNAError, UnicodeError, IndexError) as exc:
            raise InvalidInputError(f"Invalid punycode label: {label!r}") from exc
    return lowered


def normalize_host(host: str) -> tuple[str, ...]:
    """Return canonical host labels, left to right."""
    if not host or not host.strip():
        raise InvalidInputError("Host is empty")

    candidate = host.strip()
    if "://" not in candidate:
        candidate = "https://" + candidate
    try:
        hostname = urlsplit(candidate).hostname
    except ValueError as exc:
        raise InvalidInputError(f"Cannot parse host from {host!r}") from exc
    if not hostname:
        raise InvalidInputError(f"No host in {host!r}")

    labels = hostname.split(".")
    if any(label == "" for label in labels):
        raise InvalidInputError(f"Host has an empty label: {hostname!r}")
    return tuple(canonical_label(label) for label in labels)


def host_labels(host: str) -> tuple[str, ...]:
    """Canonical labels ordered rightmost-first, the order the matcher walks."""
    return normalize_host(host)[::-1]
