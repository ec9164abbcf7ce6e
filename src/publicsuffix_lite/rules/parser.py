"""Parser for the public suffix list text format.

Format (https://publicsuffix.org/list/):
  - one rule per line; only the text before the first whitespace counts
  - blank lines and lines starting with "//" are ignored
  - "*" as a label is a wildcard, a leading "!" marks an exception
  - "// ===BEGIN ICANN DOMAINS===" and "// ===BEGIN PRIVATE DOMAINS==="
    open the two sections of the list; "===END ..." closes them
"""
from __future__ import annotations

import logging
from typing import Iterable

from publicsuffix_lite.domain.rule import Rule, RuleDivision, RuleKind
from publicsuffix_lite.domain.types import EXCEPTION_MARKER, WILDCARD_LABEL
from publicsuffix_lite.errors import InvalidInputError
from publicsuffix_lite.normalize import canonical_label

log = logging.getLogger(__name__)

_COMMENT = "//"

_DIVISION_MARKERS = {
    "===BEGIN ICANN DOMAINS===": RuleDivision.ICANN,
    "===BEGIN PRIVATE DOMAINS===": RuleDivision.PRIVATE,
    "===END ICANN DOMAINS===": RuleDivision.UNKNOWN,
    "===END PRIVATE DOMAINS===": RuleDivision.UNKNOWN,
}


def parse_rule(text: str, division: RuleDivision = RuleDivision.UNKNOWN) -> Rule:
    """Parse a single rule such as "co.uk", "*.ck" or "!www.ck"."""
    token = text.strip().split(maxsplit=1)[0] if text.strip() else ""
    if not token:
        raise InvalidInputError("Rule is empty")

    kind = RuleKind.NORMAL
    if token.startswith(EXCEPTION_MARKER):
        kind = RuleKind.WILDCARD_EXCEPTION
        token = token[len(EXCEPTION_MARKER):]
        if not token:
            raise InvalidInputError("Exception rule has no pattern")

    labels = token.split(".")
    if any(label == "" for label in labels):
        raise InvalidInputError(f"Rule has an empty label: {text!r}")
    if kind is RuleKind.NORMAL and WILDCARD_LABEL in labels:
        kind = RuleKind.WILDCARD

    return Rule(
        tuple(canonical_label(label) for label in labels),
        kind=kind,
        division=division,
    )


def parse_rules(text: str | Iterable[str]) -> list[Rule]:
    """Parse a whole rule list. Accepts the full text or an iterable of lines."""
    lines = text.splitlines() if isinstance(text, str) else text
    division = RuleDivision.UNKNOWN
    rules: list[Rule] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(_COMMENT):
            marker = line[len(_COMMENT):].strip()
            division = _DIVISION_MARKERS.get(marker, division)
            continue
        try:
            rules.append(parse_rule(line, division))
        except InvalidInputError as exc:
            raise InvalidInputError(f"Line {lineno}: {exc}") from exc

    log.debug("Parsed %d rules", len(rules))
    return rules
