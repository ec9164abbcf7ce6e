"""Rule sources: where the rule sequence handed to the trie comes from.

All providers implement RuleProvider.load_rules(). The trie does not
care which one is used; DomainParser calls load_rules() once and
builds from the result.

CachedRuleProvider keeps a local copy of the public suffix list and
re-downloads it when the copy is missing or older than its TTL. A
failed download falls back to a stale copy when one exists. There is
no retry: a failure with no copy on disk is raised to the caller.

The cache file may be shared between processes (the default lives in
the temp dir). Refresh and read happen under a FileLock next to the
cache file, and a new list is written to a temp file and moved into
place with os.replace, so readers never see a half-written list.
"""
from __future__ import annotations

import logging
import os
import tempfile
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import timedelta
from pathlib import Path
from typing import Iterable, Iterator

import requests
from filelock import FileLock

from publicsuffix_lite.domain.rule import Rule
from publicsuffix_lite.errors import RuleSourceError
from publicsuffix_lite.rules.parser import parse_rules

log = logging.getLogger(__name__)

DEFAULT_LIST_URL = "https://publicsuffix.org/list/public_suffix_list.dat"
DEFAULT_CACHE_FILE = Path(tempfile.gettempdir()) / "public_suffix_list.dat"
DEFAULT_TTL = timedelta(days=1)
DEFAULT_TIMEOUT = 30.0  # seconds, per HTTP request
DEFAULT_LOCK_TIMEOUT = 60.0  # seconds to wait for another process refreshing the cache


class RuleProvider(ABC):
    """Interface for anything that can produce a finalized rule sequence."""

    @abstractmethod
    def load_rules(self) -> list[Rule]:
        """Return every rule, in list order."""
        ...


class StaticRuleProvider(RuleProvider):
    """Rules already in memory (tests, embedded lists)."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules = list(rules)

    def load_rules(self) -> list[Rule]:
        return list(self._rules)


class FileRuleProvider(RuleProvider):
    """Reads a rule list from a UTF-8 text file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_rules(self) -> list[Rule]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RuleSourceError(f"Cannot read rule file {self._path}: {exc}") from exc
        return parse_rules(text)


class CachedRuleProvider(RuleProvider):
    """Downloads the rule list and caches it on disk.

    Args:
        cache_file: Where the list is stored (default: temp dir).
        url: Where the list is downloaded from (default: publicsuffix.org).
        ttl: Age after which the cached copy is refreshed (default: 1 day).
        timeout: HTTP timeout in seconds.
        session: Optional requests.Session to reuse connections.
        lock_timeout: Seconds to wait for the cache lock held by another process.
    """

    def __init__(
        self,
        cache_file: str | Path | None = None,
        url: str | None = None,
        ttl: timedelta | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        lock_timeout: float | None = None,
    ) -> None:
        self._cache_file = Path(cache_file) if cache_file else DEFAULT_CACHE_FILE
        self._url = url or DEFAULT_LIST_URL
        self._ttl = ttl if ttl is not None else DEFAULT_TTL
        self._timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._session = session
        self._lock_timeout = lock_timeout if lock_timeout is not None else DEFAULT_LOCK_TIMEOUT
        self._lock = FileLock(f"{self._cache_file}.lock")

    @property
    def cache_file(self) -> Path:
        return self._cache_file

    @property
    def url(self) -> str:
        return self._url

    def must_refresh(self) -> bool:
        """True if the cache file is missing or older than the TTL."""
        try:
            mtime = self._cache_file.stat().st_mtime
        except FileNotFoundError:
            return True
        except OSError as exc:
            raise RuleSourceError(f"Cannot stat cache file {self._cache_file}: {exc}") from exc
        return mtime < time.time() - self._ttl.total_seconds()

    def refresh(self) -> None:
        """Download the list and replace the cache file.

        An empty response body leaves the existing file untouched, and so
        does a failed write.
        """
        log.info("Downloading public suffix list from %s", self._url)
        text = self._fetch()
        if not text:
            log.warning("Empty rule list from %s, keeping cached copy", self._url)
            return
        with self._locked():
            self._write(text)
        log.debug("Cached %d bytes at %s", len(text), self._cache_file)

    def load_rules(self) -> list[Rule]:
        with self._locked():
            if self.must_refresh():
                try:
                    self.refresh()
                except RuleSourceError:
                    if not self._cache_file.exists():
                        raise
                    log.warning(
                        "Refresh failed, using stale rule list at %s", self._cache_file
                    )
            return FileRuleProvider(self._cache_file).load_rules()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        """Hold the inter-process cache lock. FileLock is reentrant per instance."""
        try:
            self._cache_file.parent.mkdir(parents=True, exist_ok=True)
            self._lock.acquire(timeout=self._lock_timeout)
        except OSError as exc:
            raise RuleSourceError(f"Cannot lock cache file {self._cache_file}: {exc}") from exc
        try:
            yield
        finally:
            self._lock.release()

    def _write(self, text: str) -> None:
        """Write text to a temp file beside the cache, then swap it in."""
        directory = self._cache_file.parent
        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f"{self._cache_file.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_path, self._cache_file)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise RuleSourceError(f"Cannot write cache file {self._cache_file}: {exc}") from exc

    def _fetch(self) -> str:
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(self._url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RuleSourceError(f"Cannot download {self._url}: {exc}") from exc
        response.encoding = "utf-8"
        return response.text
