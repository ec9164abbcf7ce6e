"""Single-assignment readiness gate.

A gate starts empty and is published exactly once. Readers either get
the published value or an error; they never see a half-built value,
because publish() stores a fully constructed object in one step.

Usage:
    gate: ReadyGate[RuleTrie] = ReadyGate()

    gate.publish(build_trie(rules))   # once, from the loader

    trie = gate.get()                  # NotReadyError if not published
    trie = gate.wait(timeout=5.0)      # block until published

After publication get() only reads one attribute, so lookups never
take the lock.
"""
from __future__ import annotations

import threading
from typing import Generic, TypeVar

from publicsuffix_lite.errors import DoubleBuildError, NotReadyError

T = TypeVar("T")


class ReadyGate(Generic[T]):
    """Holds a value that becomes available exactly once."""

    def __init__(self) -> None:
        self._value: T | None = None
        self._ready = threading.Event()
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    def publish(self, value: T) -> None:
        """Set the value. A second publish raises DoubleBuildError."""
        with self._lock:
            if self._ready.is_set():
                raise DoubleBuildError("Gate has already been published")
            self._value = value
            self._ready.set()

    def get(self) -> T:
        """Return the published value without blocking."""
        if not self._ready.is_set():
            raise NotReadyError("Rules are not loaded yet")
        return self._value  # type: ignore[return-value]

    def wait(self, timeout: float | None = None) -> T:
        """Block until published. Raises NotReadyError on timeout."""
        if not self._ready.wait(timeout):
            raise NotReadyError(f"Rules not loaded within {timeout} seconds")
        return self._value  # type: ignore[return-value]
