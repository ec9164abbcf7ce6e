"""Publication primitives shared between the loader and lookups."""
from publicsuffix_lite.concurrency.ready_gate import ReadyGate

__all__ = ["ReadyGate"]
