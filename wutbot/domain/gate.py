"""Concurrency gate: fixed-capacity, non-blocking token pool."""

import threading
from contextlib import contextmanager
from typing import Iterator

DEFAULT_CAPACITY = 128


class GateReleaseError(RuntimeError):
    """release() called with no outstanding token."""
    pass


class ConcurrencyGate:
    """Bounds in-flight actions. Safe to share between engine threads."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"gate capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._outstanding = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def outstanding(self) -> int:
        with self._lock:
            return self._outstanding

    def try_acquire(self) -> bool:
        """Take a token if one is free. Never blocks."""
        with self._lock:
            if self._outstanding >= self._capacity:
                return False
            self._outstanding += 1
            return True

    def release(self) -> None:
        with self._lock:
            if self._outstanding == 0:
                raise GateReleaseError("release without matching acquire")
            self._outstanding -= 1

    @contextmanager
    def slot(self) -> Iterator[bool]:
        """Yield whether a token was acquired; a held token is always returned."""
        acquired = self.try_acquire()
        try:
            yield acquired
        finally:
            if acquired:
                self.release()
