from __future__ import annotations

import threading


class HitCounter:
    """
    Process-wide request counter.

    One instance lives in app.extensions["hit_counter"]; increments from
    concurrent request threads are serialized by a lock so none are lost.
    """

    def __init__(self, start: int = 0):
        self._lock = threading.Lock()
        self._value = start

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> int:
        """Set the count back to zero and return the previous value."""
        with self._lock:
            previous, self._value = self._value, 0
            return previous
