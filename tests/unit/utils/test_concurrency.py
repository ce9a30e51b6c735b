"""
Unit tests for the synchronized decorator.
"""

import threading

from smart_home.utils.concurrency import synchronized


class _Counter:
    def __init__(self, with_lock=True):
        if with_lock:
            self._lock = threading.Lock()
        self.value = 0
        self.lock_held = []

    @synchronized
    def increment(self):
        lock = getattr(self, "_lock", None)
        self.lock_held.append(lock.locked() if lock is not None else None)
        self.value += 1
        return self.value


def test_lock_is_held_during_call():
    counter = _Counter()
    assert counter.increment() == 1
    assert counter.lock_held == [True]
    assert not counter._lock.locked()


def test_runs_without_lock():
    counter = _Counter(with_lock=False)
    assert counter.increment() == 1
    assert counter.lock_held == [None]


def test_preserves_function_metadata():
    assert _Counter.increment.__name__ == "increment"
