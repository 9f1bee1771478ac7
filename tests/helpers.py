from __future__ import annotations

from typing import Callable, List, Tuple


class FakeSettings:
    def __init__(self, pool: int = 15, max_persistent: int = 5) -> None:
        self.values = {"notificationsPool": pool, "maxPersistentAllow": max_persistent}
        self.reads: List[str] = []

    def get_value(self, name: str) -> int:
        self.reads.append(name)
        return self.values[name]


class ManualScheduler:
    """Collects scheduled callbacks and runs them when the test advances time."""

    def __init__(self) -> None:
        self.now = 0
        self.jobs: List[Tuple[int, Callable, tuple, dict]] = []

    def schedule(self, delay_ms, func, *args, **kwargs):
        job = (self.now + delay_ms, func, args, kwargs)
        self.jobs.append(job)
        return job

    def advance(self, ms: int) -> None:
        self.now += ms
        due = [j for j in self.jobs if j[0] <= self.now]
        self.jobs = [j for j in self.jobs if j[0] > self.now]
        for _, func, args, kwargs in sorted(due, key=lambda j: j[0]):
            func(*args, **kwargs)

    def cancel_all(self) -> None:
        self.jobs.clear()
