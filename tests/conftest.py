from __future__ import annotations

from typing import Callable

import pytest


class FakeScheduler:
    def __init__(self) -> None:
        self._next_id = 0
        self._callbacks: dict[int, Callable[[], None]] = {}

    def schedule(self, callback: Callable[[], None]) -> int:
        self._next_id += 1
        self._callbacks[self._next_id] = callback
        return self._next_id

    def cancel(self, schedule_id: int) -> None:
        self._callbacks.pop(schedule_id, None)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def run_all(self) -> None:
        # Callbacks may schedule more work; keep going until idle.
        while self._callbacks:
            callbacks = list(self._callbacks.items())
            self._callbacks.clear()
            for _, callback in callbacks:
                callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()
