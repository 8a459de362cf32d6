"""One-shot deferred callbacks used by the game session."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class ManualTimer:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def fire(self) -> None:
        if not self._active:
            return
        self._active = False
        self._callback()


class ManualScheduler:
    """Virtual-clock scheduler: timers only fire when ``advance`` moves time forward.

    Timers due at the same instant fire in the order they were scheduled.
    Callbacks may schedule further timers; those fire within the same
    ``advance`` call if they fall due before its end.
    """

    def __init__(self) -> None:
        self._now_ms = 0
        self._queue: list[tuple[int, int, ManualTimer]] = []
        self._counter = itertools.count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._now_ms + max(0, int(delay_ms)), callback)
        heapq.heappush(self._queue, (timer.due_ms, next(self._counter), timer))
        return timer

    def pending(self) -> int:
        """Number of timers that are scheduled and not cancelled."""
        return sum(1 for _, _, timer in self._queue if timer.active)

    def advance(self, delta_ms: int) -> None:
        end = self._now_ms + max(0, int(delta_ms))
        while self._queue and self._queue[0][0] <= end:
            due, _, timer = heapq.heappop(self._queue)
            self._now_ms = due
            timer.fire()
        self._now_ms = end

    def run_all(self) -> None:
        """Fire every pending timer, including ones scheduled along the way."""
        while self._queue:
            due, _, timer = heapq.heappop(self._queue)
            self._now_ms = max(self._now_ms, due)
            timer.fire()
