"""Timer sources for deferred game actions.

Anything with ``call_later(delay, callback)`` returning a handle with
``cancel()`` can drive the opponent and the match; an ``asyncio`` event
loop qualifies as-is. :class:`VirtualClock` is a deterministic stand-in
whose time only moves when :meth:`VirtualClock.advance` is called.
"""

from __future__ import annotations

import heapq
from typing import Callable, List, Protocol, Tuple


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerSource(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ScheduledCall:
    """A pending callback on a :class:`VirtualClock`."""

    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"ScheduledCall(when={self.when:.3f}, {state})"


class VirtualClock:
    """Single-threaded clock that fires callbacks in due-time order."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self.now + max(0.0, delay), callback)
        self._counter += 1
        heapq.heappush(self._queue, (call.when, self._counter, call))
        return call

    def advance(self, seconds: float) -> int:
        """Move time forward by ``seconds``, firing due callbacks; returns how many ran."""

        deadline = self.now + max(0.0, seconds)
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            when, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.now = when
            call.callback()
            fired += 1
        self.now = deadline
        return fired

    def run_until_idle(self, limit: int = 10_000) -> int:
        """Fire pending callbacks until none remain or ``limit`` have run."""

        fired = 0
        while fired < limit:
            self._discard_cancelled()
            if not self._queue:
                break
            fired += self.advance(self._queue[0][0] - self.now)
        return fired

    @property
    def pending(self) -> int:
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def _discard_cancelled(self) -> None:
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)
