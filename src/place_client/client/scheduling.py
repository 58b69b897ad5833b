from __future__ import annotations

import asyncio
import time
from typing import Callable, Protocol


class Scheduler(Protocol):
    def now_ms(self) -> float: ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> object: ...


class LoopScheduler:
    """Monotonic time plus one-shot timers on the running asyncio loop (same clock)."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay_ms) / 1000.0, callback)


class CooldownHandle:
    """
    Read-only view of a cooldown's completion.

    Awaitable; also supports plain callbacks for code that is not a coroutine.
    """

    def __init__(self, timer: CooldownTimer) -> None:
        self._timer = timer

    @classmethod
    def resolved(cls) -> CooldownHandle:
        timer = CooldownTimer()
        timer.resolve()
        return timer.handle

    def done(self) -> bool:
        return self._timer.is_resolved

    def add_done_callback(self, fn: Callable[[], None]) -> None:
        self._timer.subscribe(fn)

    async def wait(self) -> None:
        await self._timer.event.wait()

    def __await__(self):
        return self.wait().__await__()


class CooldownTimer:
    """Completion event owned by the controller; only the owner resolves it."""

    def __init__(self) -> None:
        self.event = asyncio.Event()
        self._callbacks: list[Callable[[], None]] = []
        self.handle = CooldownHandle(self)

    @property
    def is_resolved(self) -> bool:
        return self.event.is_set()

    def subscribe(self, fn: Callable[[], None]) -> None:
        if self.is_resolved:
            fn()
        else:
            self._callbacks.append(fn)

    def resolve(self) -> None:
        if self.is_resolved:
            return
        self.event.set()
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn()
