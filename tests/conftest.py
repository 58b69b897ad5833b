# tests/conftest.py
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable

import pytest


def pytest_configure() -> None:
    # Ensure `src/` is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ManualScheduler:
    """Simulated clock; timers fire only when the test advances time."""

    def __init__(self, now_ms: float = 1_000_000.0) -> None:
        self.now = now_ms
        self._seq = 0
        self._timers: list[tuple[float, int, Callable[[], None]]] = []

    def now_ms(self) -> float:
        return self.now

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        self._seq += 1
        self._timers.append((self.now + max(0.0, delay_ms), self._seq, callback))

    @property
    def pending(self) -> int:
        return len(self._timers)

    def advance(self, ms: float) -> None:
        target = self.now + ms
        while True:
            due = [t for t in self._timers if t[0] <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t[0], t[1]))
            self._timers.remove(timer)
            self.now = timer[0]
            timer[2]()
        self.now = target


class FakeRemote:
    """Scripted place API. Set `draw_future` to hold a draw response open."""

    def __init__(self) -> None:
        self.wait_ms: int = 0
        self.query_error: Exception | None = None
        self.draw_error: Exception | None = None
        self.draw_future: asyncio.Future | None = None
        self.draw_calls: list[tuple[int, int, str]] = []
        self.query_calls = 0

    async def get_remaining_cooldown(self) -> int:
        self.query_calls += 1
        if self.query_error is not None:
            raise self.query_error
        return self.wait_ms

    async def submit_draw(self, x: int, y: int, color: str) -> None:
        self.draw_calls.append((x, y, color))
        if self.draw_future is not None:
            await self.draw_future
        if self.draw_error is not None:
            raise self.draw_error


class RecordingCamera:
    def __init__(self) -> None:
        self.scales: list[float] = []
        self.translates: list[tuple[float, float]] = []

    def apply_scale(self, value: float) -> None:
        self.scales.append(value)

    def apply_translate(self, x: float, y: float) -> None:
        self.translates.append((x, y))


class RecordingCanvas:
    width = 1000
    height = 800

    def __init__(self) -> None:
        self.tiles: list[tuple[int, int, str]] = []

    def write_tile(self, x: int, y: int, color: str) -> None:
        self.tiles.append((x, y, color))


class RecordingHand:
    def __init__(self) -> None:
        self.color: str | None = None
        self.updates: list[str | None] = []

    def set_indicator_color(self, color: str) -> None:
        self.color = color
        self.updates.append(color)

    def clear_indicator_color(self) -> None:
        self.color = None
        self.updates.append(None)


class RecordingFeedback:
    def __init__(self) -> None:
        self.events: list[str] = []

    def play_event(self, kind: str) -> None:
        self.events.append(kind)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def camera() -> RecordingCamera:
    return RecordingCamera()


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def hand() -> RecordingHand:
    return RecordingHand()


@pytest.fixture
def feedback() -> RecordingFeedback:
    return RecordingFeedback()


@pytest.fixture
def controller(scheduler, remote, camera, canvas, hand, feedback):
    from place_client.client.controller import InteractionController

    return InteractionController(
        server=remote,
        camera=camera,
        canvas=canvas,
        hand=hand,
        feedback=feedback,
        scheduler=scheduler,
    )
