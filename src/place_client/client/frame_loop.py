from __future__ import annotations

import asyncio
import time

from .controller import InteractionController


def _now() -> float:
    return time.perf_counter()


async def run_frames(
    controller: InteractionController,
    *,
    fps: float = 60.0,
    stop: asyncio.Event | None = None,
) -> int:
    """Call `controller.tick()` once per frame until `stop` is set. Returns frames ticked."""
    frame_dt = 1.0 / max(1.0, fps)
    frames = 0
    while stop is None or not stop.is_set():
        started = _now()
        controller.tick()
        frames += 1
        # keep cadence; never sleep negative
        await asyncio.sleep(max(0.0, frame_dt - (_now() - started)))
    return frames
