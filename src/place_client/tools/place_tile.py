from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from place_client.client.api import PlaceApi
from place_client.client.config import get_settings
from place_client.client.controller import InteractionController
from place_client.client.frame_loop import run_frames
from place_client.client.sinks import CameraTransform, CursorHand, ImageCanvas, LogFeedback


async def place_tile(
    x: int,
    y: int,
    color: str,
    *,
    out_path: Path | None = None,
    wait: bool = True,
) -> bool:
    """
    Draw a single tile through the interaction controller.

    Waits out any running cooldown first (unless `wait` is False). Returns True
    if the tile was placed.
    """
    settings = get_settings()
    canvas = ImageCanvas(settings.canvas_width, settings.canvas_height)
    feedback = LogFeedback()

    async with PlaceApi(settings.api_base_url, timeout_s=settings.request_timeout_s) as api:
        controller = InteractionController(
            server=api,
            camera=CameraTransform(),
            canvas=canvas,
            hand=CursorHand(),
            feedback=feedback,
        )
        stop = asyncio.Event()
        placed = False
        frames = asyncio.create_task(run_frames(controller, fps=settings.frame_rate_hz, stop=stop))
        try:
            await controller.initialize(True, settings.cooldown_ms)
            remaining = controller.remaining_cooldown_ms()
            if remaining and not wait:
                print(f"[place] cooling down for another {remaining / 1000:.1f}s")
                return False
            if remaining:
                print(f"[place] waiting {remaining / 1000:.1f}s for cooldown")
            await controller.when_cooldown_ends()

            controller.select_color(color)
            placed = await controller.request_draw(x, y)
        finally:
            stop.set()
            await frames

    if placed and out_path is not None:
        canvas.save(out_path)
    return placed


def main() -> None:
    ap = argparse.ArgumentParser(description="Place one tile on the shared canvas.")
    ap.add_argument("--x", type=int, required=True, help="Tile column")
    ap.add_argument("--y", type=int, required=True, help="Tile row")
    ap.add_argument("--color", required=True, help="Hex color, e.g. '#ff4500'")
    ap.add_argument("--out", default=None, help="If set, save the local canvas mirror as PNG here")
    ap.add_argument("--no-wait", action="store_true", help="Exit instead of waiting out a cooldown")
    args = ap.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug_log_msgs else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    placed = asyncio.run(
        place_tile(
            args.x,
            args.y,
            args.color,
            out_path=Path(args.out) if args.out else None,
            wait=not args.no_wait,
        )
    )
    print(f"[place] {'placed' if placed else 'not placed'} {args.color} at ({args.x}, {args.y})")
    raise SystemExit(0 if placed else 1)


if __name__ == "__main__":
    main()
