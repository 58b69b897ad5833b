from __future__ import annotations

import logging
from functools import partial
from typing import NamedTuple

from place_client.protocol.constants import (
    FX_ERROR,
    FX_PLACE,
    FX_SELECT,
    FX_ZOOM_IN,
    FX_ZOOM_OUT,
)

from .errors import RequestFailure
from .scheduling import CooldownHandle, CooldownTimer, LoopScheduler, Scheduler
from .sinks import CameraSink, CanvasSink, FeedbackSink, IndicatorSink, RemoteService
from .smoothing import Smoothed, advance

logger = logging.getLogger(__name__)


class CanvasSize(NamedTuple):
    width: int
    height: int


def _finish_cooldown(controller: InteractionController, timer: CooldownTimer) -> None:
    # A superseded timer still resolves its own awaiters, but only the tracked
    # cooldown may reopen the gate.
    if controller._cooldown is timer:
        controller.cooldown_end_ms = min(controller.cooldown_end_ms, controller.scheduler.now_ms())
        controller.enable()
        controller._cooldown = None
    timer.resolve()


def _restore_color(controller: InteractionController, color: str) -> None:
    controller.select_color(color, announce=False)


class InteractionController:
    """
    Handles actions the local user takes.

    Owns the selected color and the draw cooldown, and smooths camera zoom/pan
    toward their targets once per `tick()`.
    """

    ZOOM_LERP_SPEED = 0.2
    PAN_LERP_SPEED = 0.4
    ZOOM_MAX_SCALE = 40
    ZOOM_MIN_SCALE = 4

    def __init__(
        self,
        *,
        server: RemoteService,
        camera: CameraSink,
        canvas: CanvasSink,
        hand: IndicatorSink,
        feedback: FeedbackSink,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.server = server
        self.camera = camera
        self.canvas = canvas
        self.hand = hand
        self.feedback = feedback
        self.scheduler = scheduler or LoopScheduler()

        self.enabled = True
        self.color: str | None = None
        self.cooldown_ms = 0
        self.cooldown_end_ms = 0.0
        self._cooldown: CooldownTimer | None = None

        self.is_zoomed_in = False
        self.zoom = Smoothed.at(1.0)
        self.pan_x = Smoothed.at(0.0)
        self.pan_y = Smoothed.at(0.0)

    async def initialize(
        self,
        is_enabled: bool,
        cooldown_ms: int,
        color: str | None = None,
        is_zoomed_in: bool | None = None,
        pan_x: float = 0,
        pan_y: float = 0,
    ) -> None:
        """
        Configure the session and learn the starting cooldown.

        - **is_enabled**: False for logged-out users; the gate then stays closed
        - **cooldown_ms**: wait imposed after each successful draw
        - **color**: saved color, restored silently once the gate first opens
        - **is_zoomed_in** / **pan_x** / **pan_y**: saved camera, applied without animation
        """
        if cooldown_ms < 0:
            raise ValueError("cooldown_ms must be >= 0")
        # Closed until the API tells us whether the user may draw.
        self.disable()
        self.cooldown_ms = cooldown_ms
        self.is_zoomed_in = True if is_zoomed_in is None else is_zoomed_in
        self.set_zoom(self.ZOOM_MAX_SCALE if self.is_zoomed_in else self.ZOOM_MIN_SCALE)
        self.set_offset(int(pan_x), int(pan_y))

        if not is_enabled:
            logger.debug("client disabled for this session")
            return

        try:
            wait_ms = await self.server.get_remaining_cooldown()
        except RequestFailure as e:
            # Something has gone wrong. Assume the user can draw.
            logger.warning("cooldown query failed, assuming no wait: %s", e)
            wait_ms = 0

        handle = self.start_cooldown(wait_ms)
        if color:
            handle.add_done_callback(partial(_restore_color, self, color))

    # cooldown

    def start_cooldown(self, duration_ms: float) -> CooldownHandle:
        """Close the gate for `duration_ms`; the returned handle resolves when it reopens."""
        duration_ms = max(0, duration_ms)
        self.cooldown_end_ms = self.scheduler.now_ms() + duration_ms
        self.disable()

        timer = CooldownTimer()
        self._cooldown = timer
        self.scheduler.call_later(duration_ms, partial(_finish_cooldown, self, timer))
        logger.debug("cooldown started: %.0f ms", duration_ms)
        return timer.handle

    def when_cooldown_ends(self) -> CooldownHandle:
        """
        Handle for the tracked cooldown, or an already-resolved one if none is running.

            await controller.when_cooldown_ends()
        """
        if self._cooldown is not None:
            return self._cooldown.handle
        return CooldownHandle.resolved()

    def remaining_cooldown_ms(self) -> float:
        return max(0, self.cooldown_end_ms - self.scheduler.now_ms())

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    # color / draw

    def select_color(self, color: str, announce: bool = True) -> None:
        if not self.enabled:
            if announce:
                self.feedback.play_event(FX_ERROR)
            return

        self.color = color
        self.hand.set_indicator_color(color)
        if announce:
            self.feedback.play_event(FX_SELECT)

    async def request_draw(self, x: int, y: int) -> bool:
        """
        Submit the current color at (x, y); the canvas is only written once the API accepts.

        Returns True if the tile was placed.
        """
        if not self.color or not self.enabled:
            self.feedback.play_event(FX_ERROR)
            return False

        color = self.color
        # No further draws until the request resolves.
        self.disable()
        in_flight = self._cooldown

        try:
            try:
                await self.server.submit_draw(x, y, color)
            except RequestFailure as e:
                self._on_draw_failed(e)
                return False
            self._on_draw_placed(x, y, color)
            return True
        finally:
            # Interrupted before either outcome started a cooldown: reopen the gate.
            if self._cooldown is in_flight and not self.enabled:
                self.start_cooldown(0)

    def _on_draw_placed(self, x: int, y: int, color: str) -> None:
        self.canvas.write_tile(x, y, color)
        self.feedback.play_event(FX_PLACE)
        self.hand.clear_indicator_color()
        self.color = None
        self.start_cooldown(self.cooldown_ms)

    def _on_draw_failed(self, e: RequestFailure) -> None:
        self.feedback.play_event(FX_ERROR)
        wait_seconds = e.wait_seconds or 0
        logger.info("draw rejected (%s); waiting %.1fs", e, wait_seconds)
        self.start_cooldown(wait_seconds * 1000)

    # camera

    def tick(self) -> None:
        """Advance zoom and pan one frame toward their targets."""
        if advance(self.zoom, self.ZOOM_LERP_SPEED):
            self.camera.apply_scale(self.zoom.current)

        moved_x = advance(self.pan_x, self.PAN_LERP_SPEED)
        moved_y = advance(self.pan_y, self.PAN_LERP_SPEED)
        if moved_x or moved_y:
            self.camera.apply_translate(self.pan_x.current, self.pan_y.current)

    def set_zoom(self, zoom_level: float) -> None:
        _check_zoom(zoom_level)
        self.zoom.snap(zoom_level)
        self.camera.apply_scale(self.zoom.current)

    def set_offset(self, x: float, y: float) -> None:
        self.pan_x.snap(x)
        self.pan_y.snap(y)
        self.camera.apply_translate(self.pan_x.current, self.pan_y.current)

    def set_target_zoom(self, zoom_level: float) -> None:
        _check_zoom(zoom_level)
        self.zoom.target = zoom_level

    def set_target_offset(self, x: float, y: float) -> None:
        self.pan_x.target = x
        self.pan_y.target = y

    def toggle_zoom(self) -> None:
        """Toggles between the two preset zoom levels."""
        if self.is_zoomed_in:
            self.set_target_zoom(self.ZOOM_MIN_SCALE)
            self.feedback.play_event(FX_ZOOM_OUT)
        else:
            self.set_target_zoom(self.ZOOM_MAX_SCALE)
            self.feedback.play_event(FX_ZOOM_IN)

        self.is_zoomed_in = not self.is_zoomed_in

    def get_canvas_size(self) -> CanvasSize:
        return CanvasSize(width=self.canvas.width, height=self.canvas.height)


def _check_zoom(zoom_level: float) -> None:
    if zoom_level <= 0:
        raise ValueError(f"zoom must be > 0, got {zoom_level}")
