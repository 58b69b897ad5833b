from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageColor

from place_client.protocol.constants import FEEDBACK_KINDS

logger = logging.getLogger(__name__)


# Collaborator interfaces the controller talks to.


class RemoteService(Protocol):
    async def get_remaining_cooldown(self) -> int: ...

    async def submit_draw(self, x: int, y: int, color: str) -> None: ...


class CameraSink(Protocol):
    def apply_scale(self, value: float) -> None: ...

    def apply_translate(self, x: float, y: float) -> None: ...


class CanvasSink(Protocol):
    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def write_tile(self, x: int, y: int, color: str) -> None: ...


class IndicatorSink(Protocol):
    def set_indicator_color(self, color: str) -> None: ...

    def clear_indicator_color(self) -> None: ...


class FeedbackSink(Protocol):
    def play_event(self, kind: str) -> None: ...


# Reference implementations, usable headless.


class ImageCanvas:
    """Local mirror of the board as a Pillow RGB image, one pixel per tile."""

    def __init__(self, width: int, height: int, background: str = "#ffffff") -> None:
        self.image = Image.new("RGB", (width, height), ImageColor.getrgb(background))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def write_tile(self, x: int, y: int, color: str) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} canvas")
        self.image.putpixel((x, y), ImageColor.getrgb(color))

    def tile_at(self, x: int, y: int) -> tuple[int, int, int]:
        return self.image.getpixel((x, y))

    def to_png_b64(self) -> str:
        """PNG snapshot, base64 with no data-url prefix."""
        bio = io.BytesIO()
        self.image.save(bio, format="PNG", optimize=True)
        return base64.b64encode(bio.getvalue()).decode("ascii")

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path, format="PNG")


@dataclass
class CameraTransform:
    scale: float = 1.0
    translate: tuple[float, float] = (0.0, 0.0)

    def apply_scale(self, value: float) -> None:
        self.scale = value

    def apply_translate(self, x: float, y: float) -> None:
        self.translate = (x, y)


@dataclass
class CursorHand:
    color: str | None = None

    def set_indicator_color(self, color: str) -> None:
        self.color = color

    def clear_indicator_color(self) -> None:
        self.color = None


@dataclass
class LogFeedback:
    """Stands in for the sound player: logs each event kind."""

    history: list[str] = field(default_factory=list)

    def play_event(self, kind: str) -> None:
        if kind not in FEEDBACK_KINDS:
            raise ValueError(f"unknown feedback kind: {kind!r}")
        self.history.append(kind)
        logger.info("feedback: %s", kind)
