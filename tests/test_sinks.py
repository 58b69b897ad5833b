from __future__ import annotations

import base64

import pytest

from place_client.client.sinks import CameraTransform, CursorHand, ImageCanvas, LogFeedback


def test_image_canvas_writes_tiles() -> None:
    canvas = ImageCanvas(8, 4)
    assert (canvas.width, canvas.height) == (8, 4)
    assert canvas.tile_at(2, 3) == (255, 255, 255)

    canvas.write_tile(2, 3, "#ff4500")
    assert canvas.tile_at(2, 3) == (255, 69, 0)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (8, 0), (0, 4)])
def test_image_canvas_rejects_out_of_bounds(x, y) -> None:
    with pytest.raises(IndexError):
        ImageCanvas(8, 4).write_tile(x, y, "#000000")


def test_image_canvas_png_snapshot() -> None:
    raw = base64.b64decode(ImageCanvas(2, 2).to_png_b64())
    assert raw.startswith(b"\x89PNG")


def test_image_canvas_save(tmp_path) -> None:
    out = tmp_path / "nested" / "board.png"
    ImageCanvas(2, 2).save(out)
    assert out.read_bytes().startswith(b"\x89PNG")


def test_camera_and_hand_hold_last_value() -> None:
    camera = CameraTransform()
    camera.apply_scale(4)
    camera.apply_translate(1, 2)
    assert camera.scale == 4
    assert camera.translate == (1, 2)

    hand = CursorHand()
    hand.set_indicator_color("#fff")
    assert hand.color == "#fff"
    hand.clear_indicator_color()
    assert hand.color is None


def test_log_feedback_records_known_kinds(caplog) -> None:
    fx = LogFeedback()
    with caplog.at_level("INFO"):
        fx.play_event("place")
    assert fx.history == ["place"]
    assert "feedback: place" in caplog.text

    with pytest.raises(ValueError):
        fx.play_event("boing")


@pytest.mark.asyncio
async def test_controller_draws_onto_image_canvas(controller) -> None:
    canvas = ImageCanvas(16, 16)
    controller.canvas = canvas
    controller.select_color("#00ff00")
    await controller.request_draw(5, 6)

    assert canvas.tile_at(5, 6) == (0, 255, 0)
    assert controller.get_canvas_size() == (16, 16)
