from .constants import (
    API_DRAW,
    API_TIME_TO_WAIT,
    FEEDBACK_KINDS,
    FX_ERROR,
    FX_PLACE,
    FX_SELECT,
    FX_ZOOM_IN,
    FX_ZOOM_OUT,
)

__all__ = [
    "API_DRAW",
    "API_TIME_TO_WAIT",
    "FEEDBACK_KINDS",
    "FX_ERROR",
    "FX_PLACE",
    "FX_SELECT",
    "FX_ZOOM_IN",
    "FX_ZOOM_OUT",
]
