from .controller import CanvasSize, InteractionController
from .errors import PlaceClientError, RequestFailure
from .scheduling import CooldownHandle

__all__ = [
    "CanvasSize",
    "CooldownHandle",
    "InteractionController",
    "PlaceClientError",
    "RequestFailure",
]
