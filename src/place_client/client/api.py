from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from place_client.protocol.constants import API_DRAW, API_TIME_TO_WAIT
from place_client.protocol.messages import DrawBody, DrawError, TimeToWait

from .errors import RequestFailure

logger = logging.getLogger(__name__)


def _parse_draw_error(resp: httpx.Response) -> DrawError:
    """Best-effort parse of an error body; unknown shapes yield an empty DrawError."""
    try:
        return DrawError.model_validate(resp.json())
    except (ValueError, ValidationError):
        return DrawError()


class PlaceApi:
    """
    Async client for the place endpoints.

    - **get_remaining_cooldown**: ms the user still has to wait before drawing
    - **submit_draw**: place one tile; raises RequestFailure on any rejection
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_s,
            transport=transport,
        )

    async def __aenter__(self) -> PlaceApi:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise RequestFailure(f"place API unreachable: {e}") from e

        if resp.is_error:
            err = _parse_draw_error(resp)
            logger.debug("%s %s -> %s %s", method, path, resp.status_code, err)
            raise RequestFailure(
                err.error or f"HTTP {resp.status_code}",
                status_code=resp.status_code,
                wait_seconds=err.wait_seconds,
            )
        return resp

    async def get_remaining_cooldown(self) -> int:
        resp = await self._request("GET", API_TIME_TO_WAIT)
        try:
            body = TimeToWait.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise RequestFailure(f"place API bad response: {e}", status_code=resp.status_code) from e
        return int(body.wait_seconds * 1000)

    async def submit_draw(self, x: int, y: int, color: str) -> None:
        try:
            body = DrawBody(x=x, y=y, color=color)
        except ValidationError as e:
            raise RequestFailure(f"invalid draw request: {e}") from e
        await self._request("POST", API_DRAW, data=body.model_dump())
