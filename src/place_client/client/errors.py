from __future__ import annotations


class PlaceClientError(Exception):
    """Base class for errors raised by the place client."""


class RequestFailure(PlaceClientError):
    """
    A call to the place API failed.

    `wait_seconds` is the rate-limit hint from the failed response, or None
    when the response carried none (transport errors, unparseable bodies).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        wait_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.wait_seconds = wait_seconds
