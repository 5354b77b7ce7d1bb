"""Exceptions raised when a classification result is unwrapped."""

from typing import Any


class ReqwError(Exception):
    """Base exception for unwrapped HTTP and transport failures."""

    pass


class HttpStatusError(ReqwError):
    """The server answered with a status outside the 2xx range."""

    def __init__(self, response: Any) -> None:
        self.response = response
        self.status_code = int(response.status_code)
        super().__init__(f"HTTP status {self.status_code}")


class TransportFailureError(ReqwError):
    """The exchange failed before a response was available."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f"Transport failure: {error!r}")


__all__ = ["HttpStatusError", "ReqwError", "TransportFailureError"]
