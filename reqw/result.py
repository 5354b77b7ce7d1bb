"""Classification results: success, HTTP-level failure, transport-level failure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NoReturn

from reqw.errors import HttpStatusError, TransportFailureError


@dataclass(frozen=True, slots=True)
class Success:
    """Response with a status code in [200, 299]."""

    response: Any

    @property
    def is_success(self) -> bool:
        """Always True."""
        return True

    def unwrap(self) -> Any:
        """Return the wrapped response."""
        return self.response


@dataclass(frozen=True, slots=True)
class HttpError:
    """Response with a status code outside [200, 299].

    The response is kept as-is so status, headers and body stay inspectable.
    """

    response: Any

    @property
    def is_success(self) -> bool:
        """Always False."""
        return False

    @property
    def status_code(self) -> int:
        """Status code of the wrapped response."""
        return int(self.response.status_code)

    def unwrap(self) -> NoReturn:
        """Raise HttpStatusError carrying the response."""
        raise HttpStatusError(self.response)


@dataclass(frozen=True, slots=True)
class TransportError:
    """Transport failure, error value passed through unchanged."""

    error: Any

    @property
    def is_success(self) -> bool:
        """Always False."""
        return False

    def unwrap(self) -> NoReturn:
        """Raise TransportFailureError, chained to the original exception if there is one."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise TransportFailureError(self.error) from cause


ClassificationResult = Success | HttpError | TransportError


__all__ = ["ClassificationResult", "HttpError", "Success", "TransportError"]
