"""Three-way classification of a finished HTTP exchange.

Example:
    ```python
    import httpx

    from reqw import capture, classify

    result = classify(capture(httpx.get, "https://example.com"))
    assert result.is_success
    ```
"""

from reqw.outcome import RequestOutcome, Response, TransportFailure
from reqw.result import ClassificationResult, HttpError, Success, TransportError

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 299


def is_success_status(status_code: int) -> bool:
    """Check whether a status code is in the 2xx range (200-299 inclusive)."""
    return SUCCESS_STATUS_MIN <= int(status_code) <= SUCCESS_STATUS_MAX


def classify(outcome: RequestOutcome) -> ClassificationResult:
    """Re-tag a request outcome as Success, HttpError or TransportError.

    Pure and total over RequestOutcome: only the status code is looked at, and
    the wrapped response or error is handed over as the same object.

    Raises:
        TypeError: If ``outcome`` is not a Response or TransportFailure.
    """
    if isinstance(outcome, TransportFailure):
        return TransportError(outcome.error)
    if isinstance(outcome, Response):
        if is_success_status(outcome.response.status_code):
            return Success(outcome.response)
        return HttpError(outcome.response)
    raise TypeError(f"Expected Response or TransportFailure, got {type(outcome).__name__}")


__all__ = ["SUCCESS_STATUS_MAX", "SUCCESS_STATUS_MIN", "classify", "is_success_status"]
