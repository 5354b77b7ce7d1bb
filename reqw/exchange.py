"""Perform an exchange through an httpx client and classify the outcome.

The client instance owns timeouts, retries and connection pooling; these
helpers only capture what it returns or raises, classify it and log one event.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from reqw.classifier import classify
from reqw.core.config import Settings, get_settings
from reqw.outcome import acapture, capture
from reqw.result import ClassificationResult, HttpError, Success, TransportError

logger = structlog.get_logger(__name__)


def _log_result(
    result: ClassificationResult, method: str, url: str, settings: Settings | None
) -> None:
    """Log a classified exchange unless outcome logging is turned off."""
    if settings is None:
        settings = get_settings()
    if not settings.log_outcomes:
        return

    if isinstance(result, Success):
        logger.debug(
            "HTTP exchange succeeded",
            method=method,
            url=url,
            status_code=result.response.status_code,
        )
    elif isinstance(result, HttpError):
        logger.warning(
            "HTTP error response",
            method=method,
            url=url,
            status_code=result.status_code,
        )
    elif isinstance(result, TransportError):
        logger.warning(
            "HTTP transport failure",
            method=method,
            url=url,
            error=str(result.error),
            error_type=type(result.error).__name__,
        )


def send(
    client: httpx.Client, request: httpx.Request, *, settings: Settings | None = None
) -> ClassificationResult:
    """Send a prepared request and classify the outcome.

    Args:
        client: Client used for the exchange.
        request: Request built with ``client.build_request``.
        settings: Optional settings; the cached global settings are used if omitted.

    Returns:
        Success, HttpError or TransportError.
    """
    result = classify(capture(client.send, request))
    _log_result(result, request.method, str(request.url), settings)
    return result


async def asend(
    client: httpx.AsyncClient, request: httpx.Request, *, settings: Settings | None = None
) -> ClassificationResult:
    """Async counterpart of :func:`send`."""
    result = classify(await acapture(client.send(request)))
    _log_result(result, request.method, str(request.url), settings)
    return result


def request(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    settings: Settings | None = None,
    **kwargs: Any,
) -> ClassificationResult:
    """Issue ``client.request(method, url, **kwargs)`` and classify the outcome."""
    result = classify(capture(client.request, method, url, **kwargs))
    _log_result(result, method.upper(), url, settings)
    return result


async def arequest(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    settings: Settings | None = None,
    **kwargs: Any,
) -> ClassificationResult:
    """Async counterpart of :func:`request`."""
    result = classify(await acapture(client.request(method, url, **kwargs)))
    _log_result(result, method.upper(), url, settings)
    return result


__all__ = ["arequest", "asend", "request", "send"]
