"""Request outcomes: what an HTTP client hands back after an exchange.

An exchange ends either with a response object or with a transport failure,
never both and never neither. ``capture`` and ``acapture`` turn an httpx call
into one of the two variants so callers don't have to write the try/except.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True, slots=True)
class Response:
    """The exchange completed and produced a response.

    The wrapped object only needs a ``status_code`` attribute; ``httpx.Response``
    and ``requests.Response`` both qualify.
    """

    response: Any


@dataclass(frozen=True, slots=True)
class TransportFailure:
    """The exchange failed at the transport level (DNS, connect, TLS, protocol)."""

    error: Any


RequestOutcome = Response | TransportFailure


def capture(func: Callable[..., Any], *args: Any, **kwargs: Any) -> RequestOutcome:
    """Call ``func`` and wrap what it returns or raises.

    Only ``httpx.TransportError`` counts as a transport failure. Anything else
    raised (an invalid URL, a bug in the caller) propagates unchanged.
    """
    try:
        response = func(*args, **kwargs)
    except httpx.TransportError as exc:
        return TransportFailure(exc)
    return Response(response)


async def acapture(awaitable: Awaitable[Any]) -> RequestOutcome:
    """Await ``awaitable`` and wrap what it returns or raises."""
    try:
        response = await awaitable
    except httpx.TransportError as exc:
        return TransportFailure(exc)
    return Response(response)


__all__ = ["RequestOutcome", "Response", "TransportFailure", "acapture", "capture"]
