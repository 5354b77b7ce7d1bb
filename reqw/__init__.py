"""Classify HTTP request outcomes as success, HTTP error or transport error."""

from reqw.classifier import classify, is_success_status
from reqw.core import configure_logging, setup_logging
from reqw.errors import HttpStatusError, ReqwError, TransportFailureError
from reqw.exchange import arequest, asend, request, send
from reqw.outcome import RequestOutcome, Response, TransportFailure, acapture, capture
from reqw.result import ClassificationResult, HttpError, Success, TransportError

__version__ = "0.1.0"

__all__ = [
    "ClassificationResult",
    "HttpError",
    "HttpStatusError",
    "ReqwError",
    "RequestOutcome",
    "Response",
    "Success",
    "TransportError",
    "TransportFailure",
    "TransportFailureError",
    "acapture",
    "arequest",
    "asend",
    "capture",
    "classify",
    "configure_logging",
    "is_success_status",
    "request",
    "send",
    "setup_logging",
]
