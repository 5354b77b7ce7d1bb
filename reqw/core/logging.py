"""Logging setup: structlog events rendered by stdlib handlers.

Package modules log through ``structlog.get_logger(__name__)`` with keyword
fields. ``configure_logging`` points structlog at the standard library so those
events share the root handler, its level and one of two formatters:
JSON lines for production, a pipe-delimited line for development.

Call ``setup_logging()`` once at startup to take level and format from Settings.
"""

from datetime import datetime, timezone
import json
import logging
import sys
from typing import Any

import structlog

from reqw.core.config import Settings, get_settings

# The HTTP client stack logs every request at INFO/DEBUG; keep it quiet.
THIRD_PARTY_LOGGER_LEVELS: dict[str, str] = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "hpack": "WARNING",
}

# Whatever a bare LogRecord carries is bookkeeping; anything else came in via extra.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and value is not None
    }


def _level(value: str | int) -> int:
    return value if isinstance(value, int) else getattr(logging, value.upper())


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, then event fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extra_fields(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str) + "\n"


class DevFormatter(logging.Formatter):
    """Human-readable line for local development.

    Output example:
        2025-01-15 10:23:45 | WARNING  | reqw.exchange | HTTP error response  status_code=404
    """

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        fields = " ".join(f"{k}={v}" for k, v in _extra_fields(record).items())
        line = f"{ts} | {record.levelname:<8} | {record.name} | {record.getMessage()}"
        if fields:
            line = f"{line}  {fields}"
        if record.exc_info:
            trace = self.formatException(record.exc_info).splitlines()
            line = "\n".join([line, *(f"  {t}" for t in trace)])
        return line


def _configure_structlog() -> None:
    """Hand structlog events to stdlib loggers of the same name.

    ``filter_by_level`` drops events below the stdlib logger's effective level
    before rendering; ``render_to_log_kwargs`` turns the event's keyword fields
    into ``extra`` so the formatters above pick them up.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging(
    level: str | int = "INFO",
    *,
    environment: str = "production",
    stream: Any = None,
    logger_levels: dict[str, str | int] | None = None,
) -> None:
    """Configure the root logger and route structlog through it.

    Args:
        level: Root logger level (e.g. "INFO", logging.INFO).
        environment: "development" for human-readable output, anything else for JSON.
        stream: Output stream; defaults to sys.stdout.
        logger_levels: Optional mapping of logger names to levels.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))
    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(DevFormatter() if environment == "development" else JsonFormatter())
    handler.setLevel(root.level)
    root.addHandler(handler)

    for name, lvl in {**THIRD_PARTY_LOGGER_LEVELS, **(logger_levels or {})}.items():
        logging.getLogger(name).setLevel(_level(lvl))

    _configure_structlog()


def setup_logging(settings: Settings | None = None, *, stream: Any = None) -> None:
    """Configure logging from ``Settings.log_level`` and ``Settings.environment``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, environment=settings.environment, stream=stream)


__all__ = [
    "THIRD_PARTY_LOGGER_LEVELS",
    "DevFormatter",
    "JsonFormatter",
    "configure_logging",
    "setup_logging",
]
