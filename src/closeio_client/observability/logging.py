"""
closeio_client.observability.logging

Structured logging for applications embedding the client.

Responsibilities:
- Configure `structlog` JSON output from the client's `Settings`
  (`CLOSEIO_LOG_LEVEL`, `CLOSEIO_SERVICE_NAME`).
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from closeio_client.settings import Settings


def configure_logging(settings: Settings) -> None:
    """
    Optional: without it structlog keeps its console renderer and logs every level.
    """

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("closeio_client").setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _bind_service(settings.service_name),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _bind_service(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # Keeps a caller-bound `service` when an application logs for several services.
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# The client logs `closeio.request` / `closeio.response` at debug; the API key is never
# part of an event.
