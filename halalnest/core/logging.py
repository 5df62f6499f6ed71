"""Structured logging for the gateway (structlog over stdlib logging).

Production emits one JSON object per line; everywhere else gets the
coloured console renderer. uvicorn and httpx records pass through the same
formatter so every line carries the service name and request id.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from halalnest.core.config import GatewaySettings

# Loggers that are too chatty at INFO (httpx logs every outbound request)
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(settings: GatewaySettings) -> None:
    """Configure structlog and the stdlib root logger from ``settings``."""
    pre_chain = _pre_chain(settings.service_name)

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings.json_logs),
        ],
        foreign_pre_chain=pre_chain,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _pre_chain(service_name: str) -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _service_stamper(service_name),
    ]


def _renderer(json_logs: bool) -> structlog.types.Processor:
    if json_logs:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def _service_stamper(service_name: str) -> structlog.types.Processor:
    """Return a processor that tags each event with the service name."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor
