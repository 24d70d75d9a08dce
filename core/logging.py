"""
Structured Logging

structlog for the dashboard. Every event carries the service name, the
tournament it is serving, and the correlation ID of the request being
handled (set by CorrelationMiddleware). Production logs are JSON lines;
`LOG_FORMAT=console` gives readable colored output for local runs.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional

import structlog


correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

# Chatty library loggers and the level they are capped at
_LIBRARY_LEVELS = {
    "peewee": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def get_correlation_id() -> str:
    return correlation_id_var.get()


def set_correlation_id(cid: str) -> None:
    correlation_id_var.set(cid)


def add_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor: attach the current request's correlation ID, if any."""
    cid = get_correlation_id()
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def add_service_info(service_name: str, tournament: Optional[str] = None) -> structlog.typing.Processor:
    """Processor factory: stamp the service (and tournament, when given) on every event."""

    def processor(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["service"] = service_name
        if tournament:
            event_dict.setdefault("tournament", tournament)
        return event_dict

    return processor


def setup_logging(
    log_level: str = "INFO",
    json_format: bool = True,
    service_name: str = "upa-tournament-dashboard",
    tournament: Optional[str] = None,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        json_format: JSON lines when True, colored console output otherwise
        service_name: Stamped on every event as `service`
        tournament: Stamped on every event as `tournament`
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name, cap in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(max(level, cap))

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_info(service_name, tournament),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Logger for a component. Events are snake_case with key/value context:

        log = get_logger("awards_service")
        log.info("awards_computed", omvp=5, dmvp=5, rookie=2)
    """
    return structlog.get_logger(name)
