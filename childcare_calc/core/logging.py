"""Structured logging for the calculator, built on structlog.

Loggers returned by ``get_logger`` always hand their events to the stdlib
logger of the same name, and the package logger carries a ``NullHandler``.
Nothing is printed until the host application either attaches its own
handlers or calls ``configure_logging``.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any

import orjson
import structlog
from structlog.types import Processor

from childcare_calc.core.config import settings

PACKAGE_LOGGER = "childcare_calc"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

# Tags events emitted while a curve sweep is running
sweep_ctx: ContextVar[str | None] = ContextVar("sweep", default=None)


def _add_context_vars(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add context variables to log events.

    Args:
        logger: The logger instance (unused).
        method_name: The logging method name (unused).
        event_dict: The log event dictionary.

    Returns:
        Updated event dictionary with context variables.
    """
    if sweep := sweep_ctx.get():
        event_dict["sweep"] = sweep
    return event_dict


def _orjson_serializer(obj: Any, **kwargs: Any) -> str:
    """Serialize log event to JSON using orjson.

    Args:
        obj: Object to serialize.
        **kwargs: Additional keyword arguments (unused).

    Returns:
        JSON string representation.
    """
    return orjson.dumps(obj).decode("utf-8")


def configure_logging() -> None:
    """Configure structlog and stdlib logging for an application using the calculator.

    Call once at startup. The library itself never calls this.

    Development mode: ConsoleRenderer with colors for readability.
    Production mode: JSONRenderer with orjson for structured logging.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_context_vars,
    ]

    log_format = settings.log_format.lower() if settings.log_format else None
    use_json = log_format == "json" or (
        log_format is None and settings.environment != "development"
    )

    if use_json:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=_orjson_serializer),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if settings.debug else logging.INFO,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Processors come from the current structlog configuration, but output
    always goes through stdlib logging so its handlers and levels apply
    whether or not ``configure_logging`` has run.

    Args:
        name: Logger name, usually the calling module's ``__name__``.

    Returns:
        Structlog bound logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
