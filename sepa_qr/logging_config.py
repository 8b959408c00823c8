"""
Structured logging configuration.

Uses structlog on top of stdlib logging, with python-json-logger doing the
JSON rendering. The library never configures logging on import; host
applications call setup_logging() once at startup.
"""
import logging
import sys
from typing import Any, Callable, Optional

import structlog
from pythonjsonlogger import jsonlogger

from sepa_qr.config import Settings, get_settings


def add_app_context(app_name: str) -> Callable[..., dict[str, Any]]:
    """
    Build a processor that adds application context to log events.

    Args:
        app_name: Value bound as "app_name" on every event

    Returns:
        structlog processor
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        return event_dict

    return processor


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging.

    Sets up:
    - JSON logs on stdout (or console output when json_logs is off)
    - Context variables merged into every event
    - ISO timestamps and app name on every event

    Args:
        settings: Settings to use; defaults to the cached environment settings
    """
    settings = settings or get_settings()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        add_app_context(settings.app_name),
    ]
    if settings.json_logs:
        # Event fields travel as `extra`; python-json-logger serializes them
        processors.append(structlog.stdlib.render_to_log_kwargs)
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s"
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer())
        formatter = logging.Formatter("%(message)s")

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    logger = structlog.get_logger(__name__)
    logger.info("logging_configured", log_level=settings.log_level)


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Any: Structured logger
    """
    return structlog.get_logger(name)
