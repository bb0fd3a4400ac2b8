"""
Logging Setup
=============
Configures stdlib logging and structlog for applications using the client.

Usage:
    from porticor_client.logging_config import setup_logging

    setup_logging(level="INFO", json_logs=True)
"""

import logging
import sys

import structlog


def setup_logging(
    level: str = "INFO",
    json_logs: bool = False,
    service_name: str = "porticor-client",
) -> None:
    """
    Route stdlib and structlog records through one handler.

    Args:
        level: Minimum log level
        json_logs: Render JSON instead of console output
        service_name: Added to every structlog event
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    def add_service(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service,
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
