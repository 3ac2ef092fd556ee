"""Logging configuration for MCP Soul."""

import logging
from typing import List, Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .settings import Settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Set up structured logging with Rich formatting.

    Everything goes to stderr: with the stdio transport, stdout carries the
    MCP protocol stream.
    """
    if settings is None:
        settings = Settings()

    level = getattr(logging, settings.LOG_LEVEL.upper())

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=settings.DEBUG,
            markup=False,
            rich_tracebacks=True,
        )
    ]
    if settings.LOG_FILE is not None:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    # Configure standard library logging
    logging.basicConfig(
        level=level,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.DEBUG:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]
    else:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    # Both handlers render structlog events and foreign stdlib records alike
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get a logger for this class."""
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")


