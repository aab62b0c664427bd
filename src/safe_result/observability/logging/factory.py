"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from safe_result.observability.logging.settings import LoggingSettings


class JsonLoggerFactory:
    """Configure structlog on top of the stdlib ``logging`` root handler.

    The library logs through ``logging.getLogger(__name__)`` and stays silent
    until an application configures logging; once configured here, those
    records are rendered by structlog alongside the application's own events.
    """

    @staticmethod
    def configure(settings: LoggingSettings | None = None) -> LoggingSettings:
        """Install structlog; read settings from the environment when omitted."""
        if settings is None:
            settings = LoggingSettings.from_env()

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if settings.json_logs
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(settings.level)
        return settings


__all__ = ["JsonLoggerFactory"]
