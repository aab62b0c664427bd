"""Observability – structlog configuration for host applications."""
from safe_result.observability.logging.factory import JsonLoggerFactory
from safe_result.observability.logging.settings import LoggingSettings

__all__ = ["JsonLoggerFactory", "LoggingSettings"]
