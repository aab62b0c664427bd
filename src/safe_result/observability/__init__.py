"""Observability – structured logging."""
from safe_result.observability.logging import JsonLoggerFactory, LoggingSettings

__all__ = ["JsonLoggerFactory", "LoggingSettings"]
