"""Capture – turn raised exceptions into Results or ``(error, value)`` pairs."""
from safe_result.capture.execute import AcceptableErrors, is_acceptable, try_exec, try_exec_async
from safe_result.capture.tuples import try_catch, try_catch_async

__all__ = [
    "AcceptableErrors",
    "is_acceptable",
    "try_catch",
    "try_catch_async",
    "try_exec",
    "try_exec_async",
]
