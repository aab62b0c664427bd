"""Exception-to-Result adapters.

``try_exec`` runs a zero-argument callable and wraps its outcome in a
:class:`~safe_result.kernel.types.result.Result`; ``try_exec_async`` does
the same for a coroutine function. A plain callable handed to
``try_exec_async`` is accepted too: its return value is awaited only when
it is awaitable.

When *acceptable* lists exception classes, only those are converted to
``Err``; any other exception is re-raised unchanged.

Usage::

    result = try_exec(lambda: json.loads(raw), acceptable=(json.JSONDecodeError,))
    result = await try_exec_async(fetch_user, acceptable=[LookupError])
"""
from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Iterable, TypeVar

from safe_result.kernel.types.result import Err, Ok, Result

__all__ = [
    "AcceptableErrors",
    "is_acceptable",
    "try_exec",
    "try_exec_async",
]

T = TypeVar("T")

AcceptableErrors = Iterable[type[BaseException]]

logger = logging.getLogger(__name__)


def is_acceptable(exc: BaseException, acceptable: AcceptableErrors | None) -> bool:
    """Return ``True`` when *exc* may be captured.

    ``None`` or an empty allowlist accepts every exception.
    """
    if not acceptable:
        return True
    classes = tuple(acceptable)
    return not classes or isinstance(exc, classes)


def _captured(exc: Exception) -> Err[Exception]:
    logger.debug("capture.error_captured error_type=%s", type(exc).__name__)
    return Err(exc)


def try_exec(
    fn: Callable[[], T],
    acceptable: AcceptableErrors | None = None,
) -> Result[T, Exception]:
    """Call *fn*; return ``Ok(value)`` or ``Err(exception)``."""
    try:
        return Ok(fn())
    except Exception as exc:
        if not is_acceptable(exc, acceptable):
            logger.debug("capture.error_rejected error_type=%s", type(exc).__name__)
            raise
        return _captured(exc)


async def try_exec_async(
    fn: Callable[[], Awaitable[T] | T],
    acceptable: AcceptableErrors | None = None,
) -> Result[T, Exception]:
    """Call *fn()*, awaiting its result when awaitable; return ``Ok`` or ``Err``."""
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
        return Ok(value)
    except Exception as exc:
        if not is_acceptable(exc, acceptable):
            logger.debug("capture.error_rejected error_type=%s", type(exc).__name__)
            raise
        return _captured(exc)
