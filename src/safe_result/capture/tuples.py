"""Go-style ``(error, value)`` adapters.

Same capture rules as :mod:`safe_result.capture.execute`, but the outcome is
a pair: ``(None, value)`` on success, ``(exception, None)`` on failure.

Usage::

    error, config = try_catch(lambda: json.loads(raw))
    if error is not None:
        ...
"""
from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

from safe_result.capture.execute import AcceptableErrors, try_exec, try_exec_async
from safe_result.kernel.types.result import Ok, Result

__all__ = ["try_catch", "try_catch_async"]

T = TypeVar("T")

Outcome = tuple[Exception, None] | tuple[None, T]


def _as_pair(result: Result[T, Exception]) -> "Outcome[T]":
    if isinstance(result, Ok):
        return None, result.value
    return result.error, None


def try_catch(
    fn: Callable[[], T],
    acceptable: AcceptableErrors | None = None,
) -> "Outcome[T]":
    return _as_pair(try_exec(fn, acceptable))


async def try_catch_async(
    fn: Callable[[], Awaitable[T] | T],
    acceptable: AcceptableErrors | None = None,
) -> "Outcome[T]":
    return _as_pair(await try_exec_async(fn, acceptable))
