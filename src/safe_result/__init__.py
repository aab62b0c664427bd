"""
safe_result – Result type with structural pattern matching.

Import path convention::

    from safe_result import Ok, Err, match, MatchCase, when, _
    from safe_result.capture import try_exec, try_catch
    from safe_result.kernel.errors import NonExhaustiveMatchError
"""

from safe_result.capture import try_catch, try_catch_async, try_exec, try_exec_async
from safe_result.kernel.errors import MatchError, NonExhaustiveMatchError
from safe_result.kernel.types import Err, Ok, Result, ResultTag
from safe_result.matching import (
    WILDCARD,
    Many,
    MatchCase,
    _,
    every,
    guard,
    match,
    matches,
    some,
    when,
)

__version__ = "0.1.0"
__all__ = [
    "Err",
    "Many",
    "MatchCase",
    "MatchError",
    "NonExhaustiveMatchError",
    "Ok",
    "Result",
    "ResultTag",
    "WILDCARD",
    "_",
    "__version__",
    "every",
    "guard",
    "match",
    "matches",
    "some",
    "try_catch",
    "try_catch_async",
    "try_exec",
    "try_exec_async",
    "when",
]
