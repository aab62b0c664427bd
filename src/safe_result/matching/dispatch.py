"""Case dispatcher — first-match-wins selection over a Result."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Generic, TypeVar

from safe_result.kernel.errors import InvalidCaseError, NonExhaustiveMatchError
from safe_result.kernel.types.result import Err, Ok, Result, ResultTag
from safe_result.matching.matcher import matches

R = TypeVar("R")

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class MatchCase(Generic[R]):
    """One ``(tag, pattern, handler)`` entry of a case list.

    ``tag`` accepts a :class:`ResultTag` or the strings ``"Ok"`` / ``"Err"``.
    """

    tag: ResultTag
    pattern: Any
    handler: Callable[[Any], R]

    def __post_init__(self) -> None:
        try:
            tag = ResultTag(self.tag)
        except ValueError:
            raise InvalidCaseError(self.tag) from None
        object.__setattr__(self, "tag", tag)

    @classmethod
    def ok(cls, pattern: Any, handler: Callable[[Any], R]) -> "MatchCase[R]":
        return cls(ResultTag.OK, pattern, handler)

    @classmethod
    def err(cls, pattern: Any, handler: Callable[[Any], R]) -> "MatchCase[R]":
        return cls(ResultTag.ERR, pattern, handler)

    def accepts(self, result: Result[Any, Any]) -> bool:
        """Tag must agree before the pattern is consulted."""
        return self.tag is result.tag and matches(result.payload, self.pattern)


def match(result: Result[Any, Any], *cases: MatchCase[R]) -> R:
    """Invoke the handler of the first case accepting *result*.

    Cases are tried strictly in order and only against results carrying the
    same tag. Raises :class:`NonExhaustiveMatchError` when none accepts.

    Example::

        message = match(
            divide(10, 2),
            MatchCase.ok(5, lambda v: "exactly five"),
            MatchCase.ok(when(lambda n: n > 5), lambda v: f"{v} is big"),
            MatchCase.ok(_, lambda v: f"got {v}"),
            MatchCase.err(_, lambda e: f"error: {e}"),
        )
    """
    if not isinstance(result, (Ok, Err)):
        raise TypeError(f"match() expects Ok or Err, got {type(result).__name__}")

    for case in cases:
        if case.accepts(result):
            return case.handler(result.payload)

    logger.debug("match.non_exhaustive tag=%s case_count=%d", result.tag.value, len(cases))
    raise NonExhaustiveMatchError(result.tag.value, result.payload, case_count=len(cases))


__all__ = ["MatchCase", "match"]
