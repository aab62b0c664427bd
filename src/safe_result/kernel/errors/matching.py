"""Matching errors — raised by the case dispatcher and the Result API."""

from __future__ import annotations

from typing import Any

from safe_result.kernel.errors.base import SafeResultError


class MatchError(SafeResultError):
    """Base class for case-dispatch failures."""

    default_code = "match_error"


class NonExhaustiveMatchError(MatchError):
    """No case accepted the Result handed to ``match``.

    Append a trailing wildcard case per tag to make a case list exhaustive.
    """

    default_code = "non_exhaustive_match"

    def __init__(
        self,
        tag: str,
        payload: Any,
        *,
        case_count: int,
    ) -> None:
        super().__init__(
            f"Pattern matching not exhaustive: no case accepted {tag}({payload!r})",
            detail={"tag": tag, "payload": repr(payload), "case_count": case_count},
        )
        self.tag = tag
        self.payload = payload
        self.case_count = case_count


class InvalidCaseError(MatchError):
    """A match case was built with a tag that is neither ``Ok`` nor ``Err``."""

    default_code = "invalid_case"

    def __init__(self, tag: object) -> None:
        super().__init__(
            f"Unknown result tag {tag!r}; expected 'Ok' or 'Err'",
            detail={"tag": repr(tag)},
        )
        self.tag = tag


class UnwrapError(SafeResultError):
    """``unwrap()`` was called on an Err whose payload is not an exception."""

    default_code = "unwrap_error"

    def __init__(self, error: Any) -> None:
        super().__init__(
            f"Called unwrap() on Err({error!r})",
            detail={"error": repr(error)},
        )
        self.error = error


__all__ = [
    "InvalidCaseError",
    "MatchError",
    "NonExhaustiveMatchError",
    "UnwrapError",
]
