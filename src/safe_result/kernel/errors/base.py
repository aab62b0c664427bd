"""Root error class for safe-result."""

from __future__ import annotations

import json
from typing import Any


class SafeResultError(Exception):
    """Root of every error raised by this library.

    Subclasses set ``default_code`` and pass their context as keyword-only
    ``detail``. A chained ``__cause__`` (``raise ... from exc``) is reported by
    :meth:`to_dict`; predicate and handler exceptions are never wrapped.
    """

    default_code: str = "safe_result_error"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["SafeResultError"]
