"""Result[T, E] — Ok and Err variants."""

from __future__ import annotations

import enum
from typing import Any, Callable, ClassVar, Generic, NoReturn, TypeVar

from safe_result.kernel.errors.matching import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultTag(str, enum.Enum):
    """Discriminant shared by Result values and match cases."""

    OK = "Ok"
    ERR = "Err"

    def __str__(self) -> str:
        return self.value


class _Frozen:
    """Rejects attribute assignment once ``__init__`` has run."""

    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Ok(_Frozen, Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    tag: ClassVar[ResultTag] = ResultTag.OK

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def payload(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def map_err(self, func: Callable[[Any], Any]) -> "Ok[T]":  # noqa: ARG002
        return self

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        return func(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self.tag, self._value))

    def __reduce__(self) -> tuple[type["Ok[T]"], tuple[T]]:
        return (Ok, (self._value,))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(_Frozen, Generic[E]):
    """Error result variant.

    The payload may be any value; it is not required to be an exception.
    """

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    tag: ClassVar[ResultTag] = ResultTag.ERR

    def __init__(self, error: E) -> None:
        object.__setattr__(self, "_error", error)

    @property
    def error(self) -> E:
        return self._error

    @property
    def payload(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        if isinstance(self._error, BaseException):
            raise self._error
        raise UnwrapError(self._error)

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def map_err(self, func: Callable[[E], F]) -> "Err[F]":
        return Err(func(self._error))

    def flat_map(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((self.tag, self._error))

    def __reduce__(self) -> tuple[type["Err[E]"], tuple[E]]:
        return (Err, (self._error,))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result", "ResultTag"]
