"""Pattern vocabulary and constructors.

A pattern describes what counts as a match for a value:

* ``WILDCARD`` (alias ``_``) accepts anything.
* A one-argument callable (``when`` / ``guard``) is a predicate.
* A compiled :class:`re.Pattern` tests ``str`` values.
* A ``list`` or ``tuple`` matches a sequence of exactly that length.
* A ``Mapping`` matches the named fields of a value, ignoring the rest.
* :class:`Many` (``some`` / ``every``) quantifies a pattern over a sequence.
* Anything else is a literal compared by equality.

Usage::

    from safe_result.matching import _, every, some, when

    adult = {"age": when(lambda a: a >= 18)}
    all_positive = every(when(lambda n: n > 0))
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable, Final, TypeAlias, TypeGuard, TypeVar

T = TypeVar("T")


@enum.unique
class Quantifier(str, enum.Enum):
    SOME = "some"
    EVERY = "every"


class _Wildcard:
    """Sentinel type for the wildcard pattern; only one instance exists."""

    __slots__ = ()
    _instance: "_Wildcard | None" = None

    def __new__(cls) -> "_Wildcard":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "_"

    def __reduce__(self) -> str:
        return "WILDCARD"


WILDCARD: Final = _Wildcard()
_ = WILDCARD


@dataclasses.dataclass(frozen=True, slots=True)
class Many:
    """Quantified pattern applied to every element of a sequence."""

    quantifier: Quantifier
    pattern: Any

    def __repr__(self) -> str:
        return f"{self.quantifier.value}({self.pattern!r})"


Predicate = Callable[[Any], bool]

# One of: WILDCARD, a Predicate, re.Pattern[str], a Mapping of field name to
# pattern, a list/tuple of patterns, a Many, or a literal. A literal can be any
# value, so the alias itself is Any.
Pattern: TypeAlias = Any


def when(predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    """Use *predicate* as a pattern; the value matches when it returns true."""
    return predicate


def guard(predicate: Callable[[Any], TypeGuard[T]]) -> Callable[[Any], TypeGuard[T]]:
    """Use a type guard as a pattern.

    Behaves exactly like :func:`when` at runtime. The ``TypeGuard`` return
    type lets a static checker narrow the payload seen by the handler.
    """
    return predicate


def some(pattern: Any) -> Many:
    """Match a sequence in which at least one element matches *pattern*."""
    return Many(Quantifier.SOME, pattern)


def every(pattern: Any) -> Many:
    """Match a sequence in which all elements match *pattern* (true when empty)."""
    return Many(Quantifier.EVERY, pattern)


__all__ = [
    "Many",
    "Pattern",
    "Predicate",
    "Quantifier",
    "WILDCARD",
    "_",
    "every",
    "guard",
    "some",
    "when",
]
