"""Structural matcher — decides whether a value satisfies a pattern.

Rules are applied in a fixed order and the first applicable one decides:

1. wildcard
2. predicate / guard
3. regular expression against a ``str``
4. positional sequence pattern against a ``list`` / ``tuple``
5. partial mapping pattern against an object
6. ``some`` / ``every`` against a ``list`` / ``tuple``
7. literal equality
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from safe_result.matching.patterns import WILDCARD, Many, Quantifier

# Values that are never inspected field by field.
_SCALARS: tuple[type, ...] = (str, bytes, bytearray, int, float, complex, bool)
_SEQUENCES: tuple[type, ...] = (list, tuple)


def is_wildcard(pattern: Any) -> bool:
    return pattern is WILDCARD


def is_function_pattern(pattern: Any) -> bool:
    """Callables are predicates; classes are not, they compare as literals."""
    return callable(pattern) and not isinstance(pattern, type)


def is_regex_pattern(pattern: Any) -> bool:
    return isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str)


def is_array_pattern(pattern: Any) -> bool:
    return isinstance(pattern, _SEQUENCES)


def is_object_pattern(pattern: Any) -> bool:
    return isinstance(pattern, Mapping)


def is_many_pattern(pattern: Any) -> bool:
    return isinstance(pattern, Many)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCES)


def _is_structured(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALARS)


def _field(value: Any, key: Any) -> Any:
    # Reading a field may run user code (properties, __getattr__, custom
    # Mapping.get); anything other than AttributeError propagates.
    if isinstance(value, Mapping):
        return value.get(key)
    if isinstance(key, str):
        return getattr(value, key, None)
    return None


def _strict_equals(value: Any, pattern: Any) -> bool:
    # True == 1 in Python; a bool literal only matches a bool.
    if isinstance(value, bool) is not isinstance(pattern, bool):
        if isinstance(value, (int, float, complex)) or isinstance(pattern, (int, float, complex)):
            return False
    return bool(value == pattern)


def matches(value: Any, pattern: Any) -> bool:
    """Return ``True`` when *value* satisfies *pattern*.

    Pure and deterministic. Exceptions raised by a predicate, or by a field
    read on a matched object, propagate to the caller unchanged.

    Example::

        >>> matches([1, 2, 3], [1, when(lambda n: n > 1), 3])
        True
        >>> matches({"name": "Alice", "age": 30}, {"age": when(lambda a: a >= 18)})
        True
    """
    if is_wildcard(pattern):
        return True

    if is_function_pattern(pattern):
        return bool(pattern(value))

    if is_regex_pattern(pattern) and isinstance(value, str):
        return pattern.search(value) is not None

    if is_array_pattern(pattern) and _is_sequence(value):
        return len(pattern) == len(value) and all(
            matches(item, sub) for item, sub in zip(value, pattern)
        )

    if is_object_pattern(pattern) and _is_structured(value):
        return all(matches(_field(value, key), sub) for key, sub in pattern.items())

    if is_many_pattern(pattern) and _is_sequence(value):
        if pattern.quantifier is Quantifier.SOME:
            return any(matches(item, pattern.pattern) for item in value)
        return all(matches(item, pattern.pattern) for item in value)

    return _strict_equals(value, pattern)


__all__ = [
    "is_array_pattern",
    "is_function_pattern",
    "is_many_pattern",
    "is_object_pattern",
    "is_regex_pattern",
    "is_wildcard",
    "matches",
]
