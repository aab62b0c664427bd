"""Matching – pattern vocabulary, structural matcher and case dispatcher."""

from safe_result.matching.dispatch import MatchCase, match
from safe_result.matching.matcher import (
    is_array_pattern,
    is_function_pattern,
    is_many_pattern,
    is_object_pattern,
    is_regex_pattern,
    is_wildcard,
    matches,
)
from safe_result.matching.patterns import (
    WILDCARD,
    Many,
    Pattern,
    Predicate,
    Quantifier,
    _,
    every,
    guard,
    some,
    when,
)

__all__ = [
    "Many",
    "MatchCase",
    "Pattern",
    "Predicate",
    "Quantifier",
    "WILDCARD",
    "_",
    "every",
    "guard",
    "is_array_pattern",
    "is_function_pattern",
    "is_many_pattern",
    "is_object_pattern",
    "is_regex_pattern",
    "is_wildcard",
    "match",
    "matches",
    "some",
    "when",
]
