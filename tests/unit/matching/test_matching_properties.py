"""Property-based tests for the structural matcher."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from safe_result.kernel.types import Err, Ok
from safe_result.matching import MatchCase, _, every, match, matches, some, when

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=8),
)
values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=4), children, max_size=4),
    ),
    max_leaves=12,
)


@given(values)
def test_wildcard_accepts_every_value(value: object) -> None:
    assert matches(value, _)


@given(values, values)
def test_matches_is_deterministic(value: object, pattern: object) -> None:
    assert matches(value, pattern) == matches(value, pattern)


@given(st.lists(st.integers(), max_size=8))
def test_quantifiers_agree_with_builtins(numbers: list[int]) -> None:
    positive = when(lambda n: n > 0)
    assert matches(numbers, some(positive)) == any(n > 0 for n in numbers)
    assert matches(numbers, every(positive)) == all(n > 0 for n in numbers)


@given(st.lists(st.integers(), max_size=6), st.lists(st.integers(), max_size=6))
def test_array_pattern_requires_equal_length(value: list[int], pattern: list[int]) -> None:
    wildcards = [_] * len(pattern)
    assert matches(value, wildcards) == (len(value) == len(pattern))


@given(values)
def test_trailing_wildcards_make_match_exhaustive(payload: object) -> None:
    cases = (MatchCase.ok(_, lambda v: "ok"), MatchCase.err(_, lambda e: "err"))
    assert match(Ok(payload), *cases) == "ok"
    assert match(Err(payload), *cases) == "err"
