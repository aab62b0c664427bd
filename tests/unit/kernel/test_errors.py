"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from safe_result.kernel.errors import (
    InvalidCaseError,
    InvalidSettingError,
    MatchError,
    NonExhaustiveMatchError,
    SafeResultError,
    UnwrapError,
)


class TestSafeResultError:
    def test_message_and_str(self) -> None:
        err = SafeResultError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert SafeResultError("m").code == "safe_result_error"

    def test_detail_is_copied(self) -> None:
        detail = {"key": "val"}
        err = SafeResultError("m", detail=detail)
        detail["key"] = "changed"
        assert err.detail == {"key": "val"}

    def test_to_dict(self) -> None:
        err = SafeResultError("m", detail={"key": "val"})
        assert err.to_dict() == {
            "error": "SafeResultError",
            "code": "safe_result_error",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_to_dict_reports_chained_cause(self) -> None:
        try:
            try:
                raise ValueError("original")
            except ValueError as exc:
                raise SafeResultError("wrapper") from exc
        except SafeResultError as err:
            assert "original" in err.to_dict()["cause"]

    def test_to_json_is_valid_json(self) -> None:
        parsed = json.loads(SafeResultError("oops", detail={"x": 1}).to_json())
        assert parsed["message"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(SafeResultError("hello")) == "SafeResultError('hello')"


class TestMatchErrors:
    def test_non_exhaustive_is_match_error(self) -> None:
        err = NonExhaustiveMatchError("Ok", 10, case_count=1)
        assert isinstance(err, MatchError)
        assert isinstance(err, SafeResultError)

    def test_non_exhaustive_carries_context(self) -> None:
        err = NonExhaustiveMatchError("Err", "boom", case_count=3)
        assert err.code == "non_exhaustive_match"
        assert err.tag == "Err"
        assert err.payload == "boom"
        assert err.case_count == 3
        assert err.detail == {"tag": "Err", "payload": "'boom'", "case_count": 3}
        assert "not exhaustive" in err.message

    def test_invalid_case_code(self) -> None:
        err = InvalidCaseError("Maybe")
        assert err.code == "invalid_case"
        assert err.tag == "Maybe"
        assert "'Maybe'" in err.message

    def test_unwrap_error_is_not_a_match_error(self) -> None:
        assert not isinstance(UnwrapError("x"), MatchError)

    def test_match_errors_are_raisable(self) -> None:
        with pytest.raises(MatchError):
            raise NonExhaustiveMatchError("Ok", None, case_count=0)


class TestInvalidSettingError:
    def test_fields(self) -> None:
        err = InvalidSettingError("SAFE_RESULT_LOG_LEVEL", "LOUD", "DEBUG | INFO")
        assert isinstance(err, SafeResultError)
        assert err.code == "invalid_setting"
        assert err.name == "SAFE_RESULT_LOG_LEVEL"
        assert err.value == "LOUD"
        assert err.detail["expected"] == "DEBUG | INFO"
