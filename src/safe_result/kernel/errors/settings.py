"""Settings errors — raised while reading ``SAFE_RESULT_*`` variables."""

from __future__ import annotations

from safe_result.kernel.errors.base import SafeResultError


class InvalidSettingError(SafeResultError):
    """A ``SAFE_RESULT_*`` setting holds a value the library cannot use."""

    default_code = "invalid_setting"

    def __init__(self, name: str, value: object, expected: str) -> None:
        super().__init__(
            f"Setting {name}={value!r} is invalid; expected {expected}",
            detail={"name": name, "value": repr(value), "expected": expected},
        )
        self.name = name
        self.value = value
        self.expected = expected


__all__ = ["InvalidSettingError"]
