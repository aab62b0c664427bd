"""Kernel – the Result type and the error hierarchy."""

from safe_result.kernel.errors import (
    InvalidCaseError,
    InvalidSettingError,
    MatchError,
    NonExhaustiveMatchError,
    SafeResultError,
    UnwrapError,
)

__all__ = [
    "InvalidCaseError",
    "InvalidSettingError",
    "MatchError",
    "NonExhaustiveMatchError",
    "SafeResultError",
    "UnwrapError",
]
