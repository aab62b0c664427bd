"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    SafeResultError
    ├── MatchError               (matching.py)
    │   ├── NonExhaustiveMatchError
    │   └── InvalidCaseError
    ├── UnwrapError              (matching.py)
    └── InvalidSettingError      (settings.py)
"""

from safe_result.kernel.errors.base import SafeResultError
from safe_result.kernel.errors.matching import (
    InvalidCaseError,
    MatchError,
    NonExhaustiveMatchError,
    UnwrapError,
)
from safe_result.kernel.errors.settings import InvalidSettingError

__all__ = [
    "InvalidCaseError",
    "InvalidSettingError",
    "MatchError",
    "NonExhaustiveMatchError",
    "SafeResultError",
    "UnwrapError",
]
