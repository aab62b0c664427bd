"""Kernel value types — public re-export surface.

Modules:
  result.py — Ok, Err, Result, ResultTag
"""

from safe_result.kernel.types.result import Err, Ok, Result, ResultTag

__all__ = ["Err", "Ok", "Result", "ResultTag"]
