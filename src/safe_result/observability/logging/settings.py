"""Observability – LoggingSettings read from ``SAFE_RESULT_*`` variables."""
from __future__ import annotations

import dataclasses
import logging
import os
from typing import Mapping

from safe_result.kernel.errors import InvalidSettingError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclasses.dataclass(frozen=True)
class LoggingSettings:
    """Log output for applications that let the library set up structlog.

    ``SAFE_RESULT_LOG_LEVEL`` (default ``WARNING``) and
    ``SAFE_RESULT_JSON_LOGS`` (default on) are read by :meth:`from_env`.
    """

    log_level: str = "WARNING"
    json_logs: bool = True

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise InvalidSettingError("SAFE_RESULT_LOG_LEVEL", self.log_level, " | ".join(_LEVELS))
        object.__setattr__(self, "log_level", level)

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoggingSettings":
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if (raw_level := env.get("SAFE_RESULT_LOG_LEVEL")) is not None:
            kwargs["log_level"] = raw_level.strip()
        if (raw_json := env.get("SAFE_RESULT_JSON_LOGS")) is not None:
            flag = raw_json.strip().lower()
            if flag not in _TRUTHY + _FALSY:
                raise InvalidSettingError("SAFE_RESULT_JSON_LOGS", raw_json, "a boolean flag")
            kwargs["json_logs"] = flag in _TRUTHY
        return cls(**kwargs)  # type: ignore[arg-type]


__all__ = ["LoggingSettings"]
