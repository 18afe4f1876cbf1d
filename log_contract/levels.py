# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Log level taxonomy.

The eight standard levels form a closed, totally ordered set. Loggers that
support extra levels declare them by name, and callers pass them to
``Logger.log`` either as plain strings or wrapped in ``CustomLevel``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union


class LogLevel(str, Enum):
    """Standard log levels, most severe first."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    def __str__(self) -> str:
        return self.value

    @property
    def severity(self) -> int:
        """Rank of this level, 0 for emergency up to 7 for debug."""
        return _SEVERITY[self]

    @property
    def stdlib_level(self) -> int:
        """Numeric level used when bridging to the ``logging`` module."""
        return STDLIB_LEVELS[self]

    def is_at_least(self, threshold: "LogLevel") -> bool:
        """Return True if this level is as severe as, or more severe than, threshold."""
        return self.severity <= threshold.severity

    @classmethod
    def parse(cls, value: "LevelLike") -> "LogLevel | None":
        """Return the standard level for value, or None if it is not one.

        Only the exact lowercase spellings are standard; anything else is a
        candidate custom level.
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            return _BY_VALUE.get(value)
        return None


@dataclass(frozen=True)
class CustomLevel:
    """An implementation-specific level outside the standard eight."""

    name: str

    def __str__(self) -> str:
        return self.name


LevelLike = Union[LogLevel, CustomLevel, str]

_SEVERITY = {level: rank for rank, level in enumerate(LogLevel)}
_BY_VALUE = {level.value: level for level in LogLevel}

STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.EMERGENCY: 60,
    LogLevel.ALERT: 55,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: 25,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def level_name(level: LevelLike) -> str:
    """Return the canonical string form of any accepted level value."""
    if isinstance(level, LogLevel):
        return level.value
    if isinstance(level, CustomLevel):
        return level.name
    return str(level)
