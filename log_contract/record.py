# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Log record value type."""

from dataclasses import dataclass, field
from typing import Any

from .context import extract_exception
from .interpolation import interpolate
from .levels import CustomLevel, LogLevel


@dataclass(frozen=True)
class LogRecord:
    """A single log call as seen by a logger.

    Attributes:
        level: Standard or custom level of the call
        message: Message text, before any placeholder substitution
        context: Context data passed with the call
    """
    level: LogLevel | CustomLevel
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def level_name(self) -> str:
        """Canonical string form of the level."""
        return str(self.level)

    @property
    def exception(self) -> BaseException | None:
        """Exception carried in the context, if it is a real exception."""
        return extract_exception(self.context)

    def interpolated(self) -> str:
        """Return the message with ``%key%`` placeholders substituted."""
        return interpolate(self.message, self.context)
