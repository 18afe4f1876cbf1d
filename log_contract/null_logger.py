# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""No-op logger used as the default when no real logger is configured."""

from typing import Any

from .config import DriverConfig_Logger_Null
from .context import Context, to_text
from .levels import CustomLevel, LevelLike, LogLevel
from .logger import Logger


class NullLogger(Logger):
    """Logger that discards every record.

    Accepts any level, including ones no other logger recognizes, and never
    raises. Code that takes an optional logger can default to this instead
    of checking for None before every call.
    """

    def __init__(self, **kwargs: Any):
        """Initialize no-op logger.

        Args:
            **kwargs: Ignored (for compatibility with factory method)
        """

    @classmethod
    def from_config(cls, driver_config: DriverConfig_Logger_Null) -> "NullLogger":
        """Create a NullLogger from driver configuration."""
        return cls()

    def log(self, level: LevelLike, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        pass

    def resolve_level(self, level: LevelLike) -> LogLevel | CustomLevel:
        """Return the level for level; anything non-standard becomes a CustomLevel."""
        standard = LogLevel.parse(level)
        if standard is not None:
            return standard
        if isinstance(level, CustomLevel):
            return level
        return CustomLevel(to_text(level))

    def accepts_level(self, level: LevelLike) -> bool:
        return True

    def supported_levels(self) -> list[str]:
        """Return the standard level names; any other name is accepted as well."""
        return super().supported_levels()
