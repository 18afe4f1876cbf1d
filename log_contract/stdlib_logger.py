# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logger implementation that forwards records to the standard ``logging`` module."""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from .config import DriverConfig_Logger_Stdlib
from .context import Context, extract_exception, normalize_context, to_text
from .interpolation import interpolate
from .levels import CustomLevel, LevelLike, LogLevel
from .logger import Logger

# logging only names DEBUG..CRITICAL out of the box
for _level in (LogLevel.NOTICE, LogLevel.ALERT, LogLevel.EMERGENCY):
    logging.addLevelName(_level.stdlib_level, _level.value.upper())


class StdlibLogger(Logger):
    """Logger that substitutes placeholders and emits through ``logging``.

    Each call becomes one ``logging.LogRecord`` on the stdlib logger with the
    same name. The substituted message is the record message, the full context
    is attached as ``record.context``, and a real exception found under the
    "exception" context key is passed as ``exc_info`` so handlers render its
    traceback. Handlers, formatters, and destinations are whatever the
    application configured for ``logging``.
    """

    interpolates = True

    def __init__(
        self,
        level: str = "info",
        name: str | None = None,
        custom_levels: Mapping[str, int] | None = None,
    ):
        """Initialize stdlib bridge logger.

        Args:
            level: Minimum level to emit (one of the standard level names,
                case-insensitive)
            name: Optional logger name for identification
            custom_levels: Extra level names accepted by log(), mapped to
                their numeric stdlib level

        Raises:
            ValueError: If level is not a standard level name, or a custom level
                reuses a numeric level that already has another name
        """
        threshold = LogLevel.parse(str(level).lower())
        if threshold is None:
            raise ValueError(
                f"Invalid log level: {level}. Must be one of {[lvl.value for lvl in LogLevel]}"
            )
        self.level = threshold.value
        self.name = name or "log_contract"
        self._threshold = threshold.stdlib_level

        self._custom_numeric = dict(custom_levels or {})
        self.custom_levels = frozenset(self._custom_numeric)
        if len(set(self._custom_numeric.values())) != len(self._custom_numeric):
            raise ValueError(f"Custom levels must use distinct numeric levels: {self._custom_numeric}")
        for custom_name, numeric in self._custom_numeric.items():
            existing = logging.getLevelName(numeric)
            if existing not in (f"Level {numeric}", custom_name.upper()):
                raise ValueError(
                    f"Custom level {custom_name!r} cannot use numeric level {numeric}: "
                    f"already registered as {existing}"
                )
        for custom_name, numeric in self._custom_numeric.items():
            logging.addLevelName(numeric, custom_name.upper())

        self._stdlib_logger = logging.getLogger(self.name)
        # Use NOTSET to inherit the root level; filtering happens in log() using self.level
        self._stdlib_logger.setLevel(logging.NOTSET)

    @classmethod
    def from_config(cls, driver_config: DriverConfig_Logger_Stdlib) -> "StdlibLogger":
        """Create a StdlibLogger from driver configuration.

        Args:
            driver_config: DriverConfig_Logger_Stdlib with level, name and
                custom_levels attributes

        Returns:
            Configured StdlibLogger instance
        """
        return cls(
            level=driver_config.level,
            name=driver_config.name,
            custom_levels=driver_config.custom_levels,
        )

    def _numeric_level(self, level: LogLevel | CustomLevel) -> int:
        if isinstance(level, LogLevel):
            return level.stdlib_level
        return self._custom_numeric[level.name]

    def is_enabled_for(self, level: LevelLike) -> bool:
        """Return True if a record at level would pass this logger's threshold."""
        return self._numeric_level(self.resolve_level(level)) >= self._threshold

    def log(self, level: LevelLike, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        resolved = self.resolve_level(level)
        numeric = self._numeric_level(resolved)

        # Check if we should log at this level
        if numeric < self._threshold:
            return

        text = to_text(message)
        try:
            ctx = normalize_context(context, fields)
            text = interpolate(text, ctx)

            exc = extract_exception(ctx)
            exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None

            self._stdlib_logger.log(
                numeric,
                text,
                exc_info=exc_info,
                extra={"context": ctx, "log_level": str(resolved)},
            )
        except Exception as e:
            # Logging must never break the caller; report and carry on
            print(
                f"{str(resolved).upper()}: {text} (logging failed: {type(e).__name__}: {to_text(e)})",
                file=sys.stderr,
                flush=True,
            )
