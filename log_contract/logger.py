# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract logger interface."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .context import Context
from .errors import InvalidLevelError
from .levels import CustomLevel, LevelLike, LogLevel


class Logger(ABC):
    """Abstract base class for loggers.

    Implementations provide ``log``; the level-named methods delegate to it,
    so calling ``log(LogLevel.INFO, ...)`` and ``info(...)`` is the same call.

    Context data is passed either as a mapping, as keyword fields, or both:

        >>> logger.info("User %username% created", {"username": "Bob"})
        >>> logger.info("Service started", service="ingestion", version="1.0.0")

    Keyword fields override mapping entries with the same key. The context
    mapping is passed positionally, so any name, including "level",
    "message" and "context", can be used as a keyword field. A logging call
    never raises because of the context content.
    """

    #: Whether ``%key%`` placeholders are substituted before the record is emitted.
    interpolates: ClassVar[bool] = False

    #: Names of non-standard levels this logger accepts in ``log``.
    custom_levels: frozenset[str] = frozenset()

    @abstractmethod
    def log(self, level: LevelLike, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log a message at an arbitrary level.

        Args:
            level: A LogLevel, its string value, or a custom level this
                logger supports
            message: The log message, or any value convertible to text
            context: Optional mapping of structured data
            **fields: Additional structured data to log

        Raises:
            InvalidLevelError: If level is neither standard nor supported
        """
        pass

    def resolve_level(self, level: LevelLike) -> LogLevel | CustomLevel:
        """Return the level value this logger uses for level.

        Raises:
            InvalidLevelError: If level is neither standard nor supported
        """
        standard = LogLevel.parse(level)
        if standard is not None:
            return standard

        if isinstance(level, CustomLevel):
            name = level.name
        elif isinstance(level, str):
            name = level
        else:
            raise InvalidLevelError(level, self.supported_levels())

        if name in self.custom_levels:
            return CustomLevel(name)
        raise InvalidLevelError(level, self.supported_levels())

    def accepts_level(self, level: LevelLike) -> bool:
        """Return True if ``log`` would accept level."""
        try:
            self.resolve_level(level)
        except InvalidLevelError:
            return False
        return True

    def supported_levels(self) -> list[str]:
        """Return the names of every level this logger accepts."""
        return [level.value for level in LogLevel] + sorted(self.custom_levels)

    def emergency(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log an emergency-level message: the system is unusable.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.EMERGENCY, message, context, **fields)

    def alert(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log an alert-level message: action must be taken immediately.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.ALERT, message, context, **fields)

    def critical(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log a critical-level message.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.CRITICAL, message, context, **fields)

    def error(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log an error-level message.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.ERROR, message, context, **fields)

    def warning(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log a warning-level message.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.WARNING, message, context, **fields)

    def notice(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log a notice-level message: normal but significant events.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.NOTICE, message, context, **fields)

    def info(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log an info-level message.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.INFO, message, context, **fields)

    def debug(self, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        """Log a debug-level message.

        Args:
            message: The log message
            context: Optional mapping of structured data
            **fields: Additional structured data to log
        """
        self.log(LogLevel.DEBUG, message, context, **fields)
