# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""In-memory logger implementation for testing."""

import re
import threading
from typing import Any, Callable, Iterable

from .config import DriverConfig_Logger_Memory
from .context import Context, normalize_context, to_text
from .levels import LevelLike, level_name
from .logger import Logger
from .record import LogRecord


class MemoryLogger(Logger):
    """Logger that stores log records in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    Messages are kept exactly as passed; placeholders are not substituted, so
    tests can assert on both the template and the context. Use
    ``interpolated_messages`` to see the substituted text.

    Note: MemoryLogger does not filter logs by level - all logs are captured for testing.
    """

    def __init__(
        self,
        level: str = "debug",
        name: str | None = None,
        custom_levels: Iterable[str] = (),
    ):
        """Initialize memory logger.

        Args:
            level: Logging level (stored but not used for filtering)
            name: Optional logger name for identification
            custom_levels: Extra level names accepted by log()
        """
        self.level = level.lower()
        self.name = name or "log_contract"
        self.custom_levels = frozenset(custom_levels)
        self.records: list[LogRecord] = []
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, driver_config: DriverConfig_Logger_Memory) -> "MemoryLogger":
        """Create a MemoryLogger from driver configuration.

        Args:
            driver_config: DriverConfig_Logger_Memory with level, name and
                custom_levels attributes

        Returns:
            Configured MemoryLogger instance
        """
        return cls(
            level=driver_config.level,
            name=driver_config.name,
            custom_levels=driver_config.custom_levels,
        )

    def log(self, level: LevelLike, message: Any, context: Context | None = None, /, **fields: Any) -> None:
        record = LogRecord(
            level=self.resolve_level(level),
            message=to_text(message),
            context=normalize_context(context, fields),
        )
        with self._lock:
            self.records.append(record)

    def clear(self) -> None:
        """Clear all stored records (useful for testing)."""
        with self._lock:
            self.records.clear()

    def get_records(self, level: LevelLike | None = None) -> list[LogRecord]:
        """Get stored records, optionally filtered by level.

        Args:
            level: Optional level to filter by

        Returns:
            List of log records
        """
        with self._lock:
            records = list(self.records)
        if level is None:
            return records
        name = level_name(level)
        return [record for record in records if record.level_name == name]

    def has_records(self, level: LevelLike | None = None) -> bool:
        """Check if any record was logged, optionally at a given level."""
        return bool(self.get_records(level))

    def has_record(self, message: str, level: LevelLike | None = None) -> bool:
        """Check if a record with exactly this message exists."""
        return self.has_record_passing(lambda record: record.message == message, level)

    def has_record_containing(self, fragment: str, level: LevelLike | None = None) -> bool:
        """Check if a record whose message contains fragment exists.

        Args:
            fragment: Text to search for (substring match)
            level: Optional level to filter by

        Returns:
            True if a message is found, False otherwise
        """
        return self.has_record_passing(lambda record: fragment in record.message, level)

    def has_record_matching(self, pattern: str | re.Pattern, level: LevelLike | None = None) -> bool:
        """Check if a record whose message matches a regular expression exists."""
        regex = re.compile(pattern)
        return self.has_record_passing(lambda record: regex.search(record.message) is not None, level)

    def has_record_passing(
        self, predicate: Callable[[LogRecord], bool], level: LevelLike | None = None
    ) -> bool:
        """Check if any record satisfies predicate."""
        return any(predicate(record) for record in self.get_records(level))

    def interpolated_messages(self, level: LevelLike | None = None) -> list[str]:
        """Return stored messages with placeholders substituted from their context."""
        return [record.interpolated() for record in self.get_records(level)]

    def count(self, level: LevelLike | None = None) -> int:
        """Return the number of stored records, optionally at a given level."""
        return len(self.get_records(level))
