#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the log_contract module.

Shows a library class that logs through the contract, and the same class
running with no logger, a memory logger, and the stdlib bridge.
"""

import logging

from log_contract import (
    AdapterConfig_Logger,
    DriverConfig_Logger_Memory,
    DriverConfig_Logger_Stdlib,
    LoggerAwareMixin,
    create_logger,
)


class ArchiveFetcher(LoggerAwareMixin):
    """Stand-in for library code that only knows about the Logger interface."""

    def fetch(self, source: str) -> int:
        self.logger.info("Fetching archive from %source%", source=source)
        try:
            raise ConnectionError("connection reset by peer")
        except ConnectionError as exc:
            self.logger.error("Fetch from %source% failed", {"source": source, "exception": exc})
        return 0


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("log_contract Examples")
    print("=" * 60)
    print()

    # Example 1: No logger configured
    print("Example 1: Default NullLogger (prints nothing)")
    print("-" * 60)
    ArchiveFetcher().fetch("https://example.com/archive.mbox")
    print()

    # Example 2: Memory logger for tests
    print("Example 2: MemoryLogger")
    print("-" * 60)
    memory_logger = create_logger(
        AdapterConfig_Logger(logger_type="memory", driver=DriverConfig_Logger_Memory(name="example"))
    )
    fetcher = ArchiveFetcher()
    fetcher.set_logger(memory_logger)
    fetcher.fetch("https://example.com/archive.mbox")

    for record in memory_logger.records:
        print(f"  [{record.level_name}] {record.message} -> {record.interpolated()}")
    print(f"Has error: {memory_logger.has_records('error')}")
    print()

    # Example 3: Stdlib bridge
    print("Example 3: StdlibLogger")
    print("-" * 60)
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    stdlib_logger = create_logger(
        AdapterConfig_Logger(
            logger_type="stdlib",
            driver=DriverConfig_Logger_Stdlib(level="info", name="example"),
        )
    )
    fetcher.set_logger(stdlib_logger)
    fetcher.fetch("https://example.com/archive.mbox")
    stdlib_logger.notice("Fetched %count% archives", count=0)
    stdlib_logger.debug("Not shown (below INFO)")


if __name__ == "__main__":
    main()
