# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Run the shared conformance suite against every bundled logger."""

import logging

import pytest

from log_contract import MemoryLogger, NullLogger, StdlibLogger
from log_contract.testing import LoggerConformanceTests


class TestMemoryLoggerConformance(LoggerConformanceTests):
    """Conformance of the in-memory (non-substituting) logger."""

    @pytest.fixture
    def logger(self):
        return MemoryLogger()

    def get_logs(self, logger):
        return [f"{record.level_name} {record.message}" for record in logger.records]


class TestStdlibLoggerConformance(LoggerConformanceTests):
    """Conformance of the logging bridge (substituting) logger."""

    @pytest.fixture
    def logger(self, caplog):
        caplog.set_level(logging.DEBUG)
        self._caplog = caplog
        return StdlibLogger(level="debug", name="conformance")

    def get_logs(self, logger):
        return [
            f"{record.log_level} {record.getMessage()}"
            for record in self._caplog.records
            if record.name == "conformance"
        ]


class TestNullLoggerConformance(LoggerConformanceTests):
    """Conformance of the no-op logger."""

    discards_records = True

    @pytest.fixture
    def logger(self):
        return NullLogger()

    def get_logs(self, logger):
        return []
