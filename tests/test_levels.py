# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for the level taxonomy."""

import logging

import pytest

from log_contract import CustomLevel, LogLevel
from log_contract.levels import level_name


class TestLogLevel:
    """Tests for LogLevel."""

    def test_exact_spellings(self):
        """Test the eight canonical level values in severity order."""
        assert [level.value for level in LogLevel] == [
            "emergency",
            "alert",
            "critical",
            "error",
            "warning",
            "notice",
            "info",
            "debug",
        ]

    def test_levels_are_strings(self):
        """Test that levels compare equal to their string values."""
        assert LogLevel.INFO == "info"
        assert str(LogLevel.WARNING) == "warning"

    def test_severity_order(self):
        """Test that emergency is the most severe level."""
        assert LogLevel.EMERGENCY.severity == 0
        assert LogLevel.DEBUG.severity == 7
        severities = [level.severity for level in LogLevel]
        assert severities == sorted(severities)

    def test_is_at_least(self):
        """Test threshold comparisons."""
        assert LogLevel.ERROR.is_at_least(LogLevel.WARNING)
        assert LogLevel.WARNING.is_at_least(LogLevel.WARNING)
        assert not LogLevel.DEBUG.is_at_least(LogLevel.INFO)
        assert LogLevel.EMERGENCY.is_at_least(LogLevel.DEBUG)

    def test_stdlib_levels(self):
        """Test mapping onto numeric logging levels."""
        assert LogLevel.DEBUG.stdlib_level == logging.DEBUG
        assert LogLevel.INFO.stdlib_level == logging.INFO
        assert LogLevel.WARNING.stdlib_level == logging.WARNING
        assert LogLevel.ERROR.stdlib_level == logging.ERROR
        assert LogLevel.CRITICAL.stdlib_level == logging.CRITICAL
        numeric = [level.stdlib_level for level in LogLevel]
        assert numeric == sorted(numeric, reverse=True)

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_parse_standard_values(self, level):
        """Test parsing each standard spelling and member."""
        assert LogLevel.parse(level.value) is level
        assert LogLevel.parse(level) is level

    @pytest.mark.parametrize("value", ["INFO", "Info", "trace", "", " info", 20, None])
    def test_parse_non_standard_values(self, value):
        """Test that anything but the exact spellings is not standard."""
        assert LogLevel.parse(value) is None


class TestCustomLevel:
    """Tests for CustomLevel."""

    def test_str(self):
        """Test the string form of a custom level."""
        assert str(CustomLevel("trace")) == "trace"

    def test_equality(self):
        """Test that custom levels are compared by name."""
        assert CustomLevel("trace") == CustomLevel("trace")
        assert CustomLevel("trace") != CustomLevel("audit")

    def test_level_name(self):
        """Test canonical names for every accepted level form."""
        assert level_name(LogLevel.NOTICE) == "notice"
        assert level_name(CustomLevel("audit")) == "audit"
        assert level_name("audit") == "audit"
