# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for logger factory, configuration and the default logger."""

import os
from unittest.mock import patch

import pytest

import log_contract.factory as factory
from log_contract import (
    AdapterConfig_Logger,
    DriverConfig_Logger_Memory,
    DriverConfig_Logger_Null,
    DriverConfig_Logger_Stdlib,
    Logger,
    MemoryLogger,
    NullLogger,
    StdlibLogger,
    create_logger,
    get_logger,
    load_logger_config,
    set_default_logger,
)


@pytest.fixture(autouse=True)
def reset_logger_state():
    """Reset global logger state before each test."""
    factory._default_logger = None
    yield
    factory._default_logger = None


class TestLoggerFactory:
    """Tests for create_logger factory function."""

    def test_create_null_logger(self):
        """Test creating a null logger."""
        logger = create_logger(AdapterConfig_Logger(logger_type="null", driver=DriverConfig_Logger_Null()))

        assert isinstance(logger, NullLogger)
        assert isinstance(logger, Logger)

    def test_create_memory_logger(self):
        """Test creating a memory logger."""
        logger = create_logger(
            AdapterConfig_Logger(
                logger_type="memory",
                driver=DriverConfig_Logger_Memory(name="test-service", custom_levels=("trace",)),
            )
        )

        assert isinstance(logger, MemoryLogger)
        assert logger.name == "test-service"
        assert logger.accepts_level("trace")

    def test_create_stdlib_logger(self):
        """Test creating a stdlib bridge logger."""
        logger = create_logger(
            AdapterConfig_Logger(
                logger_type="stdlib",
                driver=DriverConfig_Logger_Stdlib(level="debug", name="test-service"),
            )
        )

        assert isinstance(logger, StdlibLogger)
        assert logger.level == "debug"
        assert logger.name == "test-service"

    def test_driver_type_is_case_insensitive(self):
        """Test that the discriminant is normalized."""
        logger = create_logger(AdapterConfig_Logger(logger_type="MEMORY", driver=DriverConfig_Logger_Memory()))

        assert isinstance(logger, MemoryLogger)

    def test_create_unknown_logger_type(self):
        """Test that unknown logger type raises ValueError."""
        with pytest.raises(ValueError, match="Unknown logger driver: invalid"):
            create_logger(AdapterConfig_Logger(logger_type="invalid", driver=DriverConfig_Logger_Null()))

    def test_mismatched_driver_config(self):
        """Test that a driver config of the wrong type raises TypeError."""
        with pytest.raises(TypeError, match="DriverConfig_Logger_Stdlib"):
            create_logger(AdapterConfig_Logger(logger_type="stdlib", driver=DriverConfig_Logger_Null()))

    def test_invalid_level_in_config(self):
        """Test that configuration errors surface at creation time."""
        with pytest.raises(ValueError, match="Invalid log level"):
            create_logger(
                AdapterConfig_Logger(logger_type="stdlib", driver=DriverConfig_Logger_Stdlib(level="loud"))
            )

    def test_create_logger_from_env(self):
        """Test creating logger from environment variables."""
        with patch.dict(os.environ, {
            "LOG_TYPE": "stdlib",
            "LOG_LEVEL": "WARNING",
            "LOG_NAME": "env-service"
        }):
            logger = create_logger()

            assert isinstance(logger, StdlibLogger)
            assert logger.level == "warning"
            assert logger.name == "env-service"

    def test_create_logger_defaults_to_null(self):
        """Test that logger defaults to the null logger when not specified."""
        with patch.dict(os.environ, {}, clear=True):
            logger = create_logger()

            assert isinstance(logger, NullLogger)


class TestLoadLoggerConfig:
    """Tests for load_logger_config."""

    def test_defaults(self):
        """Test configuration from an empty environment."""
        config = load_logger_config({})

        assert config.logger_type == "null"
        assert isinstance(config.driver, DriverConfig_Logger_Null)

    def test_memory(self):
        """Test memory driver configuration."""
        config = load_logger_config({"LOG_TYPE": "Memory", "LOG_NAME": "svc"})

        assert config.logger_type == "memory"
        assert config.driver == DriverConfig_Logger_Memory(level="info", name="svc")

    def test_stdlib(self):
        """Test stdlib driver configuration."""
        config = load_logger_config({"LOG_TYPE": "stdlib", "LOG_LEVEL": "DEBUG"})

        assert config.driver == DriverConfig_Logger_Stdlib(level="debug", name="log_contract")

    def test_unknown_type_is_passed_through(self):
        """Test that unknown types are left for the factory to reject."""
        config = load_logger_config({"LOG_TYPE": "syslog"})

        assert config.logger_type == "syslog"


class TestDefaultLogger:
    """Tests for get_logger and set_default_logger."""

    def test_get_logger_without_default_returns_null_logger(self):
        """Test that get_logger falls back to a NullLogger."""
        logger = get_logger("test.module")

        assert isinstance(logger, NullLogger)
        logger.info("Nothing happens")

    def test_get_logger_without_name_creates_fallback(self):
        """Test that get_logger() with no name and no default creates fallback."""
        assert isinstance(get_logger(), NullLogger)

    def test_get_logger_returns_default_after_set(self):
        """Test that get_logger returns the default logger after set_default_logger."""
        default = MemoryLogger(name="default")
        set_default_logger(default)

        assert get_logger("test.module") is default
        assert get_logger() is default

    def test_get_logger_name_is_advisory(self):
        """Test that every name receives the same default logger."""
        default = MemoryLogger(name="default")
        set_default_logger(default)

        assert get_logger("module.a") is default
        assert get_logger("module.b") is default
        assert default.name == "default"

    def test_set_default_logger_updates_global(self):
        """Test that set_default_logger replaces the previous default."""
        logger1 = MemoryLogger(name="logger1")
        logger2 = MemoryLogger(name="logger2")

        set_default_logger(logger1)
        assert get_logger("test") is logger1

        set_default_logger(logger2)
        assert get_logger("test") is logger2

    def test_get_logger_usage_pattern(self):
        """Test the intended usage pattern: set default in main, get in modules."""
        main_logger = MemoryLogger(name="my-service")
        set_default_logger(main_logger)

        module_logger = get_logger(__name__)
        module_logger.info("Test message", key="value")

        assert main_logger.has_record("Test message", level="info")
