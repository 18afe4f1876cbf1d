# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating logger instances."""

import logging

from .adapter_factory import create_adapter
from .config import (
    AdapterConfig_Logger,
    DriverConfig_Logger_Memory,
    DriverConfig_Logger_Null,
    DriverConfig_Logger_Stdlib,
    _DriverConfig,
    load_logger_config,
)
from .logger import Logger
from .memory_logger import MemoryLogger
from .null_logger import NullLogger
from .stdlib_logger import StdlibLogger

logger = logging.getLogger(__name__)

_default_logger: Logger | None = None


def _build_null(config: _DriverConfig) -> Logger:
    if not isinstance(config, DriverConfig_Logger_Null):
        raise TypeError("driver config must be DriverConfig_Logger_Null")
    return NullLogger.from_config(config)


def _build_memory(config: _DriverConfig) -> Logger:
    if not isinstance(config, DriverConfig_Logger_Memory):
        raise TypeError("driver config must be DriverConfig_Logger_Memory")
    return MemoryLogger.from_config(config)


def _build_stdlib(config: _DriverConfig) -> Logger:
    if not isinstance(config, DriverConfig_Logger_Stdlib):
        raise TypeError("driver config must be DriverConfig_Logger_Stdlib")
    return StdlibLogger.from_config(config)


def create_logger(config: AdapterConfig_Logger | None = None) -> Logger:
    """Create a logger based on driver type.

    Supported drivers:
    - "null": Discards every record
    - "memory": Keeps records in memory for tests
    - "stdlib": Forwards records to the ``logging`` module

    Args:
        config: Typed AdapterConfig_Logger instance. If None, the configuration
            is read from LOG_TYPE, LOG_LEVEL and LOG_NAME.

    Returns:
        Logger instance

    Raises:
        ValueError: If the driver type is unknown or the level is invalid
        TypeError: If the driver config does not match the driver type

    Example:
        >>> from log_contract.config import AdapterConfig_Logger, DriverConfig_Logger_Stdlib
        >>> logger = create_logger(
        ...     AdapterConfig_Logger(
        ...         logger_type="stdlib",
        ...         driver=DriverConfig_Logger_Stdlib(level="debug", name="my-service"),
        ...     )
        ... )
    """
    if config is None:
        config = load_logger_config()

    return create_adapter(
        config,
        adapter_name="logger",
        get_driver_type=lambda c: c.logger_type,
        get_driver_config=lambda c: c.driver,
        drivers={
            "null": _build_null,
            "memory": _build_memory,
            "stdlib": _build_stdlib,
        },
    )


def set_default_logger(default: Logger) -> None:
    """Set the process-wide logger returned by get_logger().

    Call once at startup, before modules fetch their loggers.
    """
    global _default_logger
    _default_logger = default
    logger.debug("Default logger set to %s", type(default).__name__)


def get_logger(name: str | None = None) -> Logger:
    """Return the logger a module should use.

    Returns the default logger set by set_default_logger(). Without a
    default, returns a NullLogger so library code can log unconditionally.

    Args:
        name: Optional name of the requesting module. Advisory only: every
            name receives the same default logger.

    Returns:
        Logger instance
    """
    if _default_logger is None:
        return NullLogger()
    return _default_logger
