# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Typed configuration for logger drivers."""

import os
from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_LOGGER_TYPE = "null"
DEFAULT_LEVEL = "info"
DEFAULT_NAME = "log_contract"


@dataclass
class DriverConfig_Logger_Null:
    """Configuration for the no-op logger. It has no settings."""


@dataclass
class DriverConfig_Logger_Memory:
    """Configuration for the in-memory logger.

    Attributes:
        level: Level name, stored for introspection only
        name: Logger name for identification
        custom_levels: Extra level names accepted by log()
    """
    level: str = "debug"
    name: str | None = None
    custom_levels: tuple[str, ...] = ()


@dataclass
class DriverConfig_Logger_Stdlib:
    """Configuration for the ``logging`` bridge.

    Attributes:
        level: Minimum level to emit
        name: Name of the stdlib logger records are sent to
        custom_levels: Extra level names mapped to numeric stdlib levels
    """
    level: str = DEFAULT_LEVEL
    name: str | None = None
    custom_levels: dict[str, int] = field(default_factory=dict)


_DriverConfig = DriverConfig_Logger_Null | DriverConfig_Logger_Memory | DriverConfig_Logger_Stdlib


@dataclass
class AdapterConfig_Logger:
    """Logger adapter configuration.

    Attributes:
        logger_type: Driver discriminant ("null", "memory", "stdlib")
        driver: Driver-specific configuration
    """
    logger_type: str
    driver: _DriverConfig


def _default(value: str | None, fallback: str) -> str:
    """Helper to pick a non-empty value, then fallback."""
    return value or fallback


def load_logger_config(env: Mapping[str, str] | None = None) -> AdapterConfig_Logger:
    """Build a logger configuration from environment variables.

    Reads LOG_TYPE (default "null"), LOG_LEVEL (default "info") and LOG_NAME
    (default "log_contract").

    Args:
        env: Mapping to read from instead of os.environ

    Returns:
        AdapterConfig_Logger for the selected driver. Unknown LOG_TYPE values
        are passed through so the factory can reject them.
    """
    env = os.environ if env is None else env
    logger_type = _default(env.get("LOG_TYPE"), DEFAULT_LOGGER_TYPE).lower()
    level = _default(env.get("LOG_LEVEL"), DEFAULT_LEVEL).lower()
    name = _default(env.get("LOG_NAME"), DEFAULT_NAME)

    driver: _DriverConfig
    if logger_type == "memory":
        driver = DriverConfig_Logger_Memory(level=level, name=name)
    elif logger_type == "stdlib":
        driver = DriverConfig_Logger_Stdlib(level=level, name=name)
    else:
        driver = DriverConfig_Logger_Null()

    return AdapterConfig_Logger(logger_type=logger_type, driver=driver)
