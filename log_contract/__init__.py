# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logging contract for libraries.

Library code depends only on the ``Logger`` interface and logs through it;
applications decide which implementation backs it. Without a configured
logger, ``get_logger`` returns a ``NullLogger`` that discards everything.

Example:
    >>> from log_contract import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("User %username% created", {"username": "Bob"})
    >>>
    >>> # Application startup
    >>> from log_contract import create_logger, set_default_logger
    >>> from log_contract.config import AdapterConfig_Logger, DriverConfig_Logger_Stdlib
    >>> set_default_logger(
    ...     create_logger(
    ...         AdapterConfig_Logger(
    ...             logger_type="stdlib",
    ...             driver=DriverConfig_Logger_Stdlib(level="info", name="my-service"),
    ...         )
    ...     )
    ... )
"""

__version__ = "0.1.0"

from .aware import LoggerAwareMixin
from .config import (
    AdapterConfig_Logger,
    DriverConfig_Logger_Memory,
    DriverConfig_Logger_Null,
    DriverConfig_Logger_Stdlib,
    load_logger_config,
)
from .context import EXCEPTION_KEY, Context
from .errors import InvalidLevelError, LogContractError
from .factory import create_logger, get_logger, set_default_logger
from .interpolation import interpolate
from .levels import CustomLevel, LogLevel
from .logger import Logger
from .memory_logger import MemoryLogger
from .null_logger import NullLogger
from .record import LogRecord
from .stdlib_logger import StdlibLogger

__all__ = [
    # Version
    "__version__",
    # Contract
    "Logger",
    "LogLevel",
    "CustomLevel",
    "Context",
    "EXCEPTION_KEY",
    "LogRecord",
    "interpolate",
    # Implementations
    "NullLogger",
    "MemoryLogger",
    "StdlibLogger",
    "LoggerAwareMixin",
    # Factory
    "AdapterConfig_Logger",
    "DriverConfig_Logger_Null",
    "DriverConfig_Logger_Memory",
    "DriverConfig_Logger_Stdlib",
    "load_logger_config",
    "create_logger",
    "get_logger",
    "set_default_logger",
    # Errors
    "LogContractError",
    "InvalidLevelError",
]
