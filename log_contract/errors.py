# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exception types for the logging contract."""

from typing import Any


class LogContractError(Exception):
    """Base exception for all logging contract errors."""


class InvalidLevelError(LogContractError, ValueError):
    """Raised when log() receives a level the logger does not recognize.

    This is the only error a logging call is allowed to surface. It subclasses
    ValueError so callers can treat it as an ordinary invalid-argument error.
    """

    def __init__(self, level: Any, supported: list[str] | None = None):
        self.level = level
        self.supported = supported or []
        message = f"Invalid log level: {level!r}."
        if self.supported:
            message += f" Must be one of: {', '.join(self.supported)}"
        super().__init__(message)
