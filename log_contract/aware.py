# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Mixin for classes that accept an injected logger."""

from .logger import Logger
from .null_logger import NullLogger

_NULL_LOGGER = NullLogger()


class LoggerAwareMixin:
    """Gives a class a ``logger`` that defaults to a NullLogger.

    Example:
        >>> class Fetcher(LoggerAwareMixin):
        ...     def fetch(self, url):
        ...         self.logger.debug("Fetching %url%", url=url)
        >>> fetcher = Fetcher()
        >>> fetcher.set_logger(create_logger(config))
    """

    _logger: Logger | None = None

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else _NULL_LOGGER

    def set_logger(self, logger: Logger) -> None:
        """Inject the logger this instance should use."""
        self._logger = logger
