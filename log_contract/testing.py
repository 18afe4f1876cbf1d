# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Reusable pytest conformance tests for Logger implementations.

Subclass ``LoggerConformanceTests`` in a test module, provide a ``logger``
fixture, and implement ``get_logs`` to return what the logger emitted as
``"<level> <message>"`` strings:

    class TestMyLogger(LoggerConformanceTests):
        @pytest.fixture
        def logger(self):
            self.backend = MyLogger()
            return self.backend

        def get_logs(self, logger):
            return [f"{r.level} {r.text}" for r in self.backend.emitted]

Loggers that substitute placeholders (``interpolates = True``) are expected to
emit substituted text; others are expected to emit the raw template.
"""

import datetime
from typing import Any, ClassVar

import pytest

from .errors import InvalidLevelError
from .levels import CustomLevel, LogLevel
from .logger import Logger

ALL_LEVELS = list(LogLevel)


class _Stringable:
    def __str__(self) -> str:
        return "DUMMY"


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot be converted to text")

    def __repr__(self) -> str:
        raise RuntimeError("cannot be represented")


def _cyclic_dict() -> dict[str, Any]:
    value: dict[str, Any] = {"name": "loop"}
    value["self"] = value
    return value


def _cyclic_list() -> list[Any]:
    value: list[Any] = [1]
    value.append(value)
    return value


def _deeply_nested(depth: int = 2000) -> dict[str, Any]:
    value: dict[str, Any] = {}
    for _ in range(depth):
        value = {"child": value}
    return value


CONTEXT_VALUES = [
    pytest.param(None, id="none"),
    pytest.param(True, id="bool"),
    pytest.param(42, id="int"),
    pytest.param(0.5, id="float"),
    pytest.param("text", id="str"),
    pytest.param(b"\xff\xfebytes", id="bytes"),
    pytest.param([1, "two", None], id="list"),
    pytest.param({"nested": {"deeper": [1, 2, {"k": "v"}]}}, id="nested"),
    pytest.param(_deeply_nested(), id="deeply-nested"),
    pytest.param(_cyclic_dict(), id="cyclic-dict"),
    pytest.param(_cyclic_list(), id="cyclic-list"),
    pytest.param(datetime.datetime(2025, 1, 2, 3, 4, 5), id="datetime"),
    pytest.param(object(), id="object"),
    pytest.param(_Stringable(), id="stringable"),
    pytest.param(_Unprintable(), id="unprintable"),
    pytest.param(lambda: None, id="callable"),
    pytest.param({("tuple", "key"): 1}, id="non-str-keys"),
]


class LoggerConformanceTests:
    """Behavior every Logger implementation must share."""

    #: Set on suites for loggers that never emit anything (e.g. NullLogger).
    discards_records: ClassVar[bool] = False

    @pytest.fixture
    def logger(self) -> Logger:
        raise NotImplementedError("provide a logger fixture")

    def get_logs(self, logger: Logger) -> list[str]:
        """Return emitted records as "<level> <message>" strings, oldest first."""
        raise NotImplementedError

    def expected(self, logger: Logger, *lines: str) -> list[str]:
        return [] if self.discards_records else list(lines)

    def render(self, logger: Logger, template: str, substituted: str) -> str:
        return substituted if logger.interpolates else template

    def test_implements_logger_interface(self, logger):
        """The implementation is a Logger."""
        assert isinstance(logger, Logger)

    @pytest.mark.parametrize("level", ALL_LEVELS, ids=lambda lvl: lvl.value)
    def test_named_method_matches_generic_log(self, logger, level):
        """Calling info() and log("info") produce the same record."""
        template = f"message of level {level.value} with context: %user%"
        message = self.render(logger, template, f"message of level {level.value} with context: Bob")

        getattr(logger, level.value)(template, {"user": "Bob"})
        logger.log(level, template, {"user": "Bob"})
        logger.log(level.value, template, {"user": "Bob"})

        line = f"{level.value} {message}"
        assert self.get_logs(logger) == self.expected(logger, line, line, line)

    def test_rejects_unknown_level(self, logger):
        """log() raises InvalidLevelError for a level the logger does not declare."""
        if "invalid level" in logger.custom_levels or logger.accepts_level("invalid level"):
            pytest.skip("logger accepts this custom level")

        with pytest.raises(InvalidLevelError):
            logger.log("invalid level", "Foo")
        with pytest.raises(ValueError):
            logger.log(CustomLevel("invalid level"), "Foo")

    def test_standard_level_spelling_is_exact(self, logger):
        """Only lowercase spellings are standard levels."""
        if logger.accepts_level("INFO"):
            pytest.skip("logger accepts this custom level")

        with pytest.raises(InvalidLevelError):
            logger.log("INFO", "Foo")

    def test_context_replacement(self, logger):
        """Placeholders resolve against context keys."""
        logger.info("User %username% created", {"username": "Bob"})

        message = self.render(logger, "User %username% created", "User Bob created")
        assert self.get_logs(logger) == self.expected(logger, f"info {message}")

    def test_no_nested_replacement(self, logger):
        """Substituted text is not scanned again for placeholders."""
        logger.info("%a%", {"a": "%b%", "b": "X"})

        message = self.render(logger, "%a%", "%b%")
        assert self.get_logs(logger) == self.expected(logger, f"info {message}")

    def test_missing_placeholder_is_left_alone(self, logger):
        """Placeholders without a matching key stay in the message."""
        logger.info("Hello %missing%", {"other": 1})

        assert self.get_logs(logger) == self.expected(logger, "info Hello %missing%")

    def test_keyword_fields_are_context(self, logger):
        """Keyword fields behave like context entries and override them."""
        logger.info("User %username% created", {"username": "Alice"}, username="Bob")

        message = self.render(logger, "User %username% created", "User Bob created")
        assert self.get_logs(logger) == self.expected(logger, f"info {message}")

    def test_fields_may_reuse_parameter_names(self, logger):
        """Fields called level, message or context are ordinary context data."""
        logger.info("Disk usage at %level%", level="high")
        logger.log(LogLevel.WARNING, "%message% in %context%", message="Quota", context="archive")

        first = self.render(logger, "Disk usage at %level%", "Disk usage at high")
        second = self.render(logger, "%message% in %context%", "Quota in archive")
        assert self.get_logs(logger) == self.expected(logger, f"info {first}", f"warning {second}")

    def test_object_message_is_cast_to_string(self, logger):
        """A message object is converted with str()."""
        logger.warning(_Stringable())

        assert self.get_logs(logger) == self.expected(logger, "warning DUMMY")

    def test_unprintable_message_does_not_raise(self, logger):
        """A message whose conversion fails is still logged."""
        logger.error(_Unprintable())

        assert len(self.get_logs(logger)) == len(self.expected(logger, "error <unprintable>"))

    def test_default_context_equals_empty_mapping(self, logger):
        """Omitting context is the same as passing an empty mapping."""
        logger.notice("Test")
        logger.notice("Test", {})
        logger.notice("Test", None)

        assert self.get_logs(logger) == self.expected(logger, "notice Test", "notice Test", "notice Test")

    @pytest.mark.parametrize("value", CONTEXT_VALUES)
    def test_context_can_contain_anything(self, logger, value):
        """Arbitrary context values never make a logging call fail."""
        context = {"value": value, "nested": {"value": value}}

        logger.warning("Crazy context %value%", context)
        for level in ALL_LEVELS:
            logger.log(level, "Crazy context %nested%", context)

        assert len(self.get_logs(logger)) == len(self.expected(logger, *["x"] * (len(ALL_LEVELS) + 1)))

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(RuntimeError("boom"), id="exception"),
            pytest.param(KeyboardInterrupt(), id="base-exception"),
            pytest.param("not an exception", id="str"),
            pytest.param({"type": "ValueError"}, id="mapping"),
            pytest.param(RuntimeError, id="exception-class"),
            pytest.param(None, id="none"),
        ],
    )
    def test_exception_key_may_hold_anything(self, logger, value):
        """The "exception" key is only treated as an exception when it is one."""
        logger.critical("Random message", {"exception": value})

        assert self.get_logs(logger) == self.expected(logger, "critical Random message")

    def test_raised_exception_in_context(self, logger):
        """An exception caught in an except block can be passed as context."""
        try:
            raise ValueError("bad value")
        except ValueError as exc:
            logger.error("Failed: %exception%", {"exception": exc})

        message = self.render(logger, "Failed: %exception%", "Failed: bad value")
        assert self.get_logs(logger) == self.expected(logger, f"error {message}")

    def test_non_mapping_context_does_not_raise(self, logger):
        """A context that is not a mapping is tolerated."""
        logger.info("Odd context", ["not", "a", "mapping"])  # type: ignore[arg-type]
        logger.info("Odd context", "text")  # type: ignore[arg-type]

        assert self.get_logs(logger) == self.expected(logger, "info Odd context", "info Odd context")
