# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Helpers for turning caller input into safe message text and context data.

None of these functions raise on odd input. Logging must not change the
caller's control flow, so every conversion has a fallback.
"""

from collections.abc import Mapping
from typing import Any

EXCEPTION_KEY = "exception"

Context = Mapping[str, Any]

_UNPRINTABLE = "<unprintable {}>"


def safe_repr(value: Any) -> str:
    """Return repr(value), or a placeholder naming its type if repr fails."""
    try:
        return repr(value)
    except Exception:
        return _UNPRINTABLE.format(type(value).__name__)


def to_text(message: Any) -> str:
    """Convert a log message to text.

    Strings pass through unchanged, bytes are decoded as UTF-8 and any other
    value goes through ``str()``.
    """
    if isinstance(message, str):
        return message
    if isinstance(message, (bytes, bytearray)):
        return bytes(message).decode("utf-8", errors="replace")
    try:
        return str(message)
    except Exception:
        return safe_repr(message)


def normalize_context(context: Any = None, fields: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a plain dict from a context argument plus keyword fields.

    Args:
        context: Mapping of context data. None means empty. A value that is
            not a mapping is kept under the "context" key.
        fields: Keyword fields passed to the logging call; they win over
            entries in context with the same key.

    Returns:
        A new dict with string keys
    """
    result: dict[str, Any] = {}

    if context is not None:
        if isinstance(context, Mapping):
            try:
                items = list(context.items())
            except Exception:
                items = [("context", context)]
            for key, value in items:
                result[key if isinstance(key, str) else to_text(key)] = value
        else:
            result["context"] = context

    if fields:
        result.update(fields)

    return result


def extract_exception(context: Context) -> BaseException | None:
    """Return the context's "exception" value if it really is an exception."""
    value = context.get(EXCEPTION_KEY)
    if isinstance(value, BaseException):
        return value
    return None
