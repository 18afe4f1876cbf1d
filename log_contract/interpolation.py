# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Placeholder substitution for log messages.

A message may reference context values with ``%key%`` tokens:

    >>> interpolate("User %username% created", {"username": "Bob"})
    'User Bob created'

Substitution is a single flat pass over the message. Replacement text is never
scanned again, and tokens only resolve against top-level context keys.
Tokens whose key is missing from the context are left as they are.
"""

import json
import re
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from .context import Context, safe_repr, to_text

PLACEHOLDER_PATTERN = re.compile(r"%([A-Za-z0-9_.]+)%")


def placeholder_names(message: str) -> list[str]:
    """Return the context keys referenced by placeholders in message, in order."""
    return PLACEHOLDER_PATTERN.findall(message)


def stringify(value: Any) -> str:
    """Return the text used to replace a placeholder for value."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, default=to_text, ensure_ascii=False)
        except (TypeError, ValueError, RecursionError):
            # cyclic, too deep, or holding unserializable values
            return safe_repr(value)
    try:
        return str(value)
    except Exception:
        return safe_repr(value)


def interpolate(message: str, context: Context) -> str:
    """Replace ``%key%`` tokens in message with values from context."""
    if not context or "%" not in message:
        return message

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key not in context:
            return match.group(0)
        return stringify(context[key])

    return PLACEHOLDER_PATTERN.sub(_replace, message)
