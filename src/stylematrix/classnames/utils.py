"""
Conditional classname joining.

Works like the ``classnames`` JS package, except that a classname only
counts when it contains at least one letter.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_HAS_LETTER = re.compile(r"[a-z]", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def _is_classname(value: Any) -> bool:
    return isinstance(value, str) and _HAS_LETTER.search(value) is not None


def classnames(*args: Any) -> str:
    """
    Join classnames, keeping flagged and deduplicated entries.

    Args:
        *args: Strings, mappings of classname -> flag, or lists of classnames

    Returns:
        Space-joined, trimmed classnames; empty string when none apply

    Example:
        classnames("button", {"button--active": True, "button--hidden": False}, ["icon"])
        # "button button--active icon"
    """
    flags: dict[str, bool] = {}

    for arg in args:
        if _is_classname(arg):
            flags[arg.strip()] = True
        elif isinstance(arg, (Mapping, list, tuple)):
            entries = arg.items() if isinstance(arg, Mapping) else enumerate(arg)
            for key, value in entries:
                if _is_classname(key):
                    flags[key.strip()] = bool(value)
                elif _is_classname(value):
                    flags[value.strip()] = True

    joined = " ".join(name for name, enabled in flags.items() if enabled)
    if "  " in joined:
        joined = _WHITESPACE.sub(" ", joined)

    return joined.strip()
