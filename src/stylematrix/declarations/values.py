"""Helpers for reading fields out of resolved attribute values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def is_empty(value: Any) -> bool:
    """
    Check whether a field value counts as unset.

    None, False, zero, ``""``, ``"0"`` and empty containers are unset.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (Mapping, list, tuple, set)):
        return len(value) == 0
    return False


def field(attr_value: Any, name: str, default: Any = None) -> Any:
    """Get a sub-field of an attribute value; non-mapping values have no fields."""
    if isinstance(attr_value, Mapping):
        return attr_value.get(name, default)
    return default


def first_field(attr_value: Any, default_attr_value: Any, *path: str) -> Any:
    """Get a nested sub-field, falling back to the default attribute value."""
    for source in (attr_value, default_attr_value):
        current = source
        for name in path:
            current = field(current, name)
            if current is None:
                break
        if current is not None:
            return current
    return None
