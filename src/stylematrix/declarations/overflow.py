"""Overflow style declarations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .options import DeclarationOptions, ensure_options
from .values import field

OVERFLOW_VALUES: frozenset[str] = frozenset({"visible", "scroll", "hidden", "auto"})


def overflow_style_declaration(
    attr_value: Any,
    options: DeclarationOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get overflow CSS declarations.

    Values outside ``visible | scroll | hidden | auto`` are dropped.

    Example:
        overflow_style_declaration({"x": "bogus", "y": "hidden"})
        # "overflow-y: hidden"
    """
    opts = ensure_options(options, DeclarationOptions)
    declarations = opts.builder()

    for axis in ("x", "y"):
        value = field(attr_value, axis)
        if isinstance(value, str) and value in OVERFLOW_VALUES:
            declarations.add(f"overflow-{axis}", value)

    return declarations.value()
