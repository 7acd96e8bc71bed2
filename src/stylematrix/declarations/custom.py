"""Verbatim custom declarations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .options import CustomOptions, ensure_options


def custom_style_declaration(
    attr_value: Any,
    options: CustomOptions | Mapping[str, Any],
) -> str | dict[str, Any]:
    """
    Print ``<property>: <value>`` without validating either side.

    Example:
        custom_style_declaration("1px solid red", {"property": "outline", "important": True})
        # "outline: 1px solid red !important"
    """
    opts = ensure_options(options, CustomOptions)
    declarations = opts.builder()

    declarations.add(opts.css_property, attr_value)

    return declarations.value()
