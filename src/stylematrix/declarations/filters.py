"""
Filter style declarations.

Filter functions are always printed in one fixed order so the same settings
produce the same ``filter`` value regardless of how they were stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stylematrix.attrs.resolver import ResolveMode, resolve
from stylematrix.core.breakpoints import get_breakpoint_info

from .options import FiltersOptions, ensure_options
from .values import field, is_empty

FILTER_FUNCTIONS: tuple[str, ...] = (
    "hueRotate",
    "saturate",
    "brightness",
    "contrast",
    "invert",
    "sepia",
    "opacity",
    "blur",
)

# Attribute fields whose CSS function name differs from the field name.
_CSS_FUNCTION_NAMES: Mapping[str, str] = {"hueRotate": "hue-rotate"}


def filters_value(attr_value: Any) -> str:
    """
    Get the CSS ``filter`` value for a filters attribute value.

    Example:
        filters_value({"opacity": "0.5", "hueRotate": "90deg"})
        # "hue-rotate(90deg) opacity(0.5)"
    """
    functions: list[str] = []

    for name in FILTER_FUNCTIONS:
        value = field(attr_value, name)
        if is_empty(value):
            continue
        functions.append(f"{_CSS_FUNCTION_NAMES.get(name, name)}({value})")

    return " ".join(functions)


def filters_style_declaration(
    attr_value: Any,
    options: FiltersOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get filter CSS declarations.

    When ``options.attr`` holds the full attribute matrix, the value for
    ``options.breakpoint`` / ``options.state`` is resolved with full
    inheritance first (or ``options.mode``); ``attr_value`` is used when
    nothing resolves.

    Args:
        attr_value: Filters value, e.g. ``{"hueRotate": "90deg", "blendMode": "multiply"}``
        options: Importance, output shape and inheritance parameters

    Returns:
        ``filter`` and ``mix-blend-mode`` declarations
    """
    opts = ensure_options(options, FiltersOptions)

    final_attr_value = attr_value
    if opts.attr:
        info = get_breakpoint_info(opts.info)
        final_attr_value = resolve(
            opts.attr,
            opts.breakpoint or info.default_breakpoint,
            opts.state or info.default_state,
            opts.mode,
            attr_value,
            info=info,
        )

    declarations = opts.builder()

    filter_declaration = filters_value(final_attr_value)
    if filter_declaration:
        declarations.add("filter", filter_declaration)

    blend_mode = field(final_attr_value, "blendMode")
    if blend_mode is not None:
        declarations.add("mix-blend-mode", blend_mode)

    return declarations.value()
