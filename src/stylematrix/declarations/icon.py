"""
Icon style declarations.

Covers the icon option group (font icon glyph, weight, size and color) and
the overlay icon printed over images on hover.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stylematrix.icons import escape_font_icon, font_family_for

from .options import IconOptions, ensure_options
from .values import field, is_empty

ICON_PROPERTIES: tuple[str, ...] = (
    "font-family",
    "content",
    "font-weight",
    "font-size",
    "line-height",
    "color",
)


def icon_style_declaration(
    attr_value: Any,
    options: IconOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get icon CSS declarations.

    Args:
        attr_value: Icon value with ``unicode``, ``type``, ``weight``,
            ``useSize``, ``size`` and ``color`` fields
        options: Importance (bool or per-property map keyed by
            ``ICON_PROPERTIES``), output shape and vendor check

    Returns:
        Icon declarations; empty output when there is no icon value

    Example:
        icon_style_declaration(
            {"unicode": "&#x4e;", "type": "divi", "weight": "400", "useSize": "on", "size": "32px"}
        )
        # "font-family: ETmodules; content: '\\4e'; font-weight: 400; font-size: 32px; line-height: 32px"
    """
    opts = ensure_options(options, IconOptions)
    declarations = opts.builder()

    if not isinstance(attr_value, Mapping) or not attr_value:
        return declarations.value()

    declarations.add("font-family", font_family_for(attr_value, opts.is_vendor_icon))

    glyph = escape_font_icon(attr_value.get("unicode"))
    if not is_empty(glyph):
        declarations.add("content", f"'{glyph}'")

    weight = attr_value.get("weight")
    if not is_empty(weight):
        declarations.add("font-weight", weight)

    size = attr_value.get("size")
    if attr_value.get("useSize") == "on" and not is_empty(size):
        declarations.add("font-size", size)
        declarations.add("line-height", size)

    color = attr_value.get("color")
    if not is_empty(color):
        declarations.add("color", color)

    return declarations.value()


def overlay_icon_style_declaration(
    attr_value: Any,
    options: IconOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get overlay icon CSS declarations.

    ``type`` only needs to be present to print the font family; neither
    field is validated.
    """
    opts = ensure_options(options, IconOptions)
    declarations = opts.builder()

    if field(attr_value, "type") is not None:
        declarations.add("font-family", font_family_for(attr_value, opts.is_vendor_icon))

    weight = field(attr_value, "weight")
    if weight is not None:
        declarations.add("font-weight", weight)

    return declarations.value()
