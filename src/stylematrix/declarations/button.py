"""
Button style declarations.

Covers button alignment, the optional button icon and the padding reserved
for that icon.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stylematrix.icons import escape_font_icon, font_family_for

from .builder import Importance, PerProperty
from .options import ButtonOptions, DeclarationOptions, ensure_options
from .values import field, first_field, is_empty

# Properties the button icon always marks important, whatever the caller asks.
_ALWAYS_IMPORTANT_ICON_PROPERTIES: tuple[str, ...] = ("font-family", "font-weight", "line-height")

# Properties that follow the caller's uniform importance.
_BUTTON_ICON_PROPERTIES: tuple[str, ...] = (
    "content",
    "display",
    "color",
    "opacity",
    "left",
    "right",
)


def button_style_declaration(
    attr_value: Any,
    options: DeclarationOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get button alignment CSS declarations.

    Example:
        button_style_declaration({"alignment": "right"})  # "text-align: right"
    """
    opts = ensure_options(options, DeclarationOptions)
    declarations = opts.builder()

    declarations.add("text-align", field(attr_value, "alignment"))

    return declarations.value()


def _button_icon_importance(important: Importance, settings: Any) -> dict[str, bool]:
    always_important = {name: True for name in _ALWAYS_IMPORTANT_ICON_PROPERTIES}
    always_important["font-size"] = not is_empty(field(settings, "unicode"))

    if isinstance(important, PerProperty):
        return {**always_important, **important.properties}
    return {
        **always_important,
        **{name: important.important for name in _BUTTON_ICON_PROPERTIES},
    }


def button_icon_style_declaration(
    attr_value: Any,
    options: ButtonOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get button icon CSS declarations.

    Args:
        attr_value: Button value; reads ``icon.enable``, ``icon.settings``,
            ``icon.color``, ``icon.onHover`` and ``icon.placement``
        options: Importance, output shape, vendor check and default button value

    Returns:
        Icon pseudo-element declarations; empty output without an ``icon`` field
    """
    opts = ensure_options(options, ButtonOptions)
    if field(attr_value, "icon") is None:
        return opts.builder().value()

    default = opts.default_attr_value
    enable = first_field(attr_value, default, "icon", "enable")
    settings = first_field(attr_value, default, "icon", "settings") or {}
    color = first_field(attr_value, default, "icon", "color")
    on_hover = first_field(attr_value, default, "icon", "onHover")
    placement = first_field(attr_value, default, "icon", "placement") or "right"

    declarations = opts.builder(important=_button_icon_importance(opts.important, settings))

    if enable == "on":
        glyph = escape_font_icon(field(settings, "unicode"))

        declarations.add(
            "font-family", f'"{font_family_for(settings or None, opts.is_vendor_icon)}"'
        )
        declarations.add("font-weight", field(settings, "weight", "400"))

        if settings and not is_empty(glyph):
            declarations.add("content", f"'{glyph}'")

        declarations.add("font-size", "inherit")
        declarations.add("line-height", "1.7em")
        declarations.add("display", "inline-block")

        if is_empty(glyph):
            declarations.add("font-size", "1.6em")
    else:
        declarations.add("font-size", "1.6em")

    if not is_empty(color):
        declarations.add("color", color)

    if not is_empty(field(settings, "unicode")):
        declarations.add("left" if placement == "left" else "right", "0.6em")

    if on_hover == "off":
        declarations.add("opacity", "1")
    elif on_hover == "on":
        declarations.add("opacity", "0")

    return declarations.value()


def button_icon_disable_style_declaration(
    attr_value: Any,
    options: ButtonOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """Hide the button icon when it is switched off; always ``!important``."""
    opts = ensure_options(options, ButtonOptions)
    declarations = opts.builder(important=True)

    if first_field(attr_value, opts.default_attr_value, "icon", "enable") == "off":
        declarations.add("display", "none")

    return declarations.value()


def button_icon_hover_style_declaration(
    attr_value: Any,
    options: ButtonOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """Reveal an enabled button icon on hover; never ``!important``."""
    opts = ensure_options(options, ButtonOptions)
    declarations = opts.builder(important=False)

    if first_field(attr_value, opts.default_attr_value, "icon", "enable") == "on":
        declarations.add("opacity", "1")

    return declarations.value()


def button_right_icon_style_declaration(
    attr_value: Any,
    options: ButtonOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Hide the right-hand icon pseudo-element of a left-placed button icon.

    Example:
        button_right_icon_style_declaration({"icon": {"enable": "on", "placement": "left"}})
        # "display: none"
    """
    opts = ensure_options(options, ButtonOptions)
    declarations = opts.builder()

    default = opts.default_attr_value
    enable = first_field(attr_value, default, "icon", "enable")
    placement = first_field(attr_value, default, "icon", "placement")

    if enable == "on" and placement == "left":
        declarations.add("display", "none")

    return declarations.value()


def _icon_spacing(attr_value: Any, default: dict[str, Any]) -> tuple[bool, Any, Any, Any]:
    placement = first_field(attr_value, default, "icon", "placement")
    on_hover = first_field(attr_value, default, "icon", "onHover")
    enable = first_field(attr_value, default, "icon", "enable")
    padding = first_field(attr_value, default, "padding") or {}
    return placement == "left", on_hover, enable, padding


def spacing_icon_style_declaration(
    attr_value: Any,
    options: ButtonOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get the padding reserved for an always-visible button icon.

    Only sides without an explicit padding are printed.

    Example:
        spacing_icon_style_declaration({"icon": {"enable": "on", "onHover": "off"}})
        # "padding-right: 2em; padding-left: 0.7em"
    """
    opts = ensure_options(options, ButtonOptions)
    declarations = opts.builder(important=False)

    is_left, on_hover, enable, padding = _icon_spacing(attr_value, opts.default_attr_value)
    shows_icon = on_hover == "off" and enable == "on"

    if shows_icon and is_empty(field(padding, "right")):
        declarations.add("padding-right", "0.7em" if is_left else "2em")

    if shows_icon and is_empty(field(padding, "left")):
        declarations.add("padding-left", "2em" if is_left else "0.7em")

    return declarations.value()


def spacing_icon_hover_style_declaration(
    attr_value: Any,
    options: ButtonOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get the hover padding for a button icon revealed on hover.

    A disabled icon without explicit padding resets to ``0.3em 1em``.
    """
    opts = ensure_options(options, ButtonOptions)
    declarations = opts.builder(
        important={"padding": True, "padding-left": False, "padding-right": False}
    )

    is_left, on_hover, enable, padding = _icon_spacing(attr_value, opts.default_attr_value)
    shows_icon = on_hover in ("on", None) and enable == "on"

    if shows_icon and is_empty(field(padding, "right")):
        declarations.add("padding-right", "0.7em" if is_left else "2em")

    if shows_icon and is_empty(field(padding, "left")):
        declarations.add("padding-left", "2em" if is_left else "0.7em")

    if is_empty(padding) and enable == "off":
        declarations.add("padding", "0.3em 1em")

    return declarations.value()
