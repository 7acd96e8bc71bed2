"""
Style declarations.

Pure functions turning a resolved attribute value into CSS declarations,
each built with a fresh ``DeclarationBuilder``.

Usage:
    from stylematrix.declarations import DeclarationOptions, filters_style_declaration

    filters_style_declaration({"hueRotate": "90deg", "opacity": "0.5"})
    # "filter: hue-rotate(90deg) opacity(0.5)"

    filters_style_declaration(
        {"blendMode": "multiply"},
        DeclarationOptions(return_type="keyValue", important=True),
    )
    # {"mix-blend-mode": "multiply !important"}
"""

from .builder import (
    IMPORTANT_SUFFIX,
    DeclarationBuilder,
    Importance,
    PerProperty,
    ReturnType,
    Uniform,
    format_value,
    join_declarations,
    to_importance,
)
from .button import (
    button_icon_disable_style_declaration,
    button_icon_hover_style_declaration,
    button_icon_style_declaration,
    button_right_icon_style_declaration,
    button_style_declaration,
    spacing_icon_hover_style_declaration,
    spacing_icon_style_declaration,
)
from .custom import custom_style_declaration
from .disabled_on import disabled_on_style_declaration
from .filters import FILTER_FUNCTIONS, filters_style_declaration, filters_value
from .icon import ICON_PROPERTIES, icon_style_declaration, overlay_icon_style_declaration
from .options import (
    ButtonOptions,
    CustomOptions,
    DeclarationOptions,
    DisabledModuleVisibility,
    DisabledOnOptions,
    FiltersOptions,
    IconOptions,
)
from .overflow import OVERFLOW_VALUES, overflow_style_declaration
from .position import order_style_declaration, z_index_style_declaration
from .text import text_style_declaration

__all__ = [
    # Builder
    "DeclarationBuilder",
    "Importance",
    "Uniform",
    "PerProperty",
    "ReturnType",
    "IMPORTANT_SUFFIX",
    "to_importance",
    "format_value",
    "join_declarations",
    # Options
    "DeclarationOptions",
    "FiltersOptions",
    "IconOptions",
    "CustomOptions",
    "DisabledOnOptions",
    "DisabledModuleVisibility",
    "ButtonOptions",
    # Declarations
    "button_style_declaration",
    "button_icon_style_declaration",
    "button_icon_disable_style_declaration",
    "button_icon_hover_style_declaration",
    "button_right_icon_style_declaration",
    "spacing_icon_style_declaration",
    "spacing_icon_hover_style_declaration",
    "text_style_declaration",
    "overflow_style_declaration",
    "OVERFLOW_VALUES",
    "filters_style_declaration",
    "filters_value",
    "FILTER_FUNCTIONS",
    "icon_style_declaration",
    "overlay_icon_style_declaration",
    "ICON_PROPERTIES",
    "z_index_style_declaration",
    "order_style_declaration",
    "custom_style_declaration",
    "disabled_on_style_declaration",
]
