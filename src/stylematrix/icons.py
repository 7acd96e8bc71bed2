"""
Icon font helpers.

Glyph lookup itself happens in the host; these helpers only pick the font
family and escape a glyph for use in a CSS ``content`` declaration.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

FONT_AWESOME_FAMILY = "FontAwesome"
DEFAULT_ICON_FAMILY = "ETmodules"

VendorCheck = Callable[[Mapping[str, Any]], bool]

# Glyphs that would break out of a quoted CSS string.
_SPECIAL_GLYPHS: Mapping[str, str] = {
    "\\": "\\\\",
    "'": "\\'",
    "<": "\\003C",
    ">": "\\003E",
}


def is_fa_icon(icon: Mapping[str, Any] | None) -> bool:
    """Check whether an icon value belongs to the Font Awesome set."""
    return isinstance(icon, Mapping) and icon.get("type") == "fa"


def font_family_for(icon: Mapping[str, Any] | None, is_vendor_icon: VendorCheck | None = None) -> str:
    """Get the icon font family for an icon value."""
    check = is_vendor_icon or is_fa_icon
    return FONT_AWESOME_FAMILY if check(icon or {}) else DEFAULT_ICON_FAMILY


def escape_font_icon(icon: Any) -> str | None:
    """
    Escape a decoded glyph for a CSS ``content`` value.

    HTML hex entities are converted to CSS escapes, e.g. ``&#x3c;`` -> ``\\3c``.

    Returns:
        The escaped glyph, or None for non-string or empty input
    """
    if not isinstance(icon, str) or icon == "":
        return None

    icon = _SPECIAL_GLYPHS.get(icon, icon)

    if "#x" in icon:
        icon = icon.replace("&amp;#x", "\\").replace("&#x", "\\")
        icon = icon.replace(";", "")

    return icon
