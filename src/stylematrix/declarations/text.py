"""Text style declarations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .options import DeclarationOptions, ensure_options
from .values import field


def text_style_declaration(
    attr_value: Any,
    options: DeclarationOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get text CSS declarations.

    Args:
        attr_value: Resolved text value, e.g. ``{"orientation": "center"}``
        options: Importance and output shape

    Returns:
        ``text-align`` declaration when an orientation is set
    """
    opts = ensure_options(options, DeclarationOptions)
    declarations = opts.builder()

    declarations.add("text-align", field(attr_value, "orientation"))

    return declarations.value()
