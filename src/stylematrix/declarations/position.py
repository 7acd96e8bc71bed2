"""
Stacking and ordering declarations: ``z-index`` and flex/grid ``order``.

Unlike most declarations these print empty values: ``z-index`` always
prints and ``order`` prints anything but None.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .options import DeclarationOptions, ensure_options


def z_index_style_declaration(
    attr_value: Any,
    options: DeclarationOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get the ``z-index`` declaration.

    Example:
        z_index_style_declaration(None)  # "z-index: "
    """
    opts = ensure_options(options, DeclarationOptions)
    declarations = opts.builder()

    declarations.set("z-index", "" if attr_value is None else attr_value)

    return declarations.value()


def order_style_declaration(
    attr_value: Any,
    options: DeclarationOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """Get the ``order`` declaration; ``0`` and ``""`` still print."""
    opts = ensure_options(options, DeclarationOptions)
    declarations = opts.builder()

    if attr_value is not None:
        declarations.set("order", attr_value)

    return declarations.value()
