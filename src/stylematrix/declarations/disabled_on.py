"""
Disabled-on declarations.

Modules disabled on a breakpoint stay visible in the builder, either faded
or hidden. These declarations always win over the module's own styles.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .options import DisabledModuleVisibility, DisabledOnOptions, ensure_options


def disabled_on_style_declaration(
    attr_value: Any,
    options: DisabledOnOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, Any]:
    """
    Get disabled-on CSS declarations.

    Args:
        attr_value: ``"on"`` when the module is disabled at this coordinate
        options: Output shape and disabled module visibility

    Returns:
        ``opacity: 0.5`` for transparent visibility, otherwise ``display: none``;
        always ``!important``

    Example:
        disabled_on_style_declaration("on", {"disabledModuleVisibility": "transparent"})
        # "opacity: 0.5 !important"
    """
    opts = ensure_options(options, DisabledOnOptions)
    declarations = opts.builder(important=True)

    if attr_value == "on":
        if opts.disabled_module_visibility == DisabledModuleVisibility.TRANSPARENT:
            declarations.add("opacity", "0.5")
        else:
            declarations.add("display", "none")

    return declarations.value()
