"""Text option classnames."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stylematrix.core.breakpoints import BreakpointInfo, get_breakpoint_info

TEXT_ORIENTATIONS: frozenset[str] = frozenset({"left", "center", "right", "justify"})


def text_alignment_classnames(
    attr: Mapping[str, Mapping[str, Any]] | None,
    *,
    info: BreakpointInfo | None = None,
) -> str:
    """
    Get text alignment classnames for every breakpoint with an orientation.

    The default breakpoint has no suffix; other breakpoints are suffixed
    with ``-<breakpoint>``. Only the default state is considered.

    Example:
        text_alignment_classnames({
            "desktop": {"value": {"orientation": "justify"}},
            "phone": {"value": {"orientation": "left"}},
        })
        # "et_pb_text_align_justified et_pb_text_align_left-phone"
    """
    if not attr:
        return ""

    breakpoint_info = get_breakpoint_info(info)
    classes: list[str] = []

    for breakpoint, states in attr.items():
        value = states.get(breakpoint_info.default_state) if isinstance(states, Mapping) else None
        orientation = value.get("orientation") if isinstance(value, Mapping) else None
        if orientation not in TEXT_ORIENTATIONS:
            continue

        name = "justified" if orientation == "justify" else orientation
        suffix = "" if breakpoint == breakpoint_info.default_breakpoint else f"-{breakpoint}"
        classes.append(f"et_pb_text_align_{name}{suffix}")

    return " ".join(classes)
