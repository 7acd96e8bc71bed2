"""
Uniformity checks for attribute value matrices.

The live-preview sync layer only needs per-coordinate DOM patching when an
attribute holds more than one value. A matrix counts as "only value" when
its single entry lives at the default coordinate.
"""

from __future__ import annotations

from stylematrix.core.breakpoints import BreakpointInfo, get_breakpoint_info
from stylematrix.core.errors import make_invalid_input_error

from .resolver import AttrMatrix


def is_only_value(
    matrix: AttrMatrix,
    default_breakpoint: str | None = None,
    default_state: str | None = None,
    *,
    info: BreakpointInfo | None = None,
    attribute: str | None = None,
) -> bool:
    """
    Determine whether the matrix holds a single value at the default coordinate.

    A matrix without a value at the default coordinate is never "only value",
    even when it holds a single entry elsewhere. The matrix is not modified.

    Args:
        matrix: Attribute value matrix (breakpoint -> state -> value)
        default_breakpoint: Default breakpoint; from configuration when omitted
        default_state: Default state; from configuration when omitted
        info: Breakpoint configuration used for omitted defaults
        attribute: Attribute name, used in error messages

    Returns:
        True if the only value is the one at the default coordinate

    Raises:
        InvalidInputError: If the matrix is empty
        MissingConfigurationError: If defaults are omitted and no
            configuration is available
    """
    if not matrix:
        raise make_invalid_input_error("Value cannot be empty.", attribute=attribute)

    if not default_breakpoint or not default_state:
        breakpoint_info = get_breakpoint_info(info)
        default_breakpoint = default_breakpoint or breakpoint_info.default_breakpoint
        default_state = default_state or breakpoint_info.default_state

    default_bucket = matrix.get(default_breakpoint)
    if default_bucket is None or default_state not in default_bucket:
        return False

    remaining = {bp: states for bp, states in matrix.items() if bp != default_breakpoint}
    remaining_states = {s: v for s, v in default_bucket.items() if s != default_state}
    if remaining_states:
        remaining[default_breakpoint] = remaining_states

    return not remaining


def is_many_value(
    matrix: AttrMatrix,
    default_breakpoint: str | None = None,
    default_state: str | None = None,
    *,
    info: BreakpointInfo | None = None,
    attribute: str | None = None,
) -> bool:
    """Determine whether the matrix holds values beyond the default coordinate."""
    return not is_only_value(
        matrix, default_breakpoint, default_state, info=info, attribute=attribute
    )
