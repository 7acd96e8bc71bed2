"""
Whole-matrix inheritance for icon style attributes.

Icon styles are printed per coordinate, so each coordinate needs the full
set of icon fields rather than only its overrides. ``inherit_icon_style_attr``
fills every present coordinate from the nearest present coordinate it
inherits from and then drops coordinates that would print exactly what their
parent prints.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stylematrix.core.breakpoints import BreakpointInfo, get_breakpoint_info

from .resolver import AttrMatrix

ICON_STYLE_FIELDS: tuple[str, ...] = (
    "color",
    "useSize",
    "size",
    "weight",
    "unicode",
    "type",
    "show",
)


def _trim(values: dict[str, Any]) -> dict[str, Any]:
    """Drop None and blank string fields, stripping surrounding whitespace."""
    trimmed: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                continue
        elif value is None:
            continue
        trimmed[key] = value
    return trimmed


def _coordinates(matrix: AttrMatrix, info: BreakpointInfo) -> list[tuple[str, str]]:
    """Present coordinates ordered so every ancestor precedes its descendants."""
    ordered_breakpoints = sorted(
        (bp for bp, states in matrix.items() if isinstance(states, Mapping)),
        key=lambda bp: len(info.inheritance_chain(bp)),
    )

    coordinates: list[tuple[str, str]] = []
    for breakpoint in ordered_breakpoints:
        states = matrix[breakpoint]
        if info.default_state in states:
            coordinates.append((breakpoint, info.default_state))
        coordinates.extend(
            (breakpoint, state) for state in states if state != info.default_state
        )
    return coordinates


def _nearest_ancestor(
    filled: dict[str, dict[str, dict[str, Any]]],
    info: BreakpointInfo,
    breakpoint: str,
    state: str,
) -> dict[str, Any]:
    """Icon values of the nearest filled coordinate the given one inherits from."""
    current = (breakpoint, state)
    while True:
        target = info.inherit_target(*current)
        if target == current:
            return {}
        values = filled.get(target[0], {}).get(target[1])
        if values is not None:
            return values
        current = target


def inherit_icon_style_attr(
    matrix: AttrMatrix,
    *,
    info: BreakpointInfo | None = None,
) -> dict[str, dict[str, Any]]:
    """
    Fill icon style values from parent coordinates and drop redundant ones.

    Args:
        matrix: Icon style matrix (breakpoint -> state -> icon fields)
        info: Breakpoint configuration; the active provider's when omitted

    Returns:
        New matrix; the input is not modified

    Example:
        inherit_icon_style_attr({
            "desktop": {"value": {"color": "red", "weight": "400"}},
            "tablet": {"value": {"color": "blue"}},
        })
        # {"desktop": {"value": {"color": "red", "weight": "400"}},
        #  "tablet": {"value": {"color": "blue", "weight": "400"}}}
    """
    breakpoint_info = get_breakpoint_info(info)
    coordinates = _coordinates(matrix, breakpoint_info)

    filled: dict[str, dict[str, dict[str, Any]]] = {}
    for breakpoint, state in coordinates:
        current = matrix[breakpoint][state]
        if not isinstance(current, Mapping):
            current = {}
        parent = _nearest_ancestor(filled, breakpoint_info, breakpoint, state)

        merged = {
            name: current[name] if current.get(name) is not None else parent.get(name)
            for name in ICON_STYLE_FIELDS
        }
        filled.setdefault(breakpoint, {})[state] = _trim(merged)

    result: dict[str, dict[str, Any]] = {}
    for breakpoint, state in coordinates:
        current = filled[breakpoint][state]
        if not current:
            continue

        keep = breakpoint_info.is_default_coordinate(breakpoint, state) or current != (
            _nearest_ancestor(filled, breakpoint_info, breakpoint, state)
        )
        if keep:
            result.setdefault(breakpoint, {})[state] = current

    return result
