"""
Attribute value resolution.

An attribute value matrix maps breakpoint -> state -> value and only holds
keys where an override exists. Resolving picks the single value that applies
to a requested (breakpoint, state) coordinate.

Fallback flow for ``fullInherit`` with breakpoints [phone, tablet, desktop]:

    |         | value | hover | sticky |
    |---------|-------|-------|--------|
    | desktop |   *   |  <--  |  <--   |
    | tablet  |   ^   |  <--  |  <--   |
    | phone   |   ^   |  <--  |  <--   |

Presence is always tested by key membership so ``0``, ``False`` and ``""``
resolve like any other value.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from stylematrix.core.breakpoints import BreakpointInfo, get_breakpoint_info

AttrMatrix = Mapping[str, Mapping[str, Any]]

_MISSING = object()


class ResolveMode(StrEnum):
    """
    How far resolution may fall back from the requested coordinate.

    ``exact``, ``stateFallback`` and ``fullInherit`` pick the first value
    found. The ``*InheritAll`` / ``*InheritClosest`` modes read inherited
    values from the default state of wider breakpoints only; ``All``
    deep-merges mapping values from every wider breakpoint while ``Closest``
    stops at the nearest one.
    """

    EXACT = "exact"
    STATE_FALLBACK = "stateFallback"
    FULL_INHERIT = "fullInherit"
    GET_AND_INHERIT_ALL = "getAndInheritAll"
    GET_AND_INHERIT_CLOSEST = "getAndInheritClosest"
    GET_OR_INHERIT_ALL = "getOrInheritAll"
    GET_OR_INHERIT_CLOSEST = "getOrInheritClosest"
    INHERIT_ALL = "inheritAll"
    INHERIT_CLOSEST = "inheritClosest"


_MERGE_MODES = frozenset({ResolveMode.GET_AND_INHERIT_ALL, ResolveMode.GET_AND_INHERIT_CLOSEST})
_GET_OR_MODES = frozenset({ResolveMode.GET_OR_INHERIT_ALL, ResolveMode.GET_OR_INHERIT_CLOSEST})
_CLOSEST_MODES = frozenset(
    {
        ResolveMode.GET_AND_INHERIT_CLOSEST,
        ResolveMode.GET_OR_INHERIT_CLOSEST,
        ResolveMode.INHERIT_CLOSEST,
    }
)


def _lookup(matrix: AttrMatrix, breakpoint: str, state: str) -> Any:
    bucket = matrix.get(breakpoint)
    if not isinstance(bucket, Mapping) or state not in bucket:
        return _MISSING
    return bucket[state]


def _lookup_with_state_fallback(
    matrix: AttrMatrix, breakpoint: str, state: str, default_state: str
) -> Any:
    value = _lookup(matrix, breakpoint, state)
    if value is _MISSING and state != default_state:
        value = _lookup(matrix, breakpoint, default_state)
    return value


def resolve(
    matrix: AttrMatrix | None,
    breakpoint: str,
    state: str,
    mode: ResolveMode | str = ResolveMode.FULL_INHERIT,
    default: Any = None,
    *,
    info: BreakpointInfo | None = None,
) -> Any:
    """
    Resolve the effective value of an attribute for one coordinate.

    Args:
        matrix: Attribute value matrix (breakpoint -> state -> value)
        breakpoint: Requested breakpoint
        state: Requested state
        mode: A ``ResolveMode`` or its name
        default: Returned when no value is found
        info: Breakpoint configuration; the active provider's when omitted

    Returns:
        The resolved value, or ``default``

    Raises:
        ValueError: If ``mode`` is not a known mode
        MissingConfigurationError: If a fallback mode needs configuration
            and none is available
    """
    mode = ResolveMode(mode)

    if not matrix:
        return default

    if mode is ResolveMode.EXACT:
        value = _lookup(matrix, breakpoint, state)
        return default if value is _MISSING else value

    breakpoint_info = get_breakpoint_info(info)
    default_state = breakpoint_info.default_state

    if mode is ResolveMode.STATE_FALLBACK:
        value = _lookup_with_state_fallback(matrix, breakpoint, state, default_state)
        return default if value is _MISSING else value

    if mode is ResolveMode.FULL_INHERIT:
        for chain_breakpoint in breakpoint_info.inheritance_chain(breakpoint):
            value = _lookup_with_state_fallback(matrix, chain_breakpoint, state, default_state)
            if value is not _MISSING:
                return value
        return default

    value = _lookup(matrix, breakpoint, state)
    inherited = _inherit(
        matrix, breakpoint, state, closest=mode in _CLOSEST_MODES, info=breakpoint_info
    )

    if mode in _MERGE_MODES:
        if isinstance(value, Mapping) and isinstance(inherited, Mapping):
            value = deep_merge(inherited, value)
        elif value is _MISSING:
            value = inherited
    elif mode in _GET_OR_MODES:
        if value is _MISSING:
            value = inherited
    else:
        value = inherited

    return default if value is _MISSING else value


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively replace ``base`` entries with ``override`` entries.

    Nested mappings merge key by key; any other value replaces outright.
    Neither input is modified.

    Example:
        deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})  # {"a": {"x": 1, "y": 3}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _inherit(
    matrix: AttrMatrix, breakpoint: str, state: str, *, closest: bool, info: BreakpointInfo
) -> Any:
    if info.is_default_coordinate(breakpoint, state):
        return _MISSING

    inherited = _MISSING
    if state != info.default_state:
        inherited = _lookup(matrix, breakpoint, info.default_state)

    for wider in info.inheritance_chain(breakpoint)[1:]:
        value = _lookup(matrix, wider, info.default_state)
        if isinstance(value, Mapping) and not closest:
            if inherited is _MISSING:
                inherited = dict(value)
            elif isinstance(inherited, Mapping):
                inherited = deep_merge(value, inherited)
        elif value is not _MISSING and inherited is _MISSING:
            return value
        elif inherited is not _MISSING and closest:
            break

    return inherited


def inherit_value(
    matrix: AttrMatrix | None,
    breakpoint: str,
    state: str,
    *,
    closest: bool = False,
    default: Any = None,
    info: BreakpointInfo | None = None,
) -> Any:
    """
    Get the value a coordinate inherits, ignoring its own value.

    A non-default state first inherits its breakpoint's default state. Wider
    breakpoints are then read at their default state, nearest first. Unless
    ``closest`` is set, mapping values from every wider breakpoint are
    deep-merged with nearer values winning.

    Returns:
        The inherited value, or ``default`` for the base coordinate and when
        nothing is inherited
    """
    if not matrix:
        return default

    inherited = _inherit(
        matrix, breakpoint, state, closest=closest, info=get_breakpoint_info(info)
    )
    return default if inherited is _MISSING else inherited


def get_path(value: Any, path: str, default: Any = None) -> Any:
    """
    Read a dotted sub-field path out of a nested mapping.

    Example:
        get_path({"icon": {"color": "red"}}, "icon.color")  # "red"
    """
    current = value
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def resolve_subname(
    matrix: AttrMatrix | None,
    breakpoint: str,
    state: str,
    subname: str,
    mode: ResolveMode | str = ResolveMode.FULL_INHERIT,
    default: Any = "",
    *,
    info: BreakpointInfo | None = None,
) -> Any:
    """
    Resolve an attribute and read one sub-field from the resolved value.

    Non-mapping resolved values are treated as having no sub-fields.

    Example:
        resolve_subname(
            {"desktop": {"value": {"alignment": "center"}}},
            "tablet",
            "value",
            "alignment",
        )  # "center"
    """
    attr_value = resolve(matrix, breakpoint, state, mode, info=info)
    return get_path(attr_value, subname, default)
