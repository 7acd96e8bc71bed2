"""
Breakpoint and state configuration.

Attribute values vary along two axes: responsive breakpoint and interaction
state. Their ordering and defaults are site configuration (admin-editable),
so resolution code never hardcodes them and instead reads a ``BreakpointInfo``
from the active provider.

Usage:
    from stylematrix.core.breakpoints import BreakpointInfo, get_breakpoint_info

    info = BreakpointInfo(
        breakpoints=["phone", "tablet", "desktop"],
        default_breakpoint="desktop",
        states=["value", "hover"],
        default_state="value",
    )
    info.inheritance_chain("phone")  # ["phone", "tablet", "desktop"]
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import BreakpointConfigError, MissingConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# Model
# =============================================================================


class BreakpointInfo(BaseModel):
    """
    Ordered breakpoint and state names with their defaults.

    Breakpoints are ordered from most specific to base (e.g. phone, tablet,
    desktop). Breakpoints listed after the default one (e.g. widescreen)
    inherit back toward the default as well.
    """

    breakpoints: list[str] = Field(description="Breakpoint names, most specific first")
    default_breakpoint: str = Field(description="Base breakpoint every chain ends on")
    states: list[str] = Field(description="State names")
    default_state: str = Field(description="State other states fall back to")

    model_config = ConfigDict(frozen=True)

    @field_validator("breakpoints", "states")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Names must be non-empty and unique."""
        if not v:
            raise ValueError("At least one name is required")
        if any(not name for name in v):
            raise ValueError("Names cannot be empty")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate names in {v}")
        return v

    @model_validator(mode="after")
    def validate_defaults(self) -> BreakpointInfo:
        if self.default_breakpoint not in self.breakpoints:
            raise ValueError(
                f"Default breakpoint '{self.default_breakpoint}' is not one of {self.breakpoints}"
            )
        if self.default_state not in self.states:
            raise ValueError(f"Default state '{self.default_state}' is not one of {self.states}")
        return self

    def inheritance_chain(self, breakpoint: str) -> list[str]:
        """
        Get the breakpoints a value is looked up in, in order.

        The chain starts at the requested breakpoint and walks toward the
        default breakpoint (inclusive). An unknown breakpoint only falls back
        to the default breakpoint.

        Args:
            breakpoint: Requested breakpoint

        Returns:
            Breakpoint names to try, nearest first
        """
        if breakpoint not in self.breakpoints:
            return [breakpoint, self.default_breakpoint]

        index = self.breakpoints.index(breakpoint)
        base_index = self.breakpoints.index(self.default_breakpoint)
        step = 1 if index <= base_index else -1
        return [self.breakpoints[i] for i in range(index, base_index + step, step)]

    def inherit_target(self, breakpoint: str, state: str) -> tuple[str, str]:
        """
        Get the coordinate a (breakpoint, state) coordinate inherits from.

        Non-default states inherit from the default state of the same
        breakpoint. Default states inherit from the next breakpoint toward
        the base. The base coordinate inherits from itself.
        """
        if state != self.default_state:
            return breakpoint, self.default_state

        chain = self.inheritance_chain(breakpoint)
        if len(chain) > 1:
            return chain[1], self.default_state
        return breakpoint, self.default_state

    def is_default_coordinate(self, breakpoint: str, state: str) -> bool:
        """Check if the coordinate is the base (default breakpoint, default state)."""
        return breakpoint == self.default_breakpoint and state == self.default_state


DEFAULT_BREAKPOINT_INFO = BreakpointInfo(
    breakpoints=["phone", "tablet", "desktop"],
    default_breakpoint="desktop",
    states=["value", "hover", "sticky"],
    default_state="value",
)


# =============================================================================
# Providers
# =============================================================================


@runtime_checkable
class BreakpointInfoProvider(Protocol):
    """Supplies the breakpoint configuration for a resolution pass."""

    def get(self) -> BreakpointInfo | None:
        """Return the current configuration, or None if unavailable."""
        ...


class StaticBreakpointProvider:
    """Provider returning a fixed configuration."""

    def __init__(self, info: BreakpointInfo | None = None) -> None:
        self._info = info

    def get(self) -> BreakpointInfo | None:
        return self._info


class CachedBreakpointProvider:
    """
    Provider that loads configuration once and caches it.

    The host calls ``invalidate()`` when breakpoint settings change so the
    next ``get()`` reloads.
    """

    def __init__(self, loader: Callable[[], BreakpointInfo | None]) -> None:
        self._loader = loader
        # (loaded, info) is swapped as one value so readers never see half an update.
        self._cache: tuple[bool, BreakpointInfo | None] = (False, None)
        self._lock = threading.Lock()

    def get(self) -> BreakpointInfo | None:
        loaded, info = self._cache
        if loaded:
            return info

        with self._lock:
            loaded, info = self._cache
            if not loaded:
                info = self._loader()
                self._cache = (True, info)
                logger.debug("Loaded breakpoint configuration: %s", info)
        return info

    def invalidate(self) -> None:
        """Drop the cached configuration."""
        with self._lock:
            self._cache = (False, None)
        logger.debug("Breakpoint configuration cache invalidated")


# ── Module-level provider ───────────────────────────────────────────

_provider: BreakpointInfoProvider | None = None
_provider_lock = threading.Lock()


def get_breakpoint_provider() -> BreakpointInfoProvider:
    """Get the active provider, falling back to the built-in defaults."""
    global _provider
    if _provider is None:
        with _provider_lock:
            if _provider is None:
                _provider = StaticBreakpointProvider(DEFAULT_BREAKPOINT_INFO)
    return _provider


def set_breakpoint_provider(provider: BreakpointInfoProvider | None) -> None:
    """Replace the active provider. ``None`` restores the built-in defaults."""
    global _provider
    with _provider_lock:
        _provider = provider


def get_breakpoint_info(info: BreakpointInfo | None = None) -> BreakpointInfo:
    """
    Get the configuration to resolve with.

    Args:
        info: Explicit configuration; returned as-is when given

    Returns:
        BreakpointInfo from the argument or the active provider

    Raises:
        MissingConfigurationError: If the provider has no configuration
    """
    if info is not None:
        return info

    try:
        resolved = get_breakpoint_provider().get()
    except (BreakpointConfigError, ValidationError) as e:
        raise MissingConfigurationError(f"Breakpoint configuration unavailable: {e}") from e

    if resolved is None:
        raise MissingConfigurationError(
            "Breakpoint configuration unavailable and no defaults supplied"
        )
    return resolved
