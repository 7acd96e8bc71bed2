"""Shared pytest fixtures for stylematrix tests."""

import pytest

from stylematrix.core.breakpoints import BreakpointInfo, set_breakpoint_provider


@pytest.fixture(autouse=True)
def reset_breakpoint_provider():
    """Restore the built-in breakpoint provider around every test."""
    set_breakpoint_provider(None)
    yield
    set_breakpoint_provider(None)


@pytest.fixture
def default_info() -> BreakpointInfo:
    """Return the phone/tablet/desktop configuration."""
    return BreakpointInfo(
        breakpoints=["phone", "tablet", "desktop"],
        default_breakpoint="desktop",
        states=["value", "hover", "sticky"],
        default_state="value",
    )


@pytest.fixture
def wide_info() -> BreakpointInfo:
    """Return a configuration with a breakpoint wider than the default."""
    return BreakpointInfo(
        breakpoints=["phone", "tablet", "desktop", "widescreen"],
        default_breakpoint="desktop",
        states=["value", "hover"],
        default_state="value",
    )
