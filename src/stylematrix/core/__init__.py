"""
Core configuration and error types shared by the resolver and style modules.
"""

from .breakpoints import (
    DEFAULT_BREAKPOINT_INFO,
    BreakpointInfo,
    BreakpointInfoProvider,
    CachedBreakpointProvider,
    StaticBreakpointProvider,
    get_breakpoint_info,
    get_breakpoint_provider,
    set_breakpoint_provider,
)
from .errors import (
    BreakpointConfigError,
    ErrorContext,
    InvalidInputError,
    MissingConfigurationError,
    StyleMatrixError,
)

__all__ = [
    # Configuration
    "DEFAULT_BREAKPOINT_INFO",
    "BreakpointInfo",
    "BreakpointInfoProvider",
    "CachedBreakpointProvider",
    "StaticBreakpointProvider",
    "get_breakpoint_info",
    "get_breakpoint_provider",
    "set_breakpoint_provider",
    # Errors
    "StyleMatrixError",
    "InvalidInputError",
    "MissingConfigurationError",
    "BreakpointConfigError",
    "ErrorContext",
]
