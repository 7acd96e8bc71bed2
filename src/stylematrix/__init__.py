"""
stylematrix - CSS declarations from responsive, stateful attribute values.

Attribute values are stored per breakpoint and per state. The resolver picks
the value for one coordinate, and the declaration modules turn resolved
values into CSS.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .attrs import ResolveMode, is_many_value, is_only_value, resolve, resolve_subname
from .classnames import ClassnameSet, classnames
from .core.breakpoints import BreakpointInfo, get_breakpoint_info, set_breakpoint_provider
from .core.errors import (
    BreakpointConfigError,
    InvalidInputError,
    MissingConfigurationError,
    StyleMatrixError,
)
from .declarations import DeclarationBuilder, DeclarationOptions, ReturnType

try:
    __version__ = _metadata_version("stylematrix")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Configuration
    "BreakpointInfo",
    "get_breakpoint_info",
    "set_breakpoint_provider",
    # Attributes
    "ResolveMode",
    "resolve",
    "resolve_subname",
    "is_only_value",
    "is_many_value",
    # Declarations
    "DeclarationBuilder",
    "DeclarationOptions",
    "ReturnType",
    # Classnames
    "ClassnameSet",
    "classnames",
    # Errors
    "StyleMatrixError",
    "InvalidInputError",
    "MissingConfigurationError",
    "BreakpointConfigError",
]
