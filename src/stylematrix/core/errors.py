"""
Error types for stylematrix attribute resolution and style compilation.
"""

from dataclasses import dataclass
from typing import Optional


class StyleMatrixError(Exception):
    """Base exception for all stylematrix errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class InvalidInputError(StyleMatrixError):
    """
    Raised when an API is called with structurally unusable input.

    Examples:
    - Uniformity check on an empty attribute matrix
    - Attribute matrix that is not a mapping of mappings
    """

    pass


class MissingConfigurationError(StyleMatrixError):
    """
    Raised when breakpoint/state configuration is required but unavailable.

    Examples:
    - No breakpoint provider produced a BreakpointInfo
    - Defaults omitted by the caller and no provider configured
    """

    pass


class BreakpointConfigError(StyleMatrixError):
    """
    Raised when breakpoint/state configuration is invalid.

    Examples:
    - Default breakpoint not listed in the breakpoint order
    - Duplicate state names
    - Unreadable or malformed breakpoints.yaml
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, pointing at the offending attribute.

    Attributes:
        attribute: Name of the attribute being processed (e.g. "module.decoration.filters")
        breakpoint: Optional breakpoint being processed
        state: Optional state being processed
    """

    attribute: str
    breakpoint: str | None = None
    state: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "attribute filters at tablet.hover"
        """
        location = f"attribute {self.attribute}"
        if self.breakpoint:
            coordinate = self.breakpoint
            if self.state:
                coordinate += f".{self.state}"
            location += f" at {coordinate}"
        return location


def make_invalid_input_error(
    message: str,
    attribute: str | None = None,
    breakpoint: str | None = None,
    state: str | None = None,
) -> InvalidInputError:
    """
    Helper to create an InvalidInputError with optional context.

    Args:
        message: Error description
        attribute: Optional attribute name
        breakpoint: Optional breakpoint
        state: Optional state

    Returns:
        InvalidInputError with context if an attribute name is provided
    """
    if attribute:
        context = ErrorContext(attribute=attribute, breakpoint=breakpoint, state=state)
        return InvalidInputError(message, context)
    return InvalidInputError(message)
