"""
Breakpoint configuration persistence.

Handles reading and writing the site's breakpoint/state configuration to
breakpoints.yaml in the project root. The host normally wraps
``load_breakpoint_info`` in a ``CachedBreakpointProvider`` and invalidates it
when an administrator edits the breakpoints.

Default location: {project_root}/breakpoints.yaml

Example file:

    breakpoints: [phone, tablet, desktop, widescreen]
    default_breakpoint: desktop
    states: [value, hover, sticky]
    default_state: value
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .breakpoints import DEFAULT_BREAKPOINT_INFO, BreakpointInfo, CachedBreakpointProvider
from .errors import BreakpointConfigError

logger = logging.getLogger(__name__)

BREAKPOINTS_FILE = "breakpoints.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_breakpoints_path(project_root: Path) -> Path:
    """Get the breakpoints.yaml file path."""
    return project_root / BREAKPOINTS_FILE


def breakpoints_exist(project_root: Path) -> bool:
    """Check if a breakpoints.yaml exists in the project."""
    return get_breakpoints_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _parse_breakpoint_data(data: dict[str, Any]) -> BreakpointInfo:
    """Parse BreakpointInfo from raw YAML data.

    Keys omitted from the file take the built-in defaults.
    """
    if not isinstance(data, dict):
        raise BreakpointConfigError(
            f"Expected a mapping of breakpoint settings, got {type(data).__name__}"
        )

    defaults = DEFAULT_BREAKPOINT_INFO.model_dump()
    merged = {key: data.get(key, default) for key, default in defaults.items()}
    return BreakpointInfo(**merged)


def load_breakpoint_info(project_root: Path, *, use_defaults: bool = True) -> BreakpointInfo:
    """Load breakpoint configuration from breakpoints.yaml.

    Args:
        project_root: Root directory of the project.
        use_defaults: If True, return the built-in configuration when the
            file doesn't exist or is empty.

    Returns:
        BreakpointInfo instance.

    Raises:
        BreakpointConfigError: If the file doesn't exist (when use_defaults=False)
            or is invalid.
    """
    breakpoints_path = get_breakpoints_path(project_root)

    if not breakpoints_path.exists():
        if use_defaults:
            logger.debug("No breakpoints.yaml found, using defaults")
            return DEFAULT_BREAKPOINT_INFO
        raise BreakpointConfigError(f"Breakpoint configuration not found: {breakpoints_path}")

    try:
        content = breakpoints_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data:
            if use_defaults:
                logger.warning(f"Empty breakpoints.yaml at {breakpoints_path}, using defaults")
                return DEFAULT_BREAKPOINT_INFO
            raise BreakpointConfigError(f"Empty or invalid YAML in {breakpoints_path}")

        return _parse_breakpoint_data(data)

    except yaml.YAMLError as e:
        raise BreakpointConfigError(f"Invalid YAML in {breakpoints_path}: {e}") from e
    except ValidationError as e:
        raise BreakpointConfigError(
            f"Invalid breakpoint configuration in {breakpoints_path}: {e}"
        ) from e


def save_breakpoint_info(project_root: Path, info: BreakpointInfo) -> Path:
    """Save breakpoint configuration to breakpoints.yaml.

    Args:
        project_root: Root directory of the project.
        info: Configuration to save.

    Returns:
        Path to the saved breakpoints.yaml file.
    """
    breakpoints_path = get_breakpoints_path(project_root)

    breakpoints_path.write_text(
        yaml.dump(
            info.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved breakpoint configuration to {breakpoints_path}")
    return breakpoints_path


def file_breakpoint_provider(project_root: Path) -> CachedBreakpointProvider:
    """Create a cached provider reading breakpoints.yaml under ``project_root``."""
    return CachedBreakpointProvider(lambda: load_breakpoint_info(project_root))
