"""
Ordered CSS declaration accumulator.

Each style declaration function builds its output with a fresh
``DeclarationBuilder``. Properties keep the position of their first
insertion; later additions overwrite the value in place.

Example:
    builder = DeclarationBuilder(important=PerProperty({"color": True}))
    builder.add("color", "red")
    builder.add("font-size", "12px")
    builder.as_string()  # "color: red !important; font-size: 12px"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Union

IMPORTANT_SUFFIX = " !important"


class ReturnType(StrEnum):
    """Output shape of a builder."""

    STRING = "string"
    KEY_VALUE = "keyValue"


@dataclass(frozen=True)
class Uniform:
    """Same importance for every property."""

    important: bool = False

    def for_property(self, property_name: str) -> bool:
        return self.important


@dataclass(frozen=True)
class PerProperty:
    """Importance looked up by property name; unlisted properties are not important."""

    properties: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def for_property(self, property_name: str) -> bool:
        return bool(self.properties.get(property_name, False))


Importance = Union[Uniform, PerProperty]
ImportanceLike = Union[Importance, bool, Mapping[str, bool], None]


def to_importance(important: ImportanceLike) -> Importance:
    """Coerce a bool, property map or Importance into an Importance."""
    if isinstance(important, (Uniform, PerProperty)):
        return important
    if important is None:
        return Uniform(False)
    if isinstance(important, Mapping):
        return PerProperty(important)
    return Uniform(bool(important))


def format_value(value: Any) -> str:
    """Render a declaration value as CSS text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_declarations(declarations: list[str]) -> str:
    """Join declarations into a ``;`` separated string, suffixed by ``;``."""
    joined = "; ".join(declarations)
    if declarations:
        joined += ";"
    return joined


class DeclarationBuilder:
    """Ordered property -> value store with ``!important`` policy."""

    def __init__(
        self,
        important: ImportanceLike = False,
        return_type: ReturnType | str = ReturnType.STRING,
    ) -> None:
        self.importance = to_importance(important)
        self.return_type = ReturnType(return_type)
        self._entries: dict[str, tuple[Any, bool]] = {}

    def is_important(self, property_name: str) -> bool:
        return self.importance.for_property(property_name)

    def add(self, property_name: str, value: Any) -> None:
        """
        Add a declaration, skipping ``None`` and empty strings.

        ``0``, ``False`` and ``"0"`` are valid values and are kept.
        """
        if value is None or value == "":
            return
        self.set(property_name, value)

    def set(self, property_name: str, value: Any) -> None:
        """Add a declaration without the emptiness check."""
        self._entries[property_name] = (value, self.is_important(property_name))

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def as_key_value(self) -> dict[str, Any]:
        """Ordered property -> value mapping, ``!important`` embedded in the value."""
        return {
            name: f"{format_value(value)}{IMPORTANT_SUFFIX}" if important else value
            for name, (value, important) in self._entries.items()
        }

    def as_string(self) -> str:
        """Declarations joined by ``"; "``, without braces or a trailing semicolon."""
        return "; ".join(
            f"{name}: {format_value(value)}" for name, value in self.as_key_value().items()
        )

    def value(self) -> str | dict[str, Any]:
        """Output in the shape selected by ``return_type``."""
        if self.return_type is ReturnType.KEY_VALUE:
            return self.as_key_value()
        return self.as_string()
