"""
Option types for style declaration functions.

Every recognised option is declared here with its default. Field aliases
accept the camelCase names used in stored block attributes, so a host can
pass either ``DeclarationOptions(return_type="keyValue")`` or
``DeclarationOptions.model_validate({"returnType": "keyValue"})``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stylematrix.attrs.resolver import ResolveMode
from stylematrix.core.breakpoints import BreakpointInfo

from .builder import DeclarationBuilder, Importance, PerProperty, ReturnType, Uniform, to_importance


class DisabledModuleVisibility(StrEnum):
    """How a module disabled on a breakpoint is shown in the builder."""

    HIDDEN = "hidden"
    TRANSPARENT = "transparent"


class DeclarationOptions(BaseModel):
    """Options shared by every style declaration function."""

    important: Any = Field(
        default=Uniform(False),
        description="Importance; a bool or property -> bool map is coerced to Uniform or PerProperty",
    )
    return_type: ReturnType = Field(
        default=ReturnType.STRING, alias="returnType", description="Output shape"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("important", mode="before")
    @classmethod
    def validate_important(cls, v: Any) -> Importance:
        """Coerce bool and mapping input into the importance sum type."""
        if v is not None and not isinstance(v, (bool, Mapping, Uniform, PerProperty)):
            raise ValueError(
                f"Expected a bool, mapping, Uniform or PerProperty, got {type(v).__name__}"
            )
        return to_importance(v)

    def builder(self, important: Any = None) -> DeclarationBuilder:
        """Create a fresh builder; ``important`` overrides the configured importance."""
        return DeclarationBuilder(
            important=self.important if important is None else important,
            return_type=self.return_type,
        )


class FiltersOptions(DeclarationOptions):
    """Filters options; ``attr`` enables inheritance from other coordinates."""

    attr: dict[str, dict[str, Any]] | None = Field(
        default=None, description="Full attribute matrix for inheritance"
    )
    breakpoint: str | None = Field(
        default=None, description="Breakpoint being printed; default breakpoint when omitted"
    )
    state: str | None = Field(
        default=None, description="State being printed; default state when omitted"
    )
    info: BreakpointInfo | None = Field(default=None, description="Breakpoint configuration")
    mode: ResolveMode = Field(
        default=ResolveMode.FULL_INHERIT, description="Resolve mode used with ``attr``"
    )


class IconOptions(DeclarationOptions):
    """Options for icon declarations."""

    is_vendor_icon: Callable[[Mapping[str, Any]], bool] | None = Field(
        default=None,
        alias="isVendorIcon",
        description="Icon-font vendor check; Font Awesome detection when omitted",
    )


class CustomOptions(DeclarationOptions):
    """Options for a verbatim custom declaration."""

    css_property: str = Field(alias="property", description="CSS property to emit")


class DisabledOnOptions(DeclarationOptions):
    """Options for disabled-on declarations. ``important`` is ignored."""

    disabled_module_visibility: str | None = Field(
        default=DisabledModuleVisibility.HIDDEN,
        alias="disabledModuleVisibility",
        description="Builder visibility of disabled modules",
    )


class ButtonOptions(IconOptions):
    """Options for button declarations."""

    default_attr_value: dict[str, Any] = Field(
        default_factory=dict,
        alias="defaultAttrValue",
        description="Default button attribute value used for missing fields",
    )


OptionsT = TypeVar("OptionsT", bound=DeclarationOptions)


def ensure_options(options: OptionsT | Mapping[str, Any] | None, cls: type[OptionsT]) -> OptionsT:
    """Accept an options instance, a raw option mapping, or None."""
    if isinstance(options, cls):
        return options
    if options is None:
        return cls()
    # Options models iterate as field-name pairs, so both inputs validate the same way.
    return cls.model_validate(dict(options))
