"""Tests for the declaration builder and option types."""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError

from stylematrix.declarations import (
    CustomOptions,
    DeclarationBuilder,
    DeclarationOptions,
    FiltersOptions,
    PerProperty,
    ReturnType,
    Uniform,
    format_value,
    join_declarations,
    to_importance,
)
from stylematrix.declarations.options import ensure_options
from stylematrix.declarations.values import field, first_field, is_empty

# =============================================================================
# Builder
# =============================================================================


class TestDeclarationBuilder:
    """Test ordering, emptiness rules and output shapes."""

    def test_as_string(self):
        builder = DeclarationBuilder(important=PerProperty({"color": True}))
        builder.add("color", "red")
        builder.add("font-size", "12px")
        assert builder.as_string() == "color: red !important; font-size: 12px"

    def test_as_key_value(self):
        builder = DeclarationBuilder(important={"color": True})
        builder.add("color", "red")
        builder.add("z-index", 0)
        assert builder.as_key_value() == {"color": "red !important", "z-index": 0}

    def test_empty_builder(self):
        builder = DeclarationBuilder()
        assert builder.is_empty is True
        assert builder.as_string() == ""
        assert builder.as_key_value() == {}

    @pytest.mark.parametrize("value", [None, ""])
    def test_add_skips_empty(self, value):
        builder = DeclarationBuilder()
        builder.add("color", value)
        assert builder.is_empty is True

    @pytest.mark.parametrize("value,text", [(0, "0"), ("0", "0"), (False, "false")])
    def test_add_keeps_falsy(self, value, text):
        builder = DeclarationBuilder()
        builder.add("opacity", value)
        assert builder.as_string() == f"opacity: {text}"

    def test_set_keeps_empty(self):
        builder = DeclarationBuilder()
        builder.set("z-index", "")
        assert builder.as_string() == "z-index: "

    def test_overwrite_keeps_position(self):
        builder = DeclarationBuilder()
        builder.add("font-size", "1em")
        builder.add("color", "red")
        builder.add("font-size", "2em")
        assert builder.as_string() == "font-size: 2em; color: red"

    def test_uniform_importance(self):
        builder = DeclarationBuilder(important=True, return_type="keyValue")
        builder.add("display", "none")
        builder.add("visible", True)
        assert builder.value() == {"display": "none !important", "visible": "true !important"}

    def test_value_shape(self):
        builder = DeclarationBuilder(return_type=ReturnType.KEY_VALUE)
        builder.add("color", "red")
        assert builder.value() == {"color": "red"}

    def test_value_is_repeatable(self):
        builder = DeclarationBuilder(important={"color": True, "font-size": False})
        builder.add("color", "red")
        builder.add("font-size", "12px")
        first = builder.value()
        assert builder.value() == first == "color: red !important; font-size: 12px"

    def test_unknown_return_type(self):
        with pytest.raises(ValueError):
            DeclarationBuilder(return_type="json")


class TestImportance:
    """Test importance coercion."""

    def test_to_importance(self):
        assert to_importance(None) == Uniform(False)
        assert to_importance(True) == Uniform(True)
        assert to_importance({"color": True}).for_property("color") is True
        uniform = Uniform(True)
        assert to_importance(uniform) is uniform

    def test_per_property_defaults_to_false(self):
        importance = PerProperty({"color": True})
        assert importance.for_property("color") is True
        assert importance.for_property("font-size") is False

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Uniform(True).important = False  # type: ignore[misc]
        with pytest.raises(TypeError):
            PerProperty({"color": True}).properties["color"] = False  # type: ignore[index]

    def test_per_property_copies_input(self):
        source = {"color": True}
        importance = PerProperty(source)
        source["color"] = False
        assert importance.for_property("color") is True


class TestFormatting:
    """Test value formatting and declaration joining."""

    @pytest.mark.parametrize(
        "value,expected",
        [(True, "true"), (False, "false"), (0, "0"), (1.5, "1.5"), ("12px", "12px")],
    )
    def test_format_value(self, value, expected):
        assert format_value(value) == expected

    def test_join_declarations(self):
        assert join_declarations(["color: red", "opacity: 0"]) == "color: red; opacity: 0;"
        assert join_declarations([]) == ""


# =============================================================================
# Options
# =============================================================================


class TestOptions:
    """Test option models and coercion."""

    def test_defaults(self):
        opts = DeclarationOptions()
        assert opts.important == Uniform(False)
        assert opts.return_type == ReturnType.STRING

    def test_aliases(self):
        assert DeclarationOptions(returnType="keyValue").return_type == ReturnType.KEY_VALUE
        assert DeclarationOptions(return_type="keyValue").return_type == ReturnType.KEY_VALUE

    def test_invalid_return_type(self):
        with pytest.raises(ValidationError):
            DeclarationOptions(return_type="json")

    def test_builder_override(self):
        builder = DeclarationOptions(important=False).builder(important=True)
        builder.add("display", "none")
        assert builder.as_string() == "display: none !important"

    def test_ensure_options(self):
        opts = DeclarationOptions(important=True)
        assert ensure_options(opts, DeclarationOptions) is opts
        assert ensure_options(None, DeclarationOptions) == DeclarationOptions()
        assert ensure_options({"returnType": "keyValue"}, DeclarationOptions).return_type == (
            ReturnType.KEY_VALUE
        )

    def test_ensure_options_upgrades_base(self):
        opts = ensure_options(DeclarationOptions(important=True), FiltersOptions)
        assert isinstance(opts, FiltersOptions)
        assert opts.important == Uniform(True)
        assert opts.attr is None

    def test_accepts_importance_types(self):
        opts = DeclarationOptions(important=PerProperty({"filter": True}))
        assert opts.important == PerProperty({"filter": True})

        builder = opts.builder()
        builder.add("filter", "blur(2px)")
        builder.add("mix-blend-mode", "multiply")
        assert builder.as_string() == "filter: blur(2px) !important; mix-blend-mode: multiply"

    @pytest.mark.parametrize(
        "important,expected",
        [
            (True, Uniform(True)),
            (None, Uniform(False)),
            (Uniform(True), Uniform(True)),
            ({"color": True}, PerProperty({"color": True})),
        ],
    )
    def test_importance_coerced(self, important, expected):
        assert DeclarationOptions(important=important).important == expected

    def test_invalid_importance(self):
        with pytest.raises(ValidationError):
            DeclarationOptions(important="yes")

    def test_upgrade_keeps_importance(self):
        opts = ensure_options(
            DeclarationOptions(important=PerProperty({"filter": True})), FiltersOptions
        )
        assert opts.important == PerProperty({"filter": True})

    def test_custom_requires_property(self):
        with pytest.raises(ValidationError):
            ensure_options({}, CustomOptions)


# =============================================================================
# Value helpers
# =============================================================================


class TestValueHelpers:
    """Test empty checks and field access."""

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", "0", {}, []])
    def test_empty(self, value):
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", ["a", "0px", 1, True, {"a": 1}, [0]])
    def test_not_empty(self, value):
        assert is_empty(value) is False

    def test_field(self):
        assert field({"a": 1}, "a") == 1
        assert field({"a": 1}, "b", "x") == "x"
        assert field("scalar", "a") is None

    def test_first_field(self):
        value = {"icon": {"color": "red"}}
        default = {"icon": {"color": "blue", "enable": "on"}}
        assert first_field(value, default, "icon", "color") == "red"
        assert first_field(value, default, "icon", "enable") == "on"
        assert first_field(value, default, "icon", "placement") is None
