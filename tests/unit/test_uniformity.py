"""Tests for the only-value / many-value checks."""

from __future__ import annotations

import copy

import pytest

from stylematrix.attrs import is_many_value, is_only_value
from stylematrix.core.breakpoints import StaticBreakpointProvider, set_breakpoint_provider
from stylematrix.core.errors import InvalidInputError, MissingConfigurationError


class TestIsOnlyValue:
    """Test is_only_value."""

    def test_single_default_value(self):
        assert is_only_value({"desktop": {"value": "10px"}}) is True

    def test_extra_state(self):
        assert is_only_value({"desktop": {"value": "10px", "hover": "12px"}}) is False

    def test_extra_breakpoint(self):
        assert is_only_value({"desktop": {"value": "10px"}, "phone": {"value": "8px"}}) is False

    def test_single_value_elsewhere(self):
        """A single value off the default coordinate is not an only value."""
        assert is_only_value({"tablet": {"value": "10px"}}) is False

    def test_default_state_missing(self):
        assert is_only_value({"desktop": {"hover": "10px"}}) is False

    def test_falsy_default_value_is_present(self):
        assert is_only_value({"desktop": {"value": ""}}) is True

    def test_explicit_defaults(self):
        matrix = {"tablet": {"hover": "1px"}}
        assert is_only_value(matrix, "tablet", "hover") is True

    def test_explicit_defaults_skip_configuration(self):
        set_breakpoint_provider(StaticBreakpointProvider(None))
        assert is_only_value({"desktop": {"value": "1"}}, "desktop", "value") is True

    def test_defaults_from_info(self, wide_info):
        assert is_only_value({"desktop": {"value": "1"}}, info=wide_info) is True

    def test_missing_configuration(self):
        set_breakpoint_provider(StaticBreakpointProvider(None))
        with pytest.raises(MissingConfigurationError):
            is_only_value({"desktop": {"value": "1"}})

    def test_empty_matrix(self):
        with pytest.raises(InvalidInputError, match="Value cannot be empty."):
            is_only_value({})

    def test_empty_matrix_names_attribute(self):
        with pytest.raises(InvalidInputError) as exc_info:
            is_only_value({}, attribute="module.decoration.filters")
        assert "attribute module.decoration.filters" in str(exc_info.value)

    def test_input_not_modified(self):
        matrix = {"desktop": {"value": "10px", "hover": "12px"}, "phone": {"value": "8px"}}
        before = copy.deepcopy(matrix)
        is_only_value(matrix)
        assert matrix == before


class TestIsManyValue:
    """is_many_value is the negation of is_only_value."""

    @pytest.mark.parametrize(
        "matrix",
        [
            {"desktop": {"value": "10px"}},
            {"desktop": {"value": "10px", "hover": "12px"}},
            {"tablet": {"value": "10px"}},
            {"desktop": {"value": "1"}, "phone": {"sticky": "2"}},
        ],
    )
    def test_negation(self, matrix):
        assert is_many_value(matrix) is (not is_only_value(matrix))

    def test_empty_matrix(self):
        with pytest.raises(InvalidInputError):
            is_many_value({})
