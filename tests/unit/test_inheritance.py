"""Tests for icon style matrix inheritance."""

from __future__ import annotations

import copy

from stylematrix.attrs import ICON_STYLE_FIELDS, inherit_icon_style_attr


class TestInheritIconStyleAttr:
    """Test filling from parent coordinates and redundancy removal."""

    def test_fills_from_default_breakpoint(self):
        matrix = {
            "desktop": {"value": {"color": "red", "weight": "400"}},
            "tablet": {"value": {"color": "blue"}},
        }
        assert inherit_icon_style_attr(matrix) == {
            "desktop": {"value": {"color": "red", "weight": "400"}},
            "tablet": {"value": {"color": "blue", "weight": "400"}},
        }

    def test_drops_coordinates_equal_to_parent(self):
        matrix = {
            "desktop": {"value": {"color": "red"}},
            "tablet": {"value": {"color": "red"}},
            "phone": {"value": {"color": "blue"}},
        }
        assert inherit_icon_style_attr(matrix) == {
            "desktop": {"value": {"color": "red"}},
            "phone": {"value": {"color": "blue"}},
        }

    def test_skips_missing_intermediate_breakpoint(self):
        matrix = {
            "desktop": {"value": {"color": "red", "size": "20px"}},
            "phone": {"value": {"size": "10px"}},
        }
        result = inherit_icon_style_attr(matrix)
        assert result["phone"]["value"] == {"color": "red", "size": "10px"}

    def test_state_inherits_from_default_state(self):
        matrix = {
            "desktop": {"value": {"color": "red", "weight": "400"}},
            "tablet": {"value": {"weight": "700"}, "hover": {"color": "green"}},
        }
        result = inherit_icon_style_attr(matrix)
        assert result["tablet"]["hover"] == {"color": "green", "weight": "700"}
        assert result["tablet"]["value"] == {"color": "red", "weight": "700"}

    def test_redundant_state_dropped(self):
        matrix = {"desktop": {"value": {"color": "red"}, "hover": {"color": " red "}}}
        assert inherit_icon_style_attr(matrix) == {"desktop": {"value": {"color": "red"}}}

    def test_trims_values(self):
        matrix = {"desktop": {"value": {"color": "  red ", "size": "", "type": None}}}
        assert inherit_icon_style_attr(matrix) == {"desktop": {"value": {"color": "red"}}}

    def test_ignores_unknown_fields(self):
        matrix = {"desktop": {"value": {"color": "red", "margin": "4px"}}}
        result = inherit_icon_style_attr(matrix)
        assert "margin" not in result["desktop"]["value"]
        assert set(result["desktop"]["value"]) <= set(ICON_STYLE_FIELDS)

    def test_empty_coordinates_dropped(self):
        assert inherit_icon_style_attr({"desktop": {"value": {}}}) == {}

    def test_breakpoint_above_default(self, wide_info):
        matrix = {
            "desktop": {"value": {"color": "red"}},
            "widescreen": {"value": {"color": "red", "size": "40px"}},
        }
        result = inherit_icon_style_attr(matrix, info=wide_info)
        assert result["widescreen"]["value"] == {"color": "red", "size": "40px"}

    def test_input_not_modified(self):
        matrix = {
            "desktop": {"value": {"color": " red "}},
            "tablet": {"value": {"color": "red"}},
        }
        before = copy.deepcopy(matrix)
        inherit_icon_style_attr(matrix)
        assert matrix == before
