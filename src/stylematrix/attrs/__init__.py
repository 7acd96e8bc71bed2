"""
Attribute value matrices: resolution, uniformity and inheritance.

Usage:
    from stylematrix.attrs import ResolveMode, is_only_value, resolve

    matrix = {"desktop": {"value": "10px"}, "phone": {"hover": "12px"}}
    resolve(matrix, "tablet", "hover", ResolveMode.FULL_INHERIT)  # "10px"
    is_only_value(matrix)  # False
"""

from .inheritance import ICON_STYLE_FIELDS, inherit_icon_style_attr
from .resolver import (
    AttrMatrix,
    ResolveMode,
    deep_merge,
    get_path,
    inherit_value,
    resolve,
    resolve_subname,
)
from .uniformity import is_many_value, is_only_value

__all__ = [
    "AttrMatrix",
    "ResolveMode",
    "resolve",
    "resolve_subname",
    "inherit_value",
    "deep_merge",
    "get_path",
    "is_only_value",
    "is_many_value",
    "ICON_STYLE_FIELDS",
    "inherit_icon_style_attr",
]
