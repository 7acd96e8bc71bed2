"""
HTML classname helpers.

Usage:
    from stylematrix.classnames import ClassnameSet, classnames

    classes = ClassnameSet()
    classes.add("et_pb_button")
    classes.add({"et_pb_button_icon": True})
    classes.value()  # "et_pb_button et_pb_button_icon"
"""

from .classname_set import ClassnameSet
from .text import TEXT_ORIENTATIONS, text_alignment_classnames
from .utils import classnames

__all__ = [
    "ClassnameSet",
    "classnames",
    "text_alignment_classnames",
    "TEXT_ORIENTATIONS",
]
