"""
Ordered classname collection used by module and wrapper renderers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .utils import classnames


class ClassnameSet:
    """
    Ordered classname -> enabled map rendered as an HTML ``class`` value.

    Example:
        classes = ClassnameSet()
        classes.add("et_pb_module")
        classes.add(["et_pb_text", ""], should_add=True)
        classes.add({0: "et_pb_bg_layout_light", "et_pb_hidden": False})
        classes.value()  # "et_pb_module et_pb_text et_pb_bg_layout_light"
    """

    def __init__(self) -> None:
        self._classnames: dict[str, bool] = {}

    def add(self, classname: Any, should_add: Any = True) -> None:
        """
        Add classnames.

        Args:
            classname: A classname, a list of classnames, or a mapping whose
                integer keys hold classnames and whose string keys are
                classnames mapped to a boolean flag
            should_add: Nothing is added when falsy

        Positional entries are always added before flag entries from the
        same call.
        """
        if not should_add:
            return

        if isinstance(classname, str):
            if classname:
                self._classnames[classname] = True
            return

        if isinstance(classname, (list, tuple)):
            for name in classname:
                if isinstance(name, str) and name:
                    self._classnames[name] = True
            return

        if isinstance(classname, Mapping):
            for key, name in classname.items():
                is_positional = isinstance(key, int) and not isinstance(key, bool)
                if is_positional and isinstance(name, str) and name:
                    self._classnames[name] = True

            for key, enabled in classname.items():
                if isinstance(key, str) and isinstance(enabled, bool):
                    self._classnames[key] = enabled

    def remove(self, classname: Any) -> None:
        """Remove a classname; non-string input is ignored."""
        if not isinstance(classname, str):
            return
        self._classnames.pop(classname, None)

    def has(self, classname: str) -> bool:
        """Check whether a classname is present and enabled."""
        return self._classnames.get(classname, False)

    def to_dict(self) -> dict[str, bool]:
        """Copy of the classname -> enabled map, in insertion order."""
        return dict(self._classnames)

    def value(self) -> str:
        """Enabled classnames joined by spaces."""
        return classnames(self._classnames)
