"""Single-line text editor for string properties."""

from __future__ import annotations

from typing import Any

from configfactory.core.module import ConfigModule
from configfactory.core.properties import ConfigProperty
from configfactory.core.registry import register_builder

from .base import ControlBuilder, Editor
from .dropdown import DropdownControlBuilder, DropdownEditor


class TextEditor(Editor):
    kind = "text"

    def coerce(self, value: Any) -> str:
        return "" if value is None else str(value)


@register_builder("text")
class TextControlBuilder(ControlBuilder):
    def __init__(self) -> None:
        self._dropdown = DropdownControlBuilder()

    def is_valid(self, value_type: Any) -> bool:
        return value_type is str

    def build(self, module: ConfigModule, prop: ConfigProperty) -> TextEditor | DropdownEditor:
        if prop.dropdown is not None or prop.options:
            return self._dropdown.build(module, prop)
        return TextEditor(module, prop)


__all__ = ["TextControlBuilder", "TextEditor"]
