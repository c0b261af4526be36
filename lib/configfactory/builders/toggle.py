"""Checkbox-style editor for boolean properties."""

from __future__ import annotations

from typing import Any

from configfactory.core.module import ConfigModule
from configfactory.core.properties import ConfigProperty
from configfactory.core.registry import register_builder

from .base import ControlBuilder, Editor


class ToggleEditor(Editor):
    kind = "toggle"

    def coerce(self, value: Any) -> bool:
        return bool(value)

    def toggle(self) -> bool:
        self.value = not self.value
        return self.value


@register_builder("toggle")
class ToggleControlBuilder(ControlBuilder):
    def is_valid(self, value_type: Any) -> bool:
        return value_type is bool

    def build(self, module: ConfigModule, prop: ConfigProperty) -> ToggleEditor:
        return ToggleEditor(module, prop)


__all__ = ["ToggleControlBuilder", "ToggleEditor"]
