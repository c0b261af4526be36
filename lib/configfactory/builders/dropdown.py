"""Drop-down editor for enumerations and fields with a fixed option set."""

from __future__ import annotations

import enum
from typing import Any, Tuple

from configfactory.core.attributes import DropdownOption
from configfactory.core.module import ConfigModule
from configfactory.core.properties import ConfigProperty, FieldKind
from configfactory.core.registry import register_builder

from .base import ControlBuilder, Editor


class DropdownEditor(Editor):
    kind = "dropdown"

    def __init__(self, module: ConfigModule, prop: ConfigProperty, options: Tuple[DropdownOption, ...]) -> None:
        super().__init__(module, prop)
        self.options = options

    @property
    def labels(self) -> list[str]:
        return [option.label for option in self.options]

    @property
    def selected_index(self) -> int:
        current = self.value
        for index, option in enumerate(self.options):
            if option.value == current:
                return index
        return -1

    def select(self, index: int) -> None:
        self.value = self.options[index].value

    def coerce(self, value: Any) -> Any:
        if any(option.value == value for option in self.options):
            return value
        raise ValueError(
            f"{value!r} is not one of the options for {self.prop.path}: {', '.join(self.labels)}"
        )


@register_builder("dropdown")
class DropdownControlBuilder(ControlBuilder):
    """Claims every property whose kind resolved to a drop-down."""

    overrides = frozenset({FieldKind.DROPDOWN})

    def is_valid(self, value_type: Any) -> bool:
        return isinstance(value_type, type) and issubclass(value_type, enum.Enum)

    def build(self, module: ConfigModule, prop: ConfigProperty) -> DropdownEditor:
        return DropdownEditor(module, prop, prop.options_for(module))


__all__ = ["DropdownControlBuilder", "DropdownEditor"]
