"""Path editor backed by a file or folder picker."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Any

from configfactory.core.attributes import BrowseConfig
from configfactory.core.module import ConfigModule
from configfactory.core.properties import ConfigProperty, FieldKind
from configfactory.core.registry import register_builder

from .base import ControlBuilder, Editor


class BrowseEditor(Editor):
    kind = "browse"

    def __init__(self, module: ConfigModule, prop: ConfigProperty) -> None:
        super().__init__(module, prop)
        browse = prop.browse or BrowseConfig()
        self.mode = browse.mode
        self.filters = browse.filters
        self.title = browse.title or prop.header

    def coerce(self, value: Any) -> Any:
        if value is None or self.prop.value_type is str:
            return None if value is None else str(value)
        return Path(value)


@register_builder("browse")
class BrowseControlBuilder(ControlBuilder):
    overrides = frozenset({FieldKind.PATH})

    def is_valid(self, value_type: Any) -> bool:
        return isinstance(value_type, type) and issubclass(value_type, PurePath)

    def build(self, module: ConfigModule, prop: ConfigProperty) -> BrowseEditor:
        return BrowseEditor(module, prop)


__all__ = ["BrowseControlBuilder", "BrowseEditor"]
