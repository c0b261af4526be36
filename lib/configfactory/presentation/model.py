"""Presentation tree rendered by a settings surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from configfactory.core.properties import ConfigProperty
from configfactory.core.signals import Signal

if TYPE_CHECKING:
    from configfactory.builders.base import Editor
    from configfactory.core.module import ConfigModule


@dataclass
class ConfigItem:
    """One editable row: translated labels plus the bound editor."""

    header: str
    description: str
    content: "Editor"
    key: str
    validation_color: str | None = None


@dataclass
class ConfigGroup:
    id: str
    title: str
    items: List[ConfigItem] = field(default_factory=list)


@dataclass
class ConfigCategory:
    id: str
    title: str
    groups: List[ConfigGroup] = field(default_factory=list)
    _index: Dict[str, ConfigGroup] = field(default_factory=dict, repr=False)

    def group(self, group_id: str) -> Optional[ConfigGroup]:
        return self._index.get(group_id)

    def get_or_create_group(self, group_id: str, title: str) -> ConfigGroup:
        group = self._index.get(group_id)
        if group is None:
            group = ConfigGroup(id=group_id, title=title)
            self._index[group_id] = group
            self.groups.append(group)
        return group


class ConfigPageModel:
    """Categories, groups and items assembled from one or more config modules.

    The primary button saves and the secondary button resets every module that
    has been appended to the page.
    """

    def __init__(self) -> None:
        self.categories: List[ConfigCategory] = []
        self.items_map: Dict[str, ConfigItem] = {}
        self.selected_group: Optional[ConfigGroup] = None
        self.primary_button = Signal("primary")
        self.secondary_button = Signal("secondary")
        self._index: Dict[str, ConfigCategory] = {}

    def category(self, category_id: str) -> Optional[ConfigCategory]:
        return self._index.get(category_id)

    def get_or_create_category(self, category_id: str, title: str) -> ConfigCategory:
        category = self._index.get(category_id)
        if category is None:
            category = ConfigCategory(id=category_id, title=title)
            self._index[category_id] = category
            self.categories.append(category)
        return category

    def locate_group(self, module: "ConfigModule", prop: ConfigProperty) -> ConfigGroup:
        category = self.get_or_create_category(prop.category, module.translate(prop.category))
        return category.get_or_create_group(prop.group, module.translate(prop.group))

    def add_item(self, group: ConfigGroup, item: ConfigItem) -> ConfigItem:
        """Add ``item`` to ``group``; the first item seen for a key keeps the index entry."""
        group.items.append(item)
        self.items_map.setdefault(item.key, item)
        return item

    def auto_select(self) -> Optional[ConfigGroup]:
        """Select the only group when the page holds one category with one group."""
        if len(self.categories) == 1 and len(self.categories[0].groups) == 1:
            self.selected_group = self.categories[0].groups[0]
        return self.selected_group

    def press_primary(self) -> None:
        self.primary_button.emit()

    def press_secondary(self) -> None:
        self.secondary_button.emit()


class ValidationInterface:
    """Feedback sink colouring the items of one module on a page."""

    def __init__(self, page: ConfigPageModel, items: Dict[str, ConfigItem]) -> None:
        self.page = page
        self.items = items

    def set_validation_color(self, prop: ConfigProperty, color: str) -> None:
        item = self.items.get(prop.name)
        if item is None:
            return
        item.validation_color = color
        item.content.validation_color = color


__all__ = [
    "ConfigCategory",
    "ConfigGroup",
    "ConfigItem",
    "ConfigPageModel",
    "ValidationInterface",
]
