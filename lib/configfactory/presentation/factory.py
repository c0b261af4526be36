"""Assemble presentation pages from config modules."""

from __future__ import annotations

from configfactory import plugins  # noqa: F401
from configfactory.core.module import ConfigModule
from configfactory.core.registry import BUILDERS, BuilderRegistry

from .model import ConfigItem, ConfigPageModel, ValidationInterface


def build(module: ConfigModule, *, registry: BuilderRegistry | None = None) -> ConfigPageModel:
    """Construct a new page holding the configuration items of ``module``."""
    return append(ConfigPageModel(), module, registry=registry)


def append(
    page: ConfigPageModel,
    module: ConfigModule,
    *,
    registry: BuilderRegistry | None = None,
) -> ConfigPageModel:
    """Append the configuration items of ``module`` to ``page``.

    Properties no builder accepts are left off the page. When another module
    already indexed the same item path, the new item still joins its group
    and the index keeps the first one.
    """
    registry = BUILDERS if registry is None else registry
    registry.close()
    items = {}

    page.primary_button.connect(module.save)
    page.secondary_button.connect(module.reset)

    for prop in module.properties.values():
        builder = registry.dispatch(prop)
        if builder is None:
            continue
        item = ConfigItem(
            header=module.translate(prop.header),
            description=module.translate(prop.description),
            content=builder.build(module, prop),
            key=prop.path,
        )
        items[prop.name] = page.add_item(page.locate_group(module, prop), item)

    module.validation.sink = ValidationInterface(page, items)
    module.validate_all()
    page.auto_select()
    return page


__all__ = ["append", "build"]
