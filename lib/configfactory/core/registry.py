"""Ordered registry of control builders with first-match dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Dict, Optional, Type, TypeVar

from .properties import ConfigProperty

if TYPE_CHECKING:
    from configfactory.builders.base import ControlBuilder

B = TypeVar("B", bound="Type[ControlBuilder]")


class BuilderRegistry:
    """Maps property types to control builders.

    Builders are consulted in registration order, in two passes. The first
    pass looks at ``overrides`` only: a builder listing the property's kind
    wins, even over a builder registered earlier whose ``is_valid`` would
    accept the declared type. For example an ``Enum`` field goes to the
    drop-down builder although a custom builder claiming ``Enum`` types was
    registered before it. Only when no builder overrides the kind does the
    second pass pick the first builder whose ``is_valid`` accepts the type.
    """

    def __init__(self, kind: str = "builder") -> None:
        self._kind = kind
        self._items: Dict[str, "ControlBuilder"] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Refuse further registrations; called once pages start being assembled."""
        self._closed = True

    def register(self, name: str) -> Callable[[B], B]:
        """Decorator instantiating and registering a builder class under ``name``."""

        def decorator(builder_cls: B) -> B:
            self.add(name, builder_cls())
            return builder_cls

        return decorator

    def add(self, name: str, builder: "ControlBuilder") -> None:
        if self._closed:
            raise RuntimeError(
                f"Cannot register {self._kind!r} '{name}': registration is closed once a page has been built."
            )
        if name in self._items:
            raise ValueError(f"{self._kind!r} '{name}' already registered.")
        self._items[name] = builder

    def get(self, name: str) -> "ControlBuilder":
        try:
            return self._items[name]
        except KeyError as exc:
            available = ", ".join(self._items) or "<none>"
            raise KeyError(
                f"Unknown {self._kind!r} '{name}'. Available: {available}"
            ) from exc

    def dispatch(self, prop: ConfigProperty) -> Optional["ControlBuilder"]:
        for builder in self._items.values():
            if prop.kind in builder.overrides:
                return builder
        for builder in self._items.values():
            if builder.is_valid(prop.value_type):
                return builder
        logging.debug("No %s accepts %s (%r); leaving it off the page.", self._kind, prop.path, prop.value_type)
        return None

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def __iter__(self):
        return iter(self._items.items())

    def __len__(self) -> int:
        return len(self._items)

    def items(self):
        return self._items.items()

    def as_mapping(self) -> Mapping[str, "ControlBuilder"]:
        return dict(self._items)


BUILDERS = BuilderRegistry("control builder")


def register_builder(name: str) -> Callable[[B], B]:
    return BUILDERS.register(name)
