"""Base classes for control builders and the editors they produce."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, FrozenSet

from configfactory.core.module import ConfigModule
from configfactory.core.properties import ConfigProperty, FieldKind


class Editor:
    """Toolkit-neutral handle bound two-way to one module property.

    Reading :attr:`value` returns the module's live value; assigning it writes
    back into the module, which fires change hooks and re-runs validation.
    """

    kind: ClassVar[str] = "editor"

    def __init__(self, module: ConfigModule, prop: ConfigProperty) -> None:
        self.module = module
        self.prop = prop
        self.initial_value = prop.get(module)
        self.validation_color: str | None = None

    @property
    def value(self) -> Any:
        return self.prop.get(self.module)

    @value.setter
    def value(self, new_value: Any) -> None:
        self.prop.set(self.module, self.coerce(new_value))

    def coerce(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.prop.path}={self.value!r})"


class ControlBuilder(ABC):
    """Strategy producing an :class:`Editor` for a family of property types."""

    overrides: ClassVar[FrozenSet[FieldKind]] = frozenset()

    @abstractmethod
    def is_valid(self, value_type: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def build(self, module: ConfigModule, prop: ConfigProperty) -> Editor:
        raise NotImplementedError


__all__ = ["ControlBuilder", "Editor"]
