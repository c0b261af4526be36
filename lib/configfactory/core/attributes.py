"""Marker objects attached to config module fields via ``typing.Annotated``.

A field only shows up on the settings surface when it carries a :class:`Config`
marker::

    class AppConfig(ConfigModule):
        volume: Annotated[int, Config("Volume", category="Audio"), NumericConfig(increment=5)] = Field(
            50, ge=0, le=100
        )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal, Sequence, Tuple

ON_CHANGED_ATTRIBUTE = "__config_on_changed__"

DEFAULT_CATEGORY = "General"
DEFAULT_GROUP = "Common"


@dataclass(frozen=True)
class Config:
    """Marks a field as a configurable property and places it on the surface."""

    header: str | None = None
    description: str = ""
    category: str = DEFAULT_CATEGORY
    group: str = DEFAULT_GROUP


@dataclass(frozen=True)
class NumericConfig:
    """Editor constraints for numeric fields.

    Values left as ``None`` fall back to the pydantic ``ge``/``gt``/``le``/``lt``
    and ``multiple_of`` constraints declared on the field.
    """

    minimum: float | int | None = None
    maximum: float | int | None = None
    increment: float | int | None = None


@dataclass(frozen=True)
class DropdownOption:
    label: str
    value: Any


@dataclass(frozen=True)
class DropdownConfig:
    """Restricts a field to a set of selectable values.

    Either a static ``options`` sequence or a ``source`` callable receiving the
    module instance must be given. Entries are plain values or ``(label, value)``
    pairs.
    """

    options: Tuple[Any, ...] | None = None
    source: Callable[[Any], Iterable[Any]] | None = None

    def __post_init__(self) -> None:
        if self.options is not None:
            object.__setattr__(self, "options", tuple(self.options))


@dataclass(frozen=True)
class BrowseConfig:
    """Path fields edited through a file or folder picker."""

    mode: Literal["file", "folder"] = "file"
    filters: Tuple[str, ...] = ()
    title: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))


def normalize_options(entries: Iterable[Any]) -> Tuple[DropdownOption, ...]:
    """Convert raw dropdown entries into labelled options."""
    options = []
    for entry in entries:
        if isinstance(entry, DropdownOption):
            options.append(entry)
        elif isinstance(entry, tuple) and len(entry) == 2:
            options.append(DropdownOption(label=str(entry[0]), value=entry[1]))
        else:
            options.append(DropdownOption(label=str(entry), value=entry))
    return tuple(options)


def on_changed(*names: str) -> Callable[[Callable], Callable]:
    """Declare a method as the change hook for one or more properties.

    The hook is called as ``hook(module, value)`` whenever the property's value
    changes through assignment, and once for every property after ``load``.
    """
    if not names:
        raise TypeError("on_changed() requires at least one property name.")

    def decorator(func: Callable) -> Callable:
        existing: Sequence[str] = getattr(func, ON_CHANGED_ATTRIBUTE, ())
        setattr(func, ON_CHANGED_ATTRIBUTE, tuple(existing) + tuple(names))
        return func

    return decorator
