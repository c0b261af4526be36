"""Property discovery for config modules."""

from __future__ import annotations

import enum
import logging
import types
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Literal, Tuple, Type, Union, get_args, get_origin

from .attributes import (
    ON_CHANGED_ATTRIBUTE,
    BrowseConfig,
    Config,
    DropdownConfig,
    DropdownOption,
    NumericConfig,
    normalize_options,
)
from .errors import ConfigurationError

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

    from .module import ConfigModule


class FieldKind(str, enum.Enum):
    """Editor family a property resolves to when its schema is generated."""

    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TEXT = "text"
    PATH = "path"
    DROPDOWN = "dropdown"
    CUSTOM = "custom"


NUMERIC_TYPES = (int, float, Decimal)


def is_numeric_type(value_type: Any) -> bool:
    return (
        isinstance(value_type, type)
        and issubclass(value_type, NUMERIC_TYPES)
        and not issubclass(value_type, bool)
    )


@dataclass(frozen=True)
class ConfigProperty:
    """Immutable description of one configurable property."""

    name: str
    key: str
    value_type: Any
    kind: FieldKind
    header: str
    description: str = ""
    category: str = "General"
    group: str = "Common"
    minimum: Any = None
    maximum: Any = None
    increment: Any = None
    minimum_exclusive: bool = False
    maximum_exclusive: bool = False
    dropdown: DropdownConfig | None = None
    options: Tuple[DropdownOption, ...] = ()
    browse: BrowseConfig | None = None
    hooks: Tuple[Callable[[Any, Any], Any], ...] = ()

    @property
    def path(self) -> str:
        return f"{self.category}/{self.group}/{self.name}"

    def get(self, module: "ConfigModule") -> Any:
        return getattr(module, self.name)

    def set(self, module: "ConfigModule", value: Any) -> None:
        setattr(module, self.name, value)

    def options_for(self, module: "ConfigModule") -> Tuple[DropdownOption, ...]:
        """Resolve the selectable options, calling the dropdown source if any."""
        if self.dropdown is not None and self.dropdown.source is not None:
            return normalize_options(self.dropdown.source(module))
        return self.options

    def notify(self, module: "ConfigModule", value: Any) -> None:
        for hook in self.hooks:
            hook(module, value)


class ConfigProperties(Mapping):
    """Ordered, read-only catalog of a module type's configurable properties."""

    _cache: Dict[type, "ConfigProperties"] = {}

    def __init__(self, module_type: type, properties: Dict[str, ConfigProperty]) -> None:
        self.module_type = module_type
        self._properties = dict(properties)
        self._by_key = {prop.key: prop for prop in self._properties.values()}

    def __getitem__(self, name: str) -> ConfigProperty:
        try:
            return self._properties[name]
        except KeyError as exc:
            available = ", ".join(self._properties) or "<none>"
            raise KeyError(
                f"{self.module_type.__name__} has no config property '{name}'. Available: {available}"
            ) from exc

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def by_key(self, key: str) -> ConfigProperty:
        return self._by_key[key]

    def by_name_payload(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Rename persisted keys back to field names so aliased fields load."""
        return {
            (self._by_key[key].name if key in self._by_key else key): value
            for key, value in payload.items()
        }

    @classmethod
    def for_module(cls, module_type: Type["ConfigModule"]) -> "ConfigProperties":
        """Return the cached catalog for ``module_type``, generating it once."""
        catalog = cls._cache.get(module_type)
        if catalog is None:
            catalog = cls.generate(module_type)
            cls._cache[module_type] = catalog
        return catalog

    @classmethod
    def generate(cls, module_type: Type["ConfigModule"]) -> "ConfigProperties":
        hooks = _collect_hooks(module_type)
        properties: Dict[str, ConfigProperty] = {}
        seen_keys: Dict[str, ConfigProperty] = {}

        for name, field_info in module_type.model_fields.items():
            marker = _find_marker(field_info.metadata, Config)
            if marker is None:
                continue

            prop = _describe(module_type, name, field_info, marker, tuple(hooks.pop(name, ())))
            clash = seen_keys.get(prop.key)
            if clash is not None:
                raise ConfigurationError(
                    f"{module_type.__name__}: properties '{clash.name}' ({clash.category}/{clash.group}) and "
                    f"'{prop.name}' ({prop.category}/{prop.group}) both persist under '{prop.key}'."
                )
            seen_keys[prop.key] = prop
            properties[name] = prop

        if hooks:
            unknown = ", ".join(sorted(hooks))
            raise ConfigurationError(
                f"{module_type.__name__}: change hooks declared for unknown properties: {unknown}"
            )

        logging.debug("Generated %d config properties for %s", len(properties), module_type.__name__)
        return cls(module_type, properties)


def _find_marker(metadata: list, marker_type: type) -> Any:
    for entry in reversed(metadata):
        if isinstance(entry, marker_type):
            return entry
    return None


def _collect_hooks(module_type: type) -> Dict[str, list]:
    members: Dict[str, Any] = {}
    for klass in reversed(module_type.__mro__):
        members.update(vars(klass))

    hooks: Dict[str, list] = {}
    for member in members.values():
        if not isinstance(member, types.FunctionType):
            continue
        for target in getattr(member, ON_CHANGED_ATTRIBUTE, ()):
            hooks.setdefault(target, []).append(member)
    return hooks


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _pydantic_bounds(metadata: list) -> Tuple[Any, Any, Any, bool, bool]:
    minimum = maximum = increment = None
    minimum_exclusive = maximum_exclusive = False
    for entry in metadata:
        for attribute in ("ge", "gt"):
            if getattr(entry, attribute, None) is not None:
                minimum = getattr(entry, attribute)
                minimum_exclusive = attribute == "gt"
        for attribute in ("le", "lt"):
            if getattr(entry, attribute, None) is not None:
                maximum = getattr(entry, attribute)
                maximum_exclusive = attribute == "lt"
        if getattr(entry, "multiple_of", None) is not None:
            increment = entry.multiple_of
    return minimum, maximum, increment, minimum_exclusive, maximum_exclusive


def _describe(
    module_type: type,
    name: str,
    field_info: "FieldInfo",
    marker: Config,
    hooks: Tuple[Callable, ...],
) -> ConfigProperty:
    owner = module_type.__name__
    value_type = _unwrap_optional(field_info.annotation)
    numeric = _find_marker(field_info.metadata, NumericConfig)
    dropdown = _find_marker(field_info.metadata, DropdownConfig)
    browse = _find_marker(field_info.metadata, BrowseConfig)
    options: Tuple[DropdownOption, ...] = ()

    if get_origin(value_type) is Literal:
        literal_values = get_args(value_type)
        options = normalize_options(literal_values)
        value_type = type(literal_values[0]) if literal_values else str
    elif isinstance(value_type, type) and issubclass(value_type, enum.Enum):
        options = tuple(DropdownOption(label=member.name, value=member) for member in value_type)

    if dropdown is not None:
        if (dropdown.options is None) == (dropdown.source is None):
            raise ConfigurationError(
                f"{owner}.{name}: DropdownConfig needs exactly one of 'options' or 'source'."
            )
        if dropdown.options is not None:
            options = normalize_options(dropdown.options)

    minimum = maximum = increment = None
    minimum_exclusive = maximum_exclusive = False
    if is_numeric_type(value_type):
        minimum, maximum, increment, minimum_exclusive, maximum_exclusive = _pydantic_bounds(field_info.metadata)
        if numeric is not None:
            if numeric.minimum is not None:
                minimum, minimum_exclusive = numeric.minimum, False
            if numeric.maximum is not None:
                maximum, maximum_exclusive = numeric.maximum, False
            increment = numeric.increment if numeric.increment is not None else increment
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ConfigurationError(f"{owner}.{name}: minimum {minimum} exceeds maximum {maximum}.")
        if increment is not None and increment <= 0:
            raise ConfigurationError(f"{owner}.{name}: increment must be positive, got {increment}.")
    elif numeric is not None:
        raise ConfigurationError(
            f"{owner}.{name}: NumericConfig applied to non-numeric type {value_type!r}."
        )

    if dropdown is not None or options:
        kind = FieldKind.DROPDOWN
    elif value_type is bool:
        kind = FieldKind.BOOLEAN
    elif is_numeric_type(value_type):
        kind = FieldKind.NUMERIC
    elif browse is not None or (isinstance(value_type, type) and issubclass(value_type, PurePath)):
        kind = FieldKind.PATH
    elif value_type is str:
        kind = FieldKind.TEXT
    else:
        kind = FieldKind.CUSTOM

    return ConfigProperty(
        name=name,
        key=field_info.serialization_alias or field_info.alias or name,
        value_type=value_type,
        kind=kind,
        header=marker.header or name,
        description=marker.description,
        category=marker.category,
        group=marker.group,
        minimum=minimum,
        maximum=maximum,
        increment=increment,
        minimum_exclusive=minimum_exclusive,
        maximum_exclusive=maximum_exclusive,
        dropdown=dropdown,
        options=options,
        browse=browse,
        hooks=hooks,
    )


__all__ = ["ConfigProperties", "ConfigProperty", "FieldKind", "is_numeric_type"]
