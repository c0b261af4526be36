"""Spin-box editor for numeric properties."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from configfactory.core.module import ConfigModule
from configfactory.core.properties import ConfigProperty, is_numeric_type
from configfactory.core.registry import register_builder

from .base import ControlBuilder, Editor
from .dropdown import DropdownControlBuilder, DropdownEditor


def try_convert(value: Any, value_type: type) -> Any:
    """Convert ``value`` to ``value_type``, returning ``None`` when impossible."""
    if value is None:
        return None
    try:
        if value_type is Decimal:
            return Decimal(str(value))
        if value_type is int:
            return int(Decimal(str(value)))
        return value_type(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        return None


def step_inside(bound: Any, upward: bool) -> Any:
    """Return the value next to an exclusive ``bound``, on the allowed side."""
    if isinstance(bound, Decimal):
        return bound.next_plus() if upward else bound.next_minus()
    if isinstance(bound, int):
        return bound + 1 if upward else bound - 1
    return math.nextafter(bound, math.inf if upward else -math.inf)


class NumericEditor(Editor):
    kind = "numeric"

    def __init__(self, module: ConfigModule, prop: ConfigProperty) -> None:
        super().__init__(module, prop)
        number_type = prop.value_type
        self.minimum = try_convert(prop.minimum, number_type)
        self.maximum = try_convert(prop.maximum, number_type)
        if self.minimum is not None and prop.minimum_exclusive:
            self.minimum = step_inside(self.minimum, upward=True)
        if self.maximum is not None and prop.maximum_exclusive:
            self.maximum = step_inside(self.maximum, upward=False)
        self.increment = try_convert(prop.increment, number_type)
        if self.increment is None:
            self.increment = number_type(1)

    def coerce(self, value: Any) -> Any:
        number = try_convert(value, self.prop.value_type)
        if number is None:
            raise ValueError(f"{value!r} is not a valid number for {self.prop.path}")
        if self.minimum is not None and number < self.minimum:
            number = self.minimum
        if self.maximum is not None and number > self.maximum:
            number = self.maximum
        return number

    def step_up(self) -> Any:
        self.value = self.value + self.increment
        return self.value

    def step_down(self) -> Any:
        self.value = self.value - self.increment
        return self.value


@register_builder("numeric")
class NumericControlBuilder(ControlBuilder):
    """Spin boxes clamped to the property's bounds.

    Properties that also carry drop-down metadata are handed to the drop-down
    builder instead.
    """

    def __init__(self) -> None:
        self._dropdown = DropdownControlBuilder()

    def is_valid(self, value_type: Any) -> bool:
        return is_numeric_type(value_type)

    def build(self, module: ConfigModule, prop: ConfigProperty) -> NumericEditor | DropdownEditor:
        if prop.dropdown is not None or prop.options:
            return self._dropdown.build(module, prop)
        return NumericEditor(module, prop)


__all__ = ["NumericControlBuilder", "NumericEditor", "step_inside", "try_convert"]
