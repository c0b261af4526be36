"""Validation rules and colour feedback for config module properties."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Protocol

from .properties import ConfigProperty

if TYPE_CHECKING:
    from .module import ConfigModule

SUCCESS_COLOR = "#FF31C059"
FAILURE_COLOR = "#FFE64032"
SUCCESS_MESSAGE = "Validation Successful"


class FeedbackSink(Protocol):
    """Receives the colour token each time a property's rules are evaluated."""

    def set_validation_color(self, prop: ConfigProperty, color: str) -> None:
        ...


@dataclass(frozen=True)
class ValidationRule:
    property: str
    predicate: Callable[[Any], bool]
    message: str | None = None
    success_color: str | None = None
    failure_color: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str | None
    target: ConfigProperty | None = None
    color: str | None = None


class ValidationEngine:
    """Per-module table of validation rules.

    Each property owns an ordered list of rules. Evaluating a property runs the
    rules in registration order and stops at the first failure; the outcome's
    colour is pushed to the attached :class:`FeedbackSink`.
    """

    def __init__(
        self,
        module: "ConfigModule",
        *,
        success_color: str = SUCCESS_COLOR,
        failure_color: str = FAILURE_COLOR,
    ) -> None:
        self._module = module
        self._rules: Dict[str, List[ValidationRule]] = {}
        self.success_color = success_color
        self.failure_color = failure_color
        self.sink: Optional[FeedbackSink] = None

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def rules(self) -> Dict[str, List[ValidationRule]]:
        return {name: list(rules) for name, rules in self._rules.items()}

    def add(self, rule: ValidationRule) -> ValidationResult:
        """Register ``rule`` and evaluate its property immediately."""
        prop = self._module.properties[rule.property]
        self._rules.setdefault(prop.name, []).append(rule)
        return self.evaluate(prop.name)

    def evaluate(self, name: str) -> ValidationResult:
        """Run the rules for one property and report the resulting colour."""
        prop = self._module.properties[name]
        rules = self._rules.get(name)
        if not rules:
            return ValidationResult(ok=True, message=None, target=prop)

        value = prop.get(self._module)
        for rule in rules:
            if not rule.predicate(value):
                color = rule.failure_color or self.failure_color
                self._report(prop, color)
                logging.debug("Validation failed for %s: %s", prop.path, rule.message)
                return ValidationResult(ok=False, message=rule.message, target=prop, color=color)

        color = next((rule.success_color for rule in rules if rule.success_color), self.success_color)
        self._report(prop, color)
        return ValidationResult(ok=True, message=None, target=prop, color=color)

    def validate_all(self) -> ValidationResult:
        """Evaluate every rule set in registration order and return the first failure."""
        for name in list(self._rules):
            result = self.evaluate(name)
            if not result.ok:
                return result
        return ValidationResult(ok=True, message=SUCCESS_MESSAGE)

    def _report(self, prop: ConfigProperty, color: str) -> None:
        if self.sink is not None:
            self.sink.set_validation_color(prop, color)


__all__ = [
    "FAILURE_COLOR",
    "SUCCESS_COLOR",
    "SUCCESS_MESSAGE",
    "FeedbackSink",
    "ValidationEngine",
    "ValidationResult",
    "ValidationRule",
]
