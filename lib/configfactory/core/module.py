"""Base class for persisted, validated config modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, ClassVar, Dict, List, Optional, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from configfactory.utils import config_home, load_document, save_document

from .errors import ConfigFileError
from .properties import ConfigProperties
from .signals import CancellableSignal, Signal
from .validation import FAILURE_COLOR, SUCCESS_COLOR, ValidationEngine, ValidationResult, ValidationRule

M = TypeVar("M", bound="ConfigModule")


class ConfigModule(BaseModel):
    """A group of related settings that can be edited, validated and persisted.

    Subclasses declare their settings as pydantic fields annotated with
    :class:`~configfactory.core.attributes.Config` markers and register their
    validation rules in :meth:`register_validators`.
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="ignore")

    module_name: ClassVar[Optional[str]] = None
    config_file_name: ClassVar[str] = "Config.json"
    success_color: ClassVar[str] = SUCCESS_COLOR
    failure_color: ClassVar[str] = FAILURE_COLOR

    _validation: Optional[ValidationEngine] = PrivateAttr(default=None)
    _saving: Optional[CancellableSignal] = PrivateAttr(default=None)
    _saved: Optional[Signal] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        ConfigProperties.for_module(type(self))
        self._validation = ValidationEngine(
            self,
            success_color=self.success_color,
            failure_color=self.failure_color,
        )
        self._saving = CancellableSignal("saving")
        self._saved = Signal("saved")
        self.register_validators()

    def __setattr__(self, name: str, value: Any) -> None:
        prop = ConfigProperties.for_module(type(self)).get(name)
        if prop is None:
            super().__setattr__(name, value)
            return

        previous = getattr(self, name)
        super().__setattr__(name, value)
        current = getattr(self, name)
        if current != previous:
            prop.notify(self, current)
            if self._validation is not None and name in self._validation:
                self._validation.evaluate(name)

    @property
    def name(self) -> str:
        return self.module_name or type(self).__name__

    @property
    def local_path(self) -> Path:
        """Location of the persisted file: ``<config home>/<name>/Config.json``."""
        return config_home() / self.name / self.config_file_name

    @property
    def properties(self) -> ConfigProperties:
        return ConfigProperties.for_module(type(self))

    @property
    def validation(self) -> ValidationEngine:
        return self._validation

    @property
    def validators(self) -> Dict[str, List[ValidationRule]]:
        return self._validation.rules()

    @property
    def saving(self) -> CancellableSignal:
        """Emitted before writing; a handler returning ``False`` cancels the save."""
        return self._saving

    @property
    def saved(self) -> Signal:
        """Emitted after the file has been written."""
        return self._saved

    def register_validators(self) -> None:
        """Override to add validation rules when the module is constructed."""

    def translate(self, text: str) -> str:
        """Localize a header, description, category or group label."""
        return text

    def add_validator(
        self,
        name: str,
        predicate: Callable[[Any], bool],
        message: str | None = None,
        *,
        success_color: str | None = None,
        failure_color: str | None = None,
    ) -> ValidationResult:
        """Attach a rule to property ``name`` and evaluate it right away."""
        rule = ValidationRule(
            property=name,
            predicate=predicate,
            message=message,
            success_color=success_color,
            failure_color=failure_color,
        )
        return self._validation.add(rule)

    def validate_all(self) -> ValidationResult:
        return self._validation.validate_all()

    def to_document(self) -> Dict[str, Any]:
        """Return the cataloged values keyed by their serialization keys."""
        return self.model_dump(mode="json", by_alias=True, include=set(self.properties))

    def save(self) -> bool:
        if not self._saving.allowed(self):
            logging.warning("Saving %s was cancelled by a handler.", self.name)
            return False

        path = self.local_path
        save_document(self.to_document(), path)
        logging.info("Saved %s to %s", self.name, path)
        self._saved.emit(self)
        return True

    @classmethod
    def load(cls: type[M], *, replay_hooks: bool = True) -> M:
        """Read the module from disk, writing the defaults first if no file exists."""
        config = cls()
        path = config.local_path
        if not path.exists():
            logging.info("No config file for %s at %s; saving defaults.", config.name, path)
            config.save()
            return config

        config = cls.read(path)
        if replay_hooks:
            config.replay_hooks()
        return config

    @classmethod
    def read(cls: type[M], path: Path) -> M:
        catalog = ConfigProperties.for_module(cls)
        try:
            payload = load_document(path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise ConfigFileError(path, str(exc)) from exc
        if not isinstance(payload, dict):
            raise ConfigFileError(path, f"expected a mapping at the top level, found {type(payload).__name__}")
        try:
            return cls.model_validate(catalog.by_name_payload(payload))
        except ValidationError as exc:
            raise ConfigFileError(path, str(exc)) from exc

    def replay_hooks(self) -> None:
        """Invoke every change hook once with the property's current value."""
        for prop in self.properties.values():
            if prop.hooks:
                logging.debug("Replaying change hooks for %s.%s", self.name, prop.name)
                prop.notify(self, prop.get(self))

    def reset(self) -> None:
        """Return every property to its last saved value."""
        snapshot = type(self).load(replay_hooks=False)
        self._assign_from(snapshot)
        logging.info("Reset %s to the values saved at %s", self.name, self.local_path)

    def restore_defaults(self) -> None:
        """Return every property to its declared default."""
        self._assign_from(type(self)())

    def _assign_from(self, source: "ConfigModule") -> None:
        for prop in self.properties.values():
            prop.set(self, prop.get(source))


__all__ = ["ConfigModule"]
