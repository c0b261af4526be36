"""Core primitives: property catalog, builder registry, validation and modules."""

from __future__ import annotations

from .attributes import BrowseConfig, Config, DropdownConfig, DropdownOption, NumericConfig, on_changed
from .context import ConfigContext
from .errors import ConfigFileError, ConfigurationError
from .module import ConfigModule
from .properties import ConfigProperties, ConfigProperty, FieldKind
from .registry import BUILDERS, BuilderRegistry, register_builder
from .validation import FeedbackSink, ValidationEngine, ValidationResult, ValidationRule

__all__ = [
    "BUILDERS",
    "BrowseConfig",
    "BuilderRegistry",
    "Config",
    "ConfigContext",
    "ConfigFileError",
    "ConfigModule",
    "ConfigProperties",
    "ConfigProperty",
    "ConfigurationError",
    "DropdownConfig",
    "DropdownOption",
    "FeedbackSink",
    "FieldKind",
    "NumericConfig",
    "ValidationEngine",
    "ValidationResult",
    "ValidationRule",
    "on_changed",
    "register_builder",
]
