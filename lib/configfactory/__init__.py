"""Turn pydantic config modules into editable, validated settings pages."""

from __future__ import annotations

from .core import (
    BrowseConfig,
    Config,
    ConfigContext,
    ConfigModule,
    DropdownConfig,
    NumericConfig,
    on_changed,
    register_builder,
)

__version__ = "0.1.0"

__all__ = [
    "BrowseConfig",
    "Config",
    "ConfigContext",
    "ConfigModule",
    "DropdownConfig",
    "NumericConfig",
    "__version__",
    "on_changed",
    "register_builder",
]
