"""Presentation model and page assembly."""

from __future__ import annotations

from .factory import append, build
from .model import ConfigCategory, ConfigGroup, ConfigItem, ConfigPageModel, ValidationInterface

__all__ = [
    "ConfigCategory",
    "ConfigGroup",
    "ConfigItem",
    "ConfigPageModel",
    "ValidationInterface",
    "append",
    "build",
]
