"""Exception types raised by configfactory."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """A config module declaration is invalid (developer error).

    Not a ``ValueError``, so pydantic passes it through ``model_post_init`` unchanged.
    """


class ConfigFileError(ValueError):
    """A persisted config file exists but cannot be read back."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load config file {path}: {reason}")
        self.path = path
        self.reason = reason
