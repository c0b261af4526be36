"""Serialization helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .fs import atomic_write_text

YAML_SUFFIXES = (".yaml", ".yml")


def is_yaml_path(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def load_yaml_file(path: Path) -> Any:
    """Load a YAML file and return the parsed object."""
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_json_file(path: Path) -> Any:
    """Load a JSON file and return the parsed object."""
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def load_document(path: Path) -> Any:
    """Load a structured document, picking the format from the file suffix."""
    if is_yaml_path(path):
        return load_yaml_file(path)
    return load_json_file(path)


def save_yaml(obj: Any, path: Path) -> None:
    """Persist an object as YAML."""
    atomic_write_text(path, yaml.safe_dump(obj, sort_keys=False))


def save_json(obj: Any, path: Path, *, indent: int = 2) -> None:
    """Persist an object as formatted JSON."""
    atomic_write_text(path, json.dumps(obj, indent=indent, sort_keys=False) + "\n")


def save_document(obj: Any, path: Path) -> None:
    """Persist a structured document, picking the format from the file suffix."""
    if is_yaml_path(path):
        save_yaml(obj, path)
    else:
        save_json(obj, path)
