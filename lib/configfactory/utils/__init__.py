"""Utility helpers."""

from __future__ import annotations

from .env import config_home
from .fs import atomic_write_text, ensure_dir
from .io import load_document, load_json_file, load_yaml_file, save_document, save_json, save_yaml

__all__ = [
    "atomic_write_text",
    "config_home",
    "ensure_dir",
    "load_document",
    "load_json_file",
    "load_yaml_file",
    "save_document",
    "save_json",
    "save_yaml",
]
