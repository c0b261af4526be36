"""Control builders shipped with configfactory.

Importing this package registers them, in this order, with the default
builder registry.
"""

from __future__ import annotations

from .base import ControlBuilder, Editor
from .toggle import ToggleControlBuilder, ToggleEditor
from .dropdown import DropdownControlBuilder, DropdownEditor
from .numeric import NumericControlBuilder, NumericEditor
from .text import TextControlBuilder, TextEditor
from .browse import BrowseControlBuilder, BrowseEditor

__all__ = [
    "BrowseControlBuilder",
    "BrowseEditor",
    "ControlBuilder",
    "DropdownControlBuilder",
    "DropdownEditor",
    "Editor",
    "NumericControlBuilder",
    "NumericEditor",
    "TextControlBuilder",
    "TextEditor",
    "ToggleControlBuilder",
    "ToggleEditor",
]
