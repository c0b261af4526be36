"""Environment inspection helpers."""

from __future__ import annotations

import os
from pathlib import Path

HOME_VARIABLE = "CONFIGFACTORY_HOME"


def config_home() -> Path:
    """Return the base directory under which config modules store their files.

    Resolution order: ``CONFIGFACTORY_HOME``, ``LOCALAPPDATA`` (Windows),
    ``XDG_DATA_HOME``, then ``~/.local/share``.
    """
    for variable in (HOME_VARIABLE, "LOCALAPPDATA", "XDG_DATA_HOME"):
        value = os.environ.get(variable, "").strip()
        if value:
            return Path(value).expanduser()
    return Path.home() / ".local" / "share"
