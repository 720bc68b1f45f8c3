"""Locating ``roadmap.toml``.

The file is searched for in the start directory and then each of its
ancestors, nearest first. ``ROADMAP_CONFIG`` names a file directly and
disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "roadmap.toml"
CONFIG_ENV_VAR = "ROADMAP_CONFIG"


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be parsed."""


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``roadmap.toml`` governing *start* (default: cwd), if any.

    A ``ROADMAP_CONFIG`` pointing at a missing file yields None rather
    than falling back to the search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

