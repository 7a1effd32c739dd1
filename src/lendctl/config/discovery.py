"""Locate ``lendctl.toml`` for the settings TOML source.

An explicit ``LENDCTL_CONFIG`` path wins; otherwise the search walks from
the starting directory up to the filesystem root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "lendctl.toml"
CONFIG_ENV_VAR = "LENDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``lendctl.toml`` at or above *start* (default: cwd).

    When ``LENDCTL_CONFIG`` is set, that file is used as-is, and a missing
    file there means no config at all rather than a fallback to the walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
