"""Locate ``cw20kit.toml`` the way git locates ``.git``."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "cw20kit.toml"
CONFIG_ENV_VAR = "CW20KIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in scope for *start* (default: CWD), if any.

    ``CW20KIT_CONFIG`` short-circuits the search; when it names a missing
    file no config is used at all.
    """
    if override := os.environ.get(CONFIG_ENV_VAR):
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
