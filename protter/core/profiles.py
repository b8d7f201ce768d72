from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv(override=False)

HOME_ENV = "PROTTER_HOME"


def home_dir() -> Path:
    """Return the protter home directory (config and logs live here).

    ``PROTTER_HOME`` wins when set, otherwise ``~/.protter`` is used.
    """
    env = os.getenv(HOME_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".protter"


def _work_dir() -> Path:
    return home_dir()


def resolve_config_path(path: str | Path) -> Path:
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return home_dir() / p
