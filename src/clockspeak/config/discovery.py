"""Config file discovery.

A speaking clock is configured per deployment rather than per project, so
discovery runs in three steps:

1. ``CLOCKSPEAK_CONFIG`` names the file outright.
2. Walk up from the working directory looking for ``clockspeak.toml``,
   similar to how git finds .git/.
3. Fall back to the user config file,
   ``$XDG_CONFIG_HOME/clockspeak/clockspeak.toml`` (``~/.config`` when
   ``XDG_CONFIG_HOME`` is unset).

The --config CLI flag bypasses discovery entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "clockspeak.toml"
CONFIG_ENV_VAR = "CLOCKSPEAK_CONFIG"


def user_config_path() -> Path:
    """Location of the per-user clockspeak.toml (it may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "clockspeak" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Locate clockspeak.toml for a run starting in *start* (default: cwd).

    Returns None when no step finds a file. A CLOCKSPEAK_CONFIG that points
    nowhere also returns None; it never falls through to the other steps.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    user_file = user_config_path()
    return user_file if user_file.is_file() else None
