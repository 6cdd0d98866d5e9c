"""Runtime configuration for the command line front end.

Values come from the environment, optionally seeded from a ``.env`` file
in the working directory. Variables already set in the environment win.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

APP_NAME = "expense-tracker"
DATA_DIR_ENV = "EXPENSE_TRACKER_DATA_DIR"
LOG_LEVEL_ENV = "EXPENSE_TRACKER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def load_environment() -> None:
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)


def default_data_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """Per-user data directory following the XDG base directory layout."""
    env = os.environ if env is None else env
    xdg_data_home = env.get("XDG_DATA_HOME", "").strip()
    if xdg_data_home:
        return Path(xdg_data_home) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def resolve_data_dir(cli_value: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> Path:
    """Pick the data directory: CLI flag, then environment, then the per-user default."""
    env = os.environ if env is None else env
    if cli_value is not None:
        return Path(cli_value).expanduser()
    configured = env.get(DATA_DIR_ENV, "").strip()
    if configured:
        return Path(configured).expanduser()
    return default_data_dir(env)


def resolve_log_level(verbose: bool = False, env: Optional[Mapping[str, str]] = None) -> str:
    if verbose:
        return "DEBUG"
    env = os.environ if env is None else env
    return env.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
