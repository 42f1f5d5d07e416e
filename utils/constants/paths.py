"""Filesystem paths for config and logging."""

import sys
from pathlib import Path


def _default_base_dir() -> Path:
    """Return the writable base directory for config/logging."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent.parent


BASE_DATA_DIR = _default_base_dir()
CONFIG_DIR = BASE_DATA_DIR / "config"
LOGS_DIR = BASE_DATA_DIR / "logs"

SIMULATOR_SETTINGS_FILE = CONFIG_DIR / "simulator_settings.json"
LOG_FILE = LOGS_DIR / "deck_odds.log"
