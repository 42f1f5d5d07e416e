from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from utils import constants


@dataclass(frozen=True)
class SimulatorSettings:
    default_trials: int = constants.DEFAULT_TRIALS
    workers: int = 1
    seed: int | None = None
    log_level: str = constants.DEFAULT_LOG_LEVEL


class SettingsService:
    """Load simulator settings from the JSON config file."""

    def __init__(self, settings_path: Path | None = None) -> None:
        self.settings_path = settings_path or constants.SIMULATOR_SETTINGS_FILE

    def load(self) -> SimulatorSettings:
        return self.from_dict(self._read())

    def _read(self) -> dict[str, Any]:
        if not self.settings_path.exists():
            return {}
        try:
            with self.settings_path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning(f"Failed to load simulator settings: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Simulator settings must be a JSON object, got {type(data).__name__}")
            return {}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimulatorSettings:
        return SimulatorSettings(
            default_trials=cls.clamp_int(
                data.get("default_trials"),
                default=constants.DEFAULT_TRIALS,
                minimum=constants.MIN_TRIALS,
                maximum=constants.MAX_TRIALS,
            ),
            workers=cls.clamp_int(
                data.get("workers"),
                default=1,
                minimum=constants.MIN_WORKERS,
                maximum=constants.MAX_WORKERS,
            ),
            seed=cls.coerce_seed(data.get("seed")),
            log_level=cls.coerce_log_level(data.get("log_level")),
        )

    @staticmethod
    def clamp_int(value: Any, *, default: int, minimum: int, maximum: int) -> int:
        if value is None or isinstance(value, bool):
            return default
        try:
            number = int(float(value))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring non-integer simulator setting: {value!r}")
            return default
        return max(minimum, min(number, maximum))

    @staticmethod
    def coerce_seed(value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring non-integer simulator seed: {value!r}")
            return None

    @staticmethod
    def coerce_log_level(value: Any) -> str:
        if isinstance(value, str) and value.strip().upper() in constants.LOG_LEVELS:
            return value.strip().upper()
        return constants.DEFAULT_LOG_LEVEL


__all__ = ["SettingsService", "SimulatorSettings"]
