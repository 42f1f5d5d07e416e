from utils.constants.paths import (
    LOG_FILE,
    LOGS_DIR,
    SIMULATOR_SETTINGS_FILE,
)
from utils.constants.rules import (
    DECK_SIZE,
    DEFAULT_TRIALS,
    HAND_SIZE,
    PRIZE_COUNT,
    PRIZE_POOL_SIZE,
    REMAINING_DECK_SIZE,
    REMOVED_COUNT,
    SIMULATION_ERROR,
    SUPERTYPE_CATEGORIES,
    SUPERTYPE_ENERGY,
    SUPERTYPE_POKEMON,
    SUPERTYPE_TRAINER,
)
from utils.constants.storage import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    LOG_RETENTION,
    LOG_ROTATION,
    MAX_TRIALS,
    MAX_WORKERS,
    MIN_TRIALS,
    MIN_WORKERS,
)

__all__ = [
    "DECK_SIZE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_TRIALS",
    "HAND_SIZE",
    "LOG_FILE",
    "LOG_LEVELS",
    "LOG_RETENTION",
    "LOG_ROTATION",
    "LOGS_DIR",
    "MAX_TRIALS",
    "MAX_WORKERS",
    "MIN_TRIALS",
    "MIN_WORKERS",
    "PRIZE_COUNT",
    "PRIZE_POOL_SIZE",
    "REMAINING_DECK_SIZE",
    "REMOVED_COUNT",
    "SIMULATION_ERROR",
    "SIMULATOR_SETTINGS_FILE",
    "SUPERTYPE_CATEGORIES",
    "SUPERTYPE_ENERGY",
    "SUPERTYPE_POKEMON",
    "SUPERTYPE_TRAINER",
]
