"""Log sink and settings bounds."""

LOG_ROTATION = "10 MB"
LOG_RETENTION = 5
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"

MIN_TRIALS = 1000
MAX_TRIALS = 1_000_000
MIN_WORKERS = 1
MAX_WORKERS = 32
