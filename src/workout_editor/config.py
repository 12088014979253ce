"""Configuration settings for the workout structure editor."""
import os


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


class Settings:
    """Editor settings."""

    # Defaults for newly added exercises
    DEFAULT_EXERCISE_SETS: int = 3
    DEFAULT_EXERCISE_REPS: int = 10
    DEFAULT_EXERCISE_REST_SEC: int = 60
    DEFAULT_EXERCISE_TYPE: str = "strength"

    # Rest for supersets created by the editor
    DEFAULT_SUPERSET_REST_SEC: int = 60

    # Feature flags
    ALLOW_CROSS_BLOCK_MOVES: bool = False

    def __init__(self):
        # Exercise defaults
        self.DEFAULT_EXERCISE_SETS = _int_env("DEFAULT_EXERCISE_SETS", 3)
        self.DEFAULT_EXERCISE_REPS = _int_env("DEFAULT_EXERCISE_REPS", 10)
        self.DEFAULT_EXERCISE_REST_SEC = _int_env("DEFAULT_EXERCISE_REST_SEC", 60)
        self.DEFAULT_EXERCISE_TYPE = os.getenv("DEFAULT_EXERCISE_TYPE") or "strength"
        self.DEFAULT_SUPERSET_REST_SEC = _int_env("DEFAULT_SUPERSET_REST_SEC", 60)

        # Feature flags
        self.ALLOW_CROSS_BLOCK_MOVES = os.getenv("ALLOW_CROSS_BLOCK_MOVES", "false").lower() == "true"


settings = Settings()
