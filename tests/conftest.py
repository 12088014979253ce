"""
Test fixtures for workout-editor.

Provides sample workout trees covering loose exercises, several supersets
and timed structures.
"""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Repo root: .../workout-editor
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_editor...`
p_str = str(SRC)
if p_str not in sys.path:
    sys.path.insert(0, p_str)

from workout_editor.config import settings
from workout_editor.models import Workout


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin editor defaults so environment variables cannot leak into tests."""
    monkeypatch.setattr(settings, "DEFAULT_EXERCISE_SETS", 3)
    monkeypatch.setattr(settings, "DEFAULT_EXERCISE_REPS", 10)
    monkeypatch.setattr(settings, "DEFAULT_EXERCISE_REST_SEC", 60)
    monkeypatch.setattr(settings, "DEFAULT_EXERCISE_TYPE", "strength")
    monkeypatch.setattr(settings, "DEFAULT_SUPERSET_REST_SEC", 60)
    monkeypatch.setattr(settings, "ALLOW_CROSS_BLOCK_MOVES", False)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_workout_dict() -> Dict[str, Any]:
    """Two blocks: a warm-up with loose exercises, a main block with two supersets."""
    return {
        "title": "Test Workout",
        "source": "https://example.com/workout",
        "blocks": [
            {
                "label": "Warm-up",
                "structure": None,
                "exercises": [
                    {"name": "Jumping Jacks", "sets": 1, "reps": 30, "type": "cardio"},
                    {"name": "Arm Circles", "sets": 1, "reps": 20, "type": "warmup"},
                    {"name": "Row", "distance_m": 500, "type": "cardio"},
                ],
                "supersets": [],
            },
            {
                "label": "Main Workout",
                "structure": "superset",
                "exercises": [
                    {"name": "Plank", "duration_sec": 60, "type": "strength"},
                ],
                "supersets": [
                    {
                        "rest_between_sec": 90,
                        "exercises": [
                            {"name": "Bench Press", "sets": 4, "reps": 8, "type": "strength"},
                            {"name": "Pull-ups", "sets": 4, "reps": 8, "type": "strength"},
                        ],
                    },
                    {
                        "rest_between_sec": 60,
                        "exercises": [
                            {"name": "Bicep Curl", "sets": 3, "reps": 12, "type": "strength"},
                            {"name": "Tricep Pushdown", "sets": 3, "reps": 12, "type": "strength"},
                            {"name": "Face Pull", "sets": 3, "reps": 15, "type": "strength"},
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_workout(sample_workout_dict) -> Workout:
    return Workout.model_validate(sample_workout_dict)


@pytest.fixture
def empty_block_workout() -> Workout:
    """One block with nothing in it."""
    return Workout.model_validate({
        "title": "Blank",
        "source": "manual",
        "blocks": [{"label": "Block 1", "structure": None, "exercises": [], "supersets": []}],
    })


@pytest.fixture
def sample_amrap_workout() -> Dict[str, Any]:
    """Sample AMRAP workout structure, exercises in the first superset."""
    return {
        "title": "10 Min AMRAP",
        "source": "manual",
        "blocks": [
            {
                "label": "AMRAP",
                "structure": "amrap",
                "time_work_sec": 600,
                "exercises": [],
                "supersets": [
                    {
                        "rest_between_sec": None,
                        "exercises": [
                            {"name": "Air Squats", "reps": 15, "type": "strength"},
                            {"name": "Push-ups", "reps": 10, "type": "strength"},
                            {"name": "Pull-ups", "reps": 5, "type": "strength"},
                        ],
                    }
                ],
            }
        ],
    }
