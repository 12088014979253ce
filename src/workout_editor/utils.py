"""Utility functions."""
import copy
from typing import Any, Dict, Union

from workout_editor.errors import InvalidAddressError
from workout_editor.models import Workout

WorkoutLike = Union[Workout, Dict[str, Any]]


def copy_workout(workout: WorkoutLike) -> Workout:
    """Return a deep copy of the workout that shares nothing with the input.

    Dicts in the persistence shape are copied before validation so that
    nested model instances inside them are never aliased.
    """
    if isinstance(workout, Workout):
        return workout.model_copy(deep=True)
    return Workout.model_validate(copy.deepcopy(workout))


def check_index(value: Any, name: str) -> int:
    """Reject indices that no caller could legitimately produce."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAddressError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidAddressError(f"{name} must be non-negative, got {value}")
    return value
