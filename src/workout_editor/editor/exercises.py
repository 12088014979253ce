"""Add, delete and update exercises, and set superset rest."""
import logging
from typing import Any, Dict, List, Mapping, Optional

from workout_editor.config import settings
from workout_editor.coordinates import resolve_block, resolve_superset
from workout_editor.errors import InvalidUpdateError
from workout_editor.models import Exercise, Workout
from workout_editor.utils import WorkoutLike, check_index, copy_workout

logger = logging.getLogger(__name__)

# Accept both the model field name and its wire alias (followAlongUrl)
_FIELD_NAMES: Dict[str, str] = {}
for _name, _info in Exercise.model_fields.items():
    _FIELD_NAMES[_name] = _name
    if _info.alias:
        _FIELD_NAMES[_info.alias] = _name


def _exercise_list(
    workout: Workout, block_index: int, superset_index: Optional[int]
) -> Optional[List[Exercise]]:
    """Loose list when superset_index is None, otherwise that superset's list."""
    if superset_index is None:
        block = resolve_block(workout, block_index)
        return block.exercises if block is not None else None
    superset = resolve_superset(workout, block_index, superset_index)
    return superset.exercises if superset is not None else None


def _check_container(block_index: int, superset_index: Optional[int]) -> None:
    check_index(block_index, "block_index")
    if superset_index is not None:
        check_index(superset_index, "superset_index")


def new_exercise(name: str) -> Exercise:
    """Build an exercise with the editor defaults (3 x 10, 60s rest, strength)."""
    return Exercise(
        name=name,
        sets=settings.DEFAULT_EXERCISE_SETS,
        reps=settings.DEFAULT_EXERCISE_REPS,
        reps_range=None,
        duration_sec=None,
        rest_sec=settings.DEFAULT_EXERCISE_REST_SEC,
        distance_m=None,
        distance_range=None,
        type=settings.DEFAULT_EXERCISE_TYPE,
    )


def add_exercise(
    workout: WorkoutLike,
    block_index: int,
    superset_index: Optional[int],
    name: str,
) -> Workout:
    """Append a new exercise to a block's loose list or to one of its supersets."""
    _check_container(block_index, superset_index)
    exercise = new_exercise(name)

    next_workout = copy_workout(workout)
    exercises = _exercise_list(next_workout, block_index, superset_index)
    if exercises is None:
        logger.warning(
            "No container at block %s superset %s, exercise %r not added",
            block_index,
            superset_index,
            name,
        )
        return next_workout

    exercises.append(exercise)
    logger.debug("Added %r to block %s superset %s", name, block_index, superset_index)
    return next_workout


def delete_exercise(
    workout: WorkoutLike,
    block_index: int,
    superset_index: Optional[int],
    exercise_index: int,
) -> Workout:
    """Remove the exercise at the given position."""
    _check_container(block_index, superset_index)
    check_index(exercise_index, "exercise_index")

    next_workout = copy_workout(workout)
    exercises = _exercise_list(next_workout, block_index, superset_index)
    if exercises is None or exercise_index >= len(exercises):
        logger.warning(
            "No exercise at block %s superset %s index %s, nothing deleted",
            block_index,
            superset_index,
            exercise_index,
        )
        return next_workout

    removed = exercises.pop(exercise_index)
    logger.debug("Deleted %r from block %s superset %s", removed.name, block_index, superset_index)
    return next_workout


def merge_exercise_fields(exercise: Exercise, fields: Mapping[str, Any]) -> Exercise:
    """
    Shallow-merge ``fields`` into ``exercise`` and return a validated copy.

    Reps and distance are exclusive primary targets: setting one to a
    non-null value clears the other. If both are set in the same update,
    reps wins.

    Raises:
        InvalidUpdateError: If a field name is not an exercise field.
        pydantic.ValidationError: If a merged value is invalid.
    """
    unknown = [key for key in fields if key not in _FIELD_NAMES]
    if unknown:
        raise InvalidUpdateError(f"Unknown exercise field(s): {', '.join(sorted(unknown))}")

    updates = {_FIELD_NAMES[key]: value for key, value in fields.items()}
    merged = exercise.model_dump()
    merged.update(updates)

    if updates.get("reps") is not None:
        merged["distance_m"] = None
    elif updates.get("distance_m") is not None:
        merged["reps"] = None

    return Exercise.model_validate(merged)


def update_exercise(
    workout: WorkoutLike,
    block_index: int,
    superset_index: Optional[int],
    exercise_index: int,
    fields: Mapping[str, Any],
) -> Workout:
    """Merge ``fields`` into the exercise at the given position."""
    _check_container(block_index, superset_index)
    check_index(exercise_index, "exercise_index")

    next_workout = copy_workout(workout)
    exercises = _exercise_list(next_workout, block_index, superset_index)
    if exercises is None or exercise_index >= len(exercises):
        logger.warning(
            "No exercise at block %s superset %s index %s, nothing updated",
            block_index,
            superset_index,
            exercise_index,
        )
        return next_workout

    exercises[exercise_index] = merge_exercise_fields(exercises[exercise_index], fields)
    logger.debug(
        "Updated block %s superset %s exercise %s: %s",
        block_index,
        superset_index,
        exercise_index,
        sorted(fields),
    )
    return next_workout


def set_superset_rest(
    workout: WorkoutLike,
    block_index: int,
    superset_index: int,
    seconds: Optional[int],
) -> Workout:
    """Set a superset's own rest period. Block-level rest is not touched."""
    check_index(block_index, "block_index")
    check_index(superset_index, "superset_index")
    if seconds is not None:
        check_index(seconds, "seconds")

    next_workout = copy_workout(workout)
    superset = resolve_superset(next_workout, block_index, superset_index)
    if superset is None:
        logger.warning("No superset at block %s index %s, rest unchanged", block_index, superset_index)
        return next_workout

    superset.rest_between_sec = seconds
    return next_workout
