"""Block and superset level edits.

Deleting a block takes its supersets and exercises with it; deleting a
superset takes its exercises. Nothing in the tree outlives its parent.
"""
import logging
from typing import Optional

from workout_editor.config import settings
from workout_editor.coordinates import resolve_block, resolve_superset
from workout_editor.models import Block, Superset, Workout
from workout_editor.utils import WorkoutLike, check_index, copy_workout

logger = logging.getLogger(__name__)


def add_block(workout: WorkoutLike, label: str = "Block", index: Optional[int] = None) -> Workout:
    """Insert an empty block at ``index``, or append it when index is None."""
    if index is not None:
        check_index(index, "index")

    next_workout = copy_workout(workout)
    block = Block(label=label, structure=None, exercises=[], supersets=[])
    if index is None or index >= len(next_workout.blocks):
        next_workout.blocks.append(block)
    else:
        next_workout.blocks.insert(index, block)
    return next_workout


def delete_block(workout: WorkoutLike, block_index: int) -> Workout:
    check_index(block_index, "block_index")

    next_workout = copy_workout(workout)
    if block_index >= len(next_workout.blocks):
        logger.warning("No block at index %s, nothing deleted", block_index)
        return next_workout

    removed = next_workout.blocks.pop(block_index)
    logger.debug("Deleted block %r with %s exercises", removed.label, removed.exercise_count)
    return next_workout


def rename_block(workout: WorkoutLike, block_index: int, label: str) -> Workout:
    check_index(block_index, "block_index")

    next_workout = copy_workout(workout)
    block = resolve_block(next_workout, block_index)
    if block is None:
        logger.warning("No block at index %s, label unchanged", block_index)
        return next_workout

    block.label = label
    return next_workout


def move_block(workout: WorkoutLike, from_index: int, to_index: int) -> Workout:
    """Move a block to a new position, keeping the order of the others."""
    check_index(from_index, "from_index")
    check_index(to_index, "to_index")

    next_workout = copy_workout(workout)
    blocks = next_workout.blocks
    if from_index >= len(blocks) or to_index >= len(blocks):
        logger.warning("Block move %s -> %s out of range, nothing moved", from_index, to_index)
        return next_workout

    blocks.insert(to_index, blocks.pop(from_index))
    return next_workout


def add_superset(
    workout: WorkoutLike,
    block_index: int,
    rest_between_sec: Optional[int] = None,
) -> Workout:
    """Append an empty superset without changing the block's structure label."""
    check_index(block_index, "block_index")
    if rest_between_sec is None:
        rest_between_sec = settings.DEFAULT_SUPERSET_REST_SEC

    next_workout = copy_workout(workout)
    block = resolve_block(next_workout, block_index)
    if block is None:
        logger.warning("No block at index %s, superset not added", block_index)
        return next_workout

    block.supersets.append(Superset(exercises=[], rest_between_sec=rest_between_sec))
    return next_workout


def delete_superset(workout: WorkoutLike, block_index: int, superset_index: int) -> Workout:
    check_index(block_index, "block_index")
    check_index(superset_index, "superset_index")

    next_workout = copy_workout(workout)
    if resolve_superset(next_workout, block_index, superset_index) is None:
        logger.warning("No superset at block %s index %s, nothing deleted", block_index, superset_index)
        return next_workout

    next_workout.blocks[block_index].supersets.pop(superset_index)
    return next_workout


def set_block_rest(workout: WorkoutLike, block_index: int, seconds: Optional[int]) -> Workout:
    """Set the block-level rest. Superset rest values are independent."""
    check_index(block_index, "block_index")
    if seconds is not None:
        check_index(seconds, "seconds")

    next_workout = copy_workout(workout)
    block = resolve_block(next_workout, block_index)
    if block is None:
        logger.warning("No block at index %s, rest unchanged", block_index)
        return next_workout

    block.rest_between_sec = seconds
    return next_workout


def set_block_work_time(workout: WorkoutLike, block_index: int, seconds: Optional[int]) -> Workout:
    check_index(block_index, "block_index")
    if seconds is not None:
        check_index(seconds, "seconds")

    next_workout = copy_workout(workout)
    block = resolve_block(next_workout, block_index)
    if block is None:
        logger.warning("No block at index %s, work time unchanged", block_index)
        return next_workout

    block.time_work_sec = seconds
    return next_workout
