"""Reorder and move exercises between a block's containers.

Case order, first match wins:

1. Source and destination are the same coordinate, or either is missing:
   no-op.
2. Same container (both loose, or both in one superset): stable list move.
3. Superset to a different superset: remove, then insert at the
   destination exercise's index (or append on a container drop).
4. Loose list to superset, or superset to loose list: remove, then insert
   at the destination index (or append on a container drop).
5. Container drops always append to the end of the destination.

Every branch validates both ends before touching the copy, so a stale
coordinate produces an unchanged tree instead of a half-applied move.
"""
import logging
from typing import Optional, Union

from workout_editor.config import settings
from workout_editor.coordinates import (
    BlockContainer,
    BlockLevel,
    DropTarget,
    InSuperset,
    SupersetContainer,
    coerce_target,
    container_of,
    resolve_container,
)
from workout_editor.models import Workout
from workout_editor.utils import WorkoutLike, copy_workout

logger = logging.getLogger(__name__)

TargetLike = Union[DropTarget, str, int, None]


def _describe(source: DropTarget, destination: DropTarget) -> str:
    if container_of(source) == container_of(destination):
        return "reorder"
    src_in_superset = isinstance(source, InSuperset)
    dest_in_superset = isinstance(destination, (InSuperset, SupersetContainer))
    if src_in_superset and dest_in_superset:
        return "superset-to-superset"
    if dest_in_superset:
        return "block-to-superset"
    if src_in_superset:
        return "superset-to-block"
    return "block-to-block"


def _apply(workout: Workout, source: DropTarget, destination: DropTarget) -> bool:
    """Apply the move in place on ``workout``. Returns False when nothing applies."""
    if not isinstance(source, (BlockLevel, InSuperset)):
        logger.warning("Drag source %r is a container, not an exercise", source)
        return False

    if source.block != destination.block and not settings.ALLOW_CROSS_BLOCK_MOVES:
        logger.warning(
            "Ignoring cross-block drop from block %s to block %s",
            source.block,
            destination.block,
        )
        return False

    source_list = resolve_container(workout, source)
    if source_list is None or not 0 <= source.index < len(source_list):
        logger.warning("Stale drag source %r, nothing moved", source)
        return False

    same_container = container_of(source) == container_of(destination)
    destination_list = resolve_container(workout, destination)
    if destination_list is None:
        logger.warning("Stale drop target %r, nothing moved", destination)
        return False

    if isinstance(destination, (BlockContainer, SupersetContainer)):
        if same_container:
            # Dropped back onto its own container
            return False
        exercise = source_list.pop(source.index)
        destination_list.append(exercise)
        logger.debug("%s: %r -> end of %r", _describe(source, destination), source, destination)
        return True

    if not 0 <= destination.index < len(destination_list):
        logger.warning("Stale drop target %r, nothing moved", destination)
        return False

    exercise = source_list.pop(source.index)
    destination_list.insert(destination.index, exercise)
    logger.debug("%s: %r -> %r", _describe(source, destination), source, destination)
    return True


def reorder_or_move(
    workout: WorkoutLike,
    source: TargetLike,
    destination: TargetLike,
) -> Workout:
    """
    Move one exercise to a new position and return the next workout snapshot.

    Args:
        workout: Current snapshot (model or persistence-shaped dict). Never mutated.
        source: Coordinate or drag id of the dragged exercise.
        destination: Coordinate or drag id of the exercise or container it was
            dropped on. None means the drop was abandoned.

    Returns:
        A new Workout. When the move cannot be applied (malformed ids, stale
        coordinates, same position) the result equals the input.
    """
    src: Optional[DropTarget] = coerce_target(source)
    dest: Optional[DropTarget] = coerce_target(destination)

    if src is None or dest is None or src == dest:
        return copy_workout(workout)

    next_workout = copy_workout(workout)
    try:
        applied = _apply(next_workout, src, dest)
    except (IndexError, KeyError, TypeError, ValueError) as e:
        logger.warning("Error handling drop of %r on %r: %s", src, dest, e)
        applied = False

    if not applied:
        return copy_workout(workout)
    return next_workout
