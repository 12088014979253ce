"""Structure type transitions for blocks.

A block's structure is a label plus timing defaults. Changing it never
removes exercises or supersets; entering a timed structure only guarantees
that at least one superset exists to hold the exercises.
"""
import logging
from typing import Any, Dict, Optional

from workout_editor.config import settings
from workout_editor.coordinates import resolve_block
from workout_editor.errors import UnknownStructureTypeError
from workout_editor.models import STRUCTURE_TYPES, Superset, Workout
from workout_editor.utils import WorkoutLike, check_index, copy_workout

logger = logging.getLogger(__name__)

# Block fields applied on entry, plus the rest given to a seeded superset.
# "superset" is absent: it leaves timing alone and always appends a group.
STRUCTURE_DEFAULTS: Dict[str, Dict[str, Optional[int]]] = {
    "amrap": {"time_work_sec": 600, "rest_between_sec": None, "superset_rest_sec": None},
    "emom": {"time_work_sec": 60, "rest_between_sec": None, "superset_rest_sec": None},
    "for-time": {"time_work_sec": None, "rest_between_sec": None, "superset_rest_sec": None},
    "tabata": {"time_work_sec": 20, "rest_between_sec": 10, "superset_rest_sec": 10},
    "circuit": {"time_work_sec": None, "rest_between_sec": 60, "superset_rest_sec": 60},
}


def get_structure_defaults(structure: Optional[str]) -> Dict[str, Any]:
    """
    Return the block field values applied when switching to ``structure``.

    Args:
        structure: Target structure type, or None to clear.

    Returns:
        Mapping of block field name to value. Empty for "superset", which
        does not touch timing.

    Raises:
        UnknownStructureTypeError: If ``structure`` is not a supported type.
    """
    if structure is None:
        return {"time_work_sec": None}
    if structure not in STRUCTURE_TYPES:
        raise UnknownStructureTypeError(f"Unknown structure type: {structure!r}")
    if structure == "superset":
        return {}
    defaults = STRUCTURE_DEFAULTS[structure]
    return {
        "time_work_sec": defaults["time_work_sec"],
        "rest_between_sec": defaults["rest_between_sec"],
    }


def set_structure_type(
    workout: WorkoutLike,
    block_index: int,
    structure: Optional[str],
) -> Workout:
    """
    Set, change or clear a block's structure type.

    - None clears ``structure`` and ``time_work_sec``; supersets and exercises stay.
    - "superset" labels the block and appends a new empty superset every time,
      so a block can hold several independent groups.
    - Timed types apply their defaults and seed one empty superset if the
      block has none. Tabata also sets the first superset's rest to 10s.
    """
    check_index(block_index, "block_index")
    defaults = get_structure_defaults(structure)

    next_workout = copy_workout(workout)
    block = resolve_block(next_workout, block_index)
    if block is None:
        logger.warning("No block at index %s, structure unchanged", block_index)
        return next_workout

    previous = block.structure
    block.structure = structure
    for field_name, value in defaults.items():
        setattr(block, field_name, value)

    if structure == "superset":
        block.supersets.append(
            Superset(exercises=[], rest_between_sec=settings.DEFAULT_SUPERSET_REST_SEC)
        )
    elif structure is not None:
        seed_rest = STRUCTURE_DEFAULTS[structure]["superset_rest_sec"]
        if not block.supersets:
            block.supersets.append(Superset(exercises=[], rest_between_sec=seed_rest))
        elif structure == "tabata":
            block.supersets[0].rest_between_sec = seed_rest

    logger.debug("Block %s structure %r -> %r", block_index, previous, structure)
    return next_workout


def clear_structure(workout: WorkoutLike, block_index: int) -> Workout:
    """Remove a block's structure label without touching its content."""
    return set_structure_type(workout, block_index, None)
