"""Tree-to-tree operations for editing a workout's structure."""
from .blocks import (
    add_block,
    add_superset,
    delete_block,
    delete_superset,
    move_block,
    rename_block,
    set_block_rest,
    set_block_work_time,
)
from .exercises import (
    add_exercise,
    delete_exercise,
    merge_exercise_fields,
    new_exercise,
    set_superset_rest,
    update_exercise,
)
from .reorder import reorder_or_move
from .structure import (
    STRUCTURE_DEFAULTS,
    clear_structure,
    get_structure_defaults,
    set_structure_type,
)

__all__ = [
    "STRUCTURE_DEFAULTS",
    "add_block",
    "add_exercise",
    "add_superset",
    "clear_structure",
    "delete_block",
    "delete_exercise",
    "delete_superset",
    "get_structure_defaults",
    "merge_exercise_fields",
    "move_block",
    "new_exercise",
    "rename_block",
    "reorder_or_move",
    "set_block_rest",
    "set_block_work_time",
    "set_structure_type",
    "set_superset_rest",
    "update_exercise",
]
