"""Workout structure editor: a block/superset tree and pure operations on it."""
from workout_editor.coordinates import (
    BlockContainer,
    BlockLevel,
    InSuperset,
    SupersetContainer,
    format_drag_id,
    iter_exercise_coordinates,
    parse_drag_id,
    resolve_exercise,
)
from workout_editor.editor import (
    add_exercise,
    delete_exercise,
    reorder_or_move,
    set_structure_type,
    set_superset_rest,
    update_exercise,
)
from workout_editor.errors import (
    InvalidAddressError,
    InvalidUpdateError,
    StructureEditorError,
    UnknownStructureTypeError,
)
from workout_editor.formatting import (
    format_workout_text,
    get_block_summary,
    get_structure_display_name,
)
from workout_editor.models import Block, Exercise, Superset, Workout
from workout_editor.templates import clone_block, create_empty_workout

__all__ = [
    "Block",
    "BlockContainer",
    "BlockLevel",
    "Exercise",
    "InSuperset",
    "InvalidAddressError",
    "InvalidUpdateError",
    "StructureEditorError",
    "Superset",
    "SupersetContainer",
    "UnknownStructureTypeError",
    "Workout",
    "add_exercise",
    "clone_block",
    "create_empty_workout",
    "delete_exercise",
    "format_drag_id",
    "format_workout_text",
    "get_block_summary",
    "get_structure_display_name",
    "iter_exercise_coordinates",
    "parse_drag_id",
    "reorder_or_move",
    "resolve_exercise",
    "set_structure_type",
    "set_superset_rest",
    "update_exercise",
]
