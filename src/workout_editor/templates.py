"""Starting points for new workouts and blocks."""
from workout_editor.models import Block, Workout


def create_empty_workout() -> Workout:
    """Blank manual workout with one unstructured block."""
    return Workout(
        title="New Workout",
        source="manual",
        blocks=[
            Block(
                label="Workout",
                structure=None,
                exercises=[],
                supersets=[],
                time_work_sec=None,
                rest_between_sec=None,
            )
        ],
    )


def clone_block(block: Block) -> Block:
    """Independent copy of a block, e.g. when reusing one from a library."""
    return block.model_copy(deep=True)
