"""Plain-text rendering of workout structure for summaries and descriptions."""
from typing import List, Optional

from workout_editor.models import Block, Exercise, Workout

SEPARATOR = " • "


def get_structure_display_name(structure: Optional[str]) -> str:
    if not structure:
        return "Single"
    return structure.upper()


def _clock(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def get_block_summary(block: Block) -> str:
    """
    Short one-line summary of a block.

    Shows the structure's timing when it has any, otherwise the number of
    exercises across the loose list and all supersets.
    """
    parts: List[str] = []

    if block.structure == "tabata":
        if block.time_work_sec and block.rest_between_sec:
            parts.append(f"{block.time_work_sec}:{block.rest_between_sec}")
    elif block.structure == "emom":
        if block.time_work_sec:
            parts.append(f"{block.time_work_sec}s work")
    elif block.structure == "amrap":
        if block.time_work_sec:
            parts.append(f"{_clock(block.time_work_sec)} AMRAP")
    elif block.structure in ("superset", "circuit"):
        if block.rest_between_sec:
            parts.append(f"{block.rest_between_sec}s rest")

    if parts:
        return SEPARATOR.join(parts)
    count = block.exercise_count
    return f"{count} exercise{'s' if count != 1 else ''}"


def _format_distance(distance_m: int) -> str:
    if distance_m >= 1000:
        return f"{distance_m / 1000:.2f}km"
    return f"{distance_m}m"


def format_exercise(exercise: Exercise, index: int) -> str:
    parts = [exercise.name or f"Exercise {index + 1}"]
    if exercise.sets:
        parts.append(f"{exercise.sets} sets")
    if exercise.reps:
        parts.append(f"{exercise.reps} reps")
    elif exercise.reps_range:
        parts.append(f"{exercise.reps_range} reps")
    if exercise.duration_sec:
        minutes, seconds = divmod(exercise.duration_sec, 60)
        parts.append(f"{minutes}m {seconds}s" if minutes > 0 else f"{seconds}s")
    if exercise.distance_m:
        parts.append(_format_distance(exercise.distance_m))
    elif exercise.distance_range:
        parts.append(exercise.distance_range)
    if exercise.rest_sec:
        parts.append(f"{exercise.rest_sec}s rest")
    if exercise.type:
        parts.append(f"({exercise.type})")
    return SEPARATOR.join(parts)


def format_workout_text(workout: Workout) -> str:
    """
    Render a workout as a multi-line text description.

    Args:
        workout: Workout to render

    Returns:
        Title, then each block with its loose exercises and lettered
        superset rows.
    """
    if not workout.blocks:
        return workout.title or "Workout"

    lines: List[str] = []
    if workout.title:
        lines.append(workout.title)
        lines.append("")

    for bi, block in enumerate(workout.blocks):
        lines.append(f"{block.label or f'Block {bi + 1}'}:")
        for ei, exercise in enumerate(block.exercises):
            lines.append(f"  {format_exercise(exercise, ei)}")
        for si, superset in enumerate(block.supersets):
            lines.append(f"  Superset {si + 1}:")
            for ei, exercise in enumerate(superset.exercises):
                lines.append(f"    {chr(65 + ei)}. {format_exercise(exercise, ei)}")
        lines.append("")

    return "\n".join(lines)
