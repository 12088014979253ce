"""Addressing scheme for exercises and drop zones inside a workout.

Coordinates are derived from positions and never stored on the models. A
renderer turns them into drag ids with ``format_drag_id`` and the editor turns
drag ids back into coordinates with ``parse_drag_id``.

Drag id formats:
    block-{block}-{index}       loose exercise
    {block}-{superset}-{index}  exercise inside a superset
    block-exercises-{block}     loose-exercise drop zone of a block
    superset-{block}-{superset} superset drop zone
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from workout_editor.models import Block, Exercise, Superset, Workout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockLevel:
    """A loose exercise in a block."""
    block: int
    index: int


@dataclass(frozen=True)
class InSuperset:
    """An exercise inside one of a block's supersets."""
    block: int
    superset: int
    index: int


@dataclass(frozen=True)
class BlockContainer:
    """The loose-exercise list of a block, used as a drop zone."""
    block: int


@dataclass(frozen=True)
class SupersetContainer:
    """A superset used as a drop zone."""
    block: int
    superset: int


ExerciseCoordinate = Union[BlockLevel, InSuperset]
ContainerCoordinate = Union[BlockContainer, SupersetContainer]
DropTarget = Union[BlockLevel, InSuperset, BlockContainer, SupersetContainer]


def format_drag_id(coord: DropTarget) -> str:
    """Encode a coordinate as the drag id a renderer attaches to a row."""
    if isinstance(coord, BlockLevel):
        return f"block-{coord.block}-{coord.index}"
    if isinstance(coord, InSuperset):
        return f"{coord.block}-{coord.superset}-{coord.index}"
    if isinstance(coord, BlockContainer):
        return f"block-exercises-{coord.block}"
    if isinstance(coord, SupersetContainer):
        return f"superset-{coord.block}-{coord.superset}"
    raise TypeError(f"Not a coordinate: {coord!r}")


def _to_indices(parts: List[str]) -> Optional[List[int]]:
    indices = []
    for part in parts:
        # ASCII digits only; no signs
        if not (part.isascii() and part.isdigit()):
            return None
        indices.append(int(part))
    return indices


def parse_drag_id(raw: Union[str, int, None]) -> Optional[DropTarget]:
    """Parse a drag id into a coordinate.

    Returns None for anything malformed. Drag events can carry stale or
    partial ids during fast gestures, so this never raises.
    """
    if raw is None:
        return None
    parts = str(raw).strip().split("-")

    if parts[:2] == ["block", "exercises"]:
        values = _to_indices(parts[2:])
        if values is None or len(values) != 1:
            return None
        return BlockContainer(block=values[0])

    if parts[0] == "superset":
        values = _to_indices(parts[1:])
        if values is None or len(values) != 2:
            return None
        return SupersetContainer(block=values[0], superset=values[1])

    if parts[0] == "block":
        values = _to_indices(parts[1:])
        if values is None or len(values) != 2:
            return None
        return BlockLevel(block=values[0], index=values[1])

    values = _to_indices(parts)
    if values is None or len(values) != 3:
        return None
    return InSuperset(block=values[0], superset=values[1], index=values[2])


def coerce_target(target: Union[DropTarget, str, int, None]) -> Optional[DropTarget]:
    """Accept either a coordinate object or a raw drag id."""
    if isinstance(target, (BlockLevel, InSuperset, BlockContainer, SupersetContainer)):
        return target
    if target is None:
        return None
    coord = parse_drag_id(target)
    if coord is None:
        logger.debug("Ignoring unparseable drag id %r", target)
    return coord


def container_of(coord: DropTarget) -> ContainerCoordinate:
    """Return the container a coordinate lives in (or is)."""
    if isinstance(coord, BlockLevel):
        return BlockContainer(block=coord.block)
    if isinstance(coord, InSuperset):
        return SupersetContainer(block=coord.block, superset=coord.superset)
    return coord


def _get(items: list, index: int):
    if 0 <= index < len(items):
        return items[index]
    return None


def resolve_block(workout: Workout, block_index: int) -> Optional[Block]:
    return _get(workout.blocks, block_index)


def resolve_superset(workout: Workout, block_index: int, superset_index: int) -> Optional[Superset]:
    block = resolve_block(workout, block_index)
    if block is None:
        return None
    return _get(block.supersets, superset_index)


def resolve_container(workout: Workout, coord: DropTarget) -> Optional[List[Exercise]]:
    """Return the live exercise list a coordinate addresses, or None if stale."""
    container = container_of(coord)
    if isinstance(container, BlockContainer):
        block = resolve_block(workout, container.block)
        return block.exercises if block is not None else None
    superset = resolve_superset(workout, container.block, container.superset)
    return superset.exercises if superset is not None else None


def resolve_exercise(workout: Workout, coord: ExerciseCoordinate) -> Optional[Exercise]:
    """Look up the exercise at a coordinate, or None if it no longer exists."""
    exercises = resolve_container(workout, coord)
    if exercises is None:
        return None
    return _get(exercises, coord.index)


def iter_exercise_coordinates(workout: Workout) -> Iterator[Tuple[ExerciseCoordinate, Exercise]]:
    """Yield every exercise with its coordinate, loose exercises first in each block."""
    for block_idx, block in enumerate(workout.blocks):
        for ex_idx, exercise in enumerate(block.exercises):
            yield BlockLevel(block=block_idx, index=ex_idx), exercise
        for ss_idx, superset in enumerate(block.supersets):
            for ex_idx, exercise in enumerate(superset.exercises):
                yield InSuperset(block=block_idx, superset=ss_idx, index=ex_idx), exercise
