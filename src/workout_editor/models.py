"""Data models for the workout structure tree."""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional, Literal, get_args

# Block execution modes. None means a plain block with no structure label.
StructureType = Literal[
    'superset',
    'amrap',
    'emom',
    'for-time',
    'tabata',
    'circuit',
]

STRUCTURE_TYPES = get_args(StructureType)


class Exercise(BaseModel):
    """Represents a single exercise."""
    name: str = Field(..., min_length=1)
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    reps_range: Optional[str] = None
    duration_sec: Optional[int] = Field(default=None, ge=0)
    rest_sec: Optional[int] = Field(default=None, ge=0)  # Rest after this exercise
    distance_m: Optional[int] = Field(default=None, ge=0)
    distance_range: Optional[str] = None
    type: str = "strength"
    notes: Optional[str] = None
    # Instagram, TikTok, YouTube or any video URL for this exercise
    follow_along_url: Optional[str] = Field(default=None, alias="followAlongUrl")

    class Config:
        extra = "ignore"  # Ignore extra fields like 'id', 'addedAt' from UI
        populate_by_name = True

    @property
    def is_rep_based(self) -> bool:
        return self.reps is not None

    @property
    def has_distance(self) -> bool:
        return self.distance_m is not None

    @property
    def is_timed(self) -> bool:
        return self.duration_sec is not None


class Superset(BaseModel):
    """An ordered group of exercises sharing one rest period."""
    exercises: List[Exercise] = Field(default_factory=list)
    rest_between_sec: Optional[int] = Field(default=None, ge=0)  # Rest after each round

    class Config:
        extra = "ignore"

    @field_validator("exercises", mode="before")
    @classmethod
    def _null_exercises(cls, value):
        return [] if value is None else value


class Block(BaseModel):
    """
    Represents a block or section of a workout.

    A block holds two independent collections: loose exercises and supersets.
    The structure type is only a label plus timing defaults; it never changes
    which collections exist. Timed structures keep their exercises in the
    first superset by convention.

    Structure types:
    - 'superset': exercises grouped back to back, rest after the group
    - 'circuit': multiple exercises in sequence, rest between rounds
    - 'tabata': work/rest intervals (20s work, 10s rest)
    - 'emom': Every Minute On the Minute
    - 'amrap': As Many Rounds As Possible within time_work_sec
    - 'for-time': complete as fast as possible
    """
    label: str = "Block"
    structure: Optional[StructureType] = None

    # Exercises outside any superset
    exercises: List[Exercise] = Field(default_factory=list)
    supersets: List[Superset] = Field(default_factory=list)

    # Structure-specific parameters
    time_work_sec: Optional[int] = Field(default=None, ge=0)
    rest_between_sec: Optional[int] = Field(default=None, ge=0)  # Block-level, not a superset's rest

    class Config:
        extra = "ignore"  # Ignore extra fields like 'id', 'rounds' from UI

    @field_validator("exercises", "supersets", mode="before")
    @classmethod
    def _null_collections(cls, value):
        # Persisted blocks may carry null instead of an empty list
        return [] if value is None else value

    @property
    def all_exercises(self) -> List[Exercise]:
        """Loose exercises first, then each superset's exercises in order."""
        exercises = list(self.exercises)
        for superset in self.supersets:
            exercises.extend(superset.exercises)
        return exercises

    @property
    def exercise_count(self) -> int:
        return len(self.exercises) + sum(len(s.exercises) for s in self.supersets)


class Workout(BaseModel):
    """Represents a complete workout."""
    title: str = "New Workout"
    source: str = "manual"
    blocks: List[Block] = Field(default_factory=list)

    class Config:
        extra = "ignore"  # Ignore extra fields from UI

    @property
    def all_exercises(self) -> List[Exercise]:
        exercises: List[Exercise] = []
        for block in self.blocks:
            exercises.extend(block.all_exercises)
        return exercises

    @property
    def exercise_count(self) -> int:
        return sum(block.exercise_count for block in self.blocks)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persistence shape (camelCase followAlongUrl)."""
        return self.model_dump(by_alias=True)
