"""Tests for exercise add/delete/update and superset rest."""
import copy

import pytest
from pydantic import ValidationError

from workout_editor.config import settings
from workout_editor.editor import (
    add_exercise,
    delete_exercise,
    merge_exercise_fields,
    set_superset_rest,
    update_exercise,
)
from workout_editor.errors import InvalidAddressError, InvalidUpdateError
from workout_editor.models import Exercise


class TestAddExercise:

    def test_add_to_loose_list_uses_defaults(self, empty_block_workout):
        result = add_exercise(empty_block_workout, 0, None, "Push-ups")
        exercise = result.blocks[0].exercises[0]

        assert exercise.name == "Push-ups"
        assert exercise.sets == 3
        assert exercise.reps == 10
        assert exercise.rest_sec == 60
        assert exercise.type == "strength"
        assert exercise.reps_range is None
        assert exercise.duration_sec is None
        assert exercise.distance_m is None
        assert exercise.distance_range is None

    def test_add_appends_to_superset(self, sample_workout):
        result = add_exercise(sample_workout, 1, 0, "Dips")
        assert [e.name for e in result.blocks[1].supersets[0].exercises] == ["Bench Press", "Pull-ups", "Dips"]
        assert result.blocks[1].exercises == sample_workout.blocks[1].exercises

    def test_defaults_follow_settings(self, empty_block_workout, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_EXERCISE_SETS", 5)
        monkeypatch.setattr(settings, "DEFAULT_EXERCISE_REPS", 5)
        exercise = add_exercise(empty_block_workout, 0, None, "Squat").blocks[0].exercises[0]
        assert (exercise.sets, exercise.reps) == (5, 5)

    def test_missing_container_is_no_op(self, sample_workout):
        assert add_exercise(sample_workout, 0, 0, "Dips") == sample_workout
        assert add_exercise(sample_workout, 7, None, "Dips") == sample_workout

    def test_empty_name_rejected(self, empty_block_workout):
        with pytest.raises(ValidationError):
            add_exercise(empty_block_workout, 0, None, "")

    @pytest.mark.parametrize("block_index,superset_index", [(-1, None), (0, -1), ("0", None)])
    def test_invalid_indices_raise(self, empty_block_workout, block_index, superset_index):
        with pytest.raises(InvalidAddressError):
            add_exercise(empty_block_workout, block_index, superset_index, "Dips")


class TestDeleteExercise:

    def test_delete_loose(self, sample_workout):
        result = delete_exercise(sample_workout, 0, None, 1)
        assert [e.name for e in result.blocks[0].exercises] == ["Jumping Jacks", "Row"]

    def test_delete_from_superset(self, sample_workout):
        result = delete_exercise(sample_workout, 1, 1, 0)
        assert [e.name for e in result.blocks[1].supersets[1].exercises] == ["Tricep Pushdown", "Face Pull"]
        assert result.exercise_count == sample_workout.exercise_count - 1

    def test_delete_last_leaves_empty_superset(self, sample_workout):
        workout = delete_exercise(sample_workout, 1, 0, 0)
        workout = delete_exercise(workout, 1, 0, 0)
        assert workout.blocks[1].supersets[0].exercises == []
        assert len(workout.blocks[1].supersets) == 2

    def test_out_of_range_is_no_op(self, sample_workout):
        assert delete_exercise(sample_workout, 0, None, 3) == sample_workout
        assert delete_exercise(sample_workout, 1, 4, 0) == sample_workout

    def test_negative_index_raises(self, sample_workout):
        with pytest.raises(InvalidAddressError):
            delete_exercise(sample_workout, 0, None, -1)


class TestUpdateExercise:

    def test_shallow_merge_keeps_other_fields(self, sample_workout):
        result = update_exercise(sample_workout, 1, 0, 0, {"sets": 5, "notes": "pause at chest"})
        exercise = result.blocks[1].supersets[0].exercises[0]

        assert exercise.sets == 5
        assert exercise.notes == "pause at chest"
        assert exercise.reps == 8
        assert exercise.name == "Bench Press"

    def test_setting_reps_clears_distance(self, sample_workout):
        """Row is measured by distance until reps are set."""
        result = update_exercise(sample_workout, 0, None, 2, {"reps": 12})
        exercise = result.blocks[0].exercises[2]

        assert exercise.reps == 12
        assert exercise.distance_m is None

    def test_setting_distance_clears_reps(self, sample_workout):
        result = update_exercise(sample_workout, 0, None, 0, {"distance_m": 400})
        exercise = result.blocks[0].exercises[0]

        assert exercise.distance_m == 400
        assert exercise.reps is None

    def test_reps_wins_when_both_set(self):
        exercise = merge_exercise_fields(Exercise(name="Row"), {"reps": 12, "distance_m": 400})
        assert exercise.reps == 12
        assert exercise.distance_m is None

    def test_clearing_reps_keeps_distance(self):
        exercise = Exercise(name="Row", distance_m=400)
        merged = merge_exercise_fields(exercise, {"reps": None})
        assert merged.distance_m == 400

    def test_follow_along_url_by_alias(self, sample_workout):
        result = update_exercise(sample_workout, 0, None, 0, {"followAlongUrl": "https://youtu.be/abc"})
        assert result.blocks[0].exercises[0].follow_along_url == "https://youtu.be/abc"

    def test_unknown_field_raises(self, sample_workout):
        with pytest.raises(InvalidUpdateError):
            update_exercise(sample_workout, 0, None, 0, {"weight": 100})

    def test_invalid_value_raises(self, sample_workout):
        with pytest.raises(ValidationError):
            update_exercise(sample_workout, 0, None, 0, {"sets": -2})

    def test_out_of_range_is_no_op(self, sample_workout):
        assert update_exercise(sample_workout, 1, 1, 3, {"reps": 1}) == sample_workout

    def test_dict_input_not_mutated(self, sample_workout_dict):
        before = copy.deepcopy(sample_workout_dict)
        update_exercise(sample_workout_dict, 0, None, 0, {"reps": 50})
        assert sample_workout_dict == before


class TestSupersetRest:

    def test_set_rest(self, sample_workout):
        result = set_superset_rest(sample_workout, 1, 1, 45)
        assert result.blocks[1].supersets[1].rest_between_sec == 45
        assert result.blocks[1].supersets[0].rest_between_sec == 90

    def test_clear_rest(self, sample_workout):
        result = set_superset_rest(sample_workout, 1, 0, None)
        assert result.blocks[1].supersets[0].rest_between_sec is None

    def test_block_rest_independent(self, sample_workout):
        result = set_superset_rest(sample_workout, 1, 0, 15)
        assert result.blocks[1].rest_between_sec == sample_workout.blocks[1].rest_between_sec

    def test_missing_superset_is_no_op(self, sample_workout):
        assert set_superset_rest(sample_workout, 0, 0, 30) == sample_workout

    def test_negative_seconds_raise(self, sample_workout):
        with pytest.raises(InvalidAddressError):
            set_superset_rest(sample_workout, 1, 0, -5)
