from datetime import date, datetime

import pytest
from pydantic import ValidationError

from app.schemas.session import ExerciseEntry, WorkoutSession


def test_time_of_day_is_dropped():
    assert WorkoutSession(date="2024-01-01T23:59:00.000Z").date == date(2024, 1, 1)
    assert WorkoutSession(date=datetime(2024, 1, 1, 6, 30)).date == date(2024, 1, 1)
    assert WorkoutSession(date="2024-01-01").date == date(2024, 1, 1)
    assert WorkoutSession(date="2024-01-01 18:30:00").date == date(2024, 1, 1)
    assert WorkoutSession.model_validate({"date": " 2024-01-01 06:00:00+02:00 ", "exercises": []}).date == date(2024, 1, 1)


def test_original_wire_names_accepted():
    session = WorkoutSession.model_validate(
        {
            "date": "2024-01-01",
            "exercises": [
                {"muscleGroup": "Chest", "exercise": "Bench Press", "sets": [{"reps": 10, "weight": 100}]}
            ],
        }
    )
    entry = session.exercises[0]
    assert (entry.muscle_group, entry.exercise_name) == ("Chest", "Bench Press")
    assert entry.sets[0].reps == 10


def test_snapshots_are_immutable():
    entry = ExerciseEntry(muscle_group="Chest", exercise_name="Bench Press")
    with pytest.raises(ValidationError):
        entry.exercise_name = "Dips"
    assert entry.sets == ()


def test_non_numeric_reps_rejected():
    with pytest.raises(ValidationError):
        WorkoutSession.model_validate(
            {"date": "2024-01-01", "exercises": [
                {"muscle_group": "Chest", "exercise_name": "Dips", "sets": [{"reps": "many", "weight": 0}]}
            ]}
        )
