"""Insert a few weeks of sample workouts so the progress chart has data (dev only)."""

import asyncio
import os
import sys
from datetime import date, timedelta

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import async_session_maker, engine
from app.models import Workout, WorkoutExercise, WorkoutSet
from app.services.custom_exercise_store import CustomExerciseStore

# (muscle group, exercise, [(reps, weight), ...]) per training day, alternating
ROTATION = [
    [
        ("Chest", "Bench Press", [(10, 60.0), (8, 65.0), (6, 70.0)]),
        ("Triceps", "Triceps Pushdown", [(12, 25.0), (12, 25.0)]),
    ],
    [
        ("Quadriceps", "Barbell Squat", [(8, 80.0), (8, 85.0), (6, 90.0)]),
        ("Hamstrings", "Romanian Deadlift", [(10, 60.0), (10, 60.0)]),
    ],
    [
        ("Biceps", "Hammer Curl", [(12, 12.0), (10, 14.0)]),
        ("Biceps", "21s", [(21, 10.0)]),
        ("Lats", "Pull-up", [(8, 0.0), (6, 0.0)]),
    ],
]


async def seed_into(session: AsyncSession, start: date, days: int = 28) -> int:
    """Add sample workouts every other day from `start`; returns how many."""
    count = 0
    for i in range(0, days, 2):
        plan = ROTATION[(i // 2) % len(ROTATION)]
        workout = Workout(performed_on=start + timedelta(days=i))
        for pos, (group, name, sets) in enumerate(plan):
            # progressive overload: +1 kg per cycle
            bump = float(i // (2 * len(ROTATION)))
            exercise = WorkoutExercise(position=pos, muscle_group=group, exercise_name=name)
            exercise.sets = [
                WorkoutSet(position=n, reps=reps, weight=weight + bump if weight else 0.0)
                for n, (reps, weight) in enumerate(sets)
            ]
            workout.exercises.append(exercise)
        session.add(workout)
        count += 1
    # already present on a re-run
    await CustomExerciseStore(session).add("Biceps", "21s")
    return count


async def seed(days: int = 28) -> None:
    start = date.today() - timedelta(days=days)
    async with async_session_maker() as session:
        count = await seed_into(session, start, days)
        await session.commit()
    print(f"Seeded {count} workouts starting {start.isoformat()}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
