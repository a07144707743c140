import asyncio
import os
import sys

from sqlalchemy import text

# Add project root to sys.path
sys.path.append(os.getcwd())

from app.db.session import async_session_maker, engine

TABLES = ["workouts", "workout_exercises", "workout_sets", "custom_exercises"]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            result = await session.execute(text(f"SELECT count(*) FROM {table}"))
            print(f"Table '{table}' row count: {result.scalar()}")

        result = await session.execute(
            text("SELECT min(performed_on), max(performed_on) FROM workouts")
        )
        first, last = result.one()
        print(f"Workouts span: {first} .. {last}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
