import asyncio
import os
import sys

from sqlalchemy import text

# Add project root to sys.path
sys.path.append(os.getcwd())

import app.models  # noqa: F401 - register all models
from app.db.base import Base
from app.db.session import engine


async def drop_tables():
    print("Dropping workouts, workout_exercises, workout_sets, custom_exercises...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
