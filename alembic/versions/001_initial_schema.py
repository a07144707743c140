"""Initial schema: workouts, workout_exercises, workout_sets, custom_exercises.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "workouts",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("performed_on", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_workouts"),
    )
    op.create_index("ix_workouts_performed_on", "workouts", ["performed_on"], unique=False)

    op.create_table(
        "workout_exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.Column("muscle_group", sa.String(length=100), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ["workout_id"], ["workouts.id"],
            name="fk_workout_exercises_workout_id_workouts", ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_workout_exercises"),
    )
    op.create_index("ix_workout_exercises_workout_id", "workout_exercises", ["workout_id"], unique=False)
    op.create_index("ix_workout_exercises_muscle_group", "workout_exercises", ["muscle_group"], unique=False)
    op.create_index("ix_workout_exercises_exercise_name", "workout_exercises", ["exercise_name"], unique=False)

    op.create_table(
        "workout_sets",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_exercise_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.ForeignKeyConstraint(
            ["workout_exercise_id"], ["workout_exercises.id"],
            name="fk_workout_sets_workout_exercise_id_workout_exercises", ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_workout_sets"),
    )
    op.create_index("ix_workout_sets_workout_exercise_id", "workout_sets", ["workout_exercise_id"], unique=False)

    op.create_table(
        "custom_exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("muscle_group", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_custom_exercises"),
        sa.UniqueConstraint("muscle_group", "name", name="uq_custom_exercises_muscle_group_name"),
    )
    op.create_index("ix_custom_exercises_muscle_group", "custom_exercises", ["muscle_group"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_custom_exercises_muscle_group", table_name="custom_exercises")
    op.drop_table("custom_exercises")
    op.drop_index("ix_workout_sets_workout_exercise_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("ix_workout_exercises_exercise_name", table_name="workout_exercises")
    op.drop_index("ix_workout_exercises_muscle_group", table_name="workout_exercises")
    op.drop_index("ix_workout_exercises_workout_id", table_name="workout_exercises")
    op.drop_table("workout_exercises")
    op.drop_index("ix_workouts_performed_on", table_name="workouts")
    op.drop_table("workouts")
