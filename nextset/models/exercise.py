from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nextset.core.db import Base

if TYPE_CHECKING:
    from nextset.models.exercise_set import ExerciseSet
    from nextset.models.workout import Workout


class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)  # e.g. Bench Press

    # Set only when the exercise is scheduled directly rather than through a workout
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)

    workout_id: Mapped[int | None] = mapped_column(
        ForeignKey("workouts.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )

    workout: Mapped[Workout | None] = relationship(back_populates="exercises", lazy="selectin")

    sets: Mapped[list[ExerciseSet]] = relationship(
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="[ExerciseSet.created_at, ExerciseSet.id]",
        lazy="selectin",
    )
