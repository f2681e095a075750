from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nextset.core.db import Base

if TYPE_CHECKING:
    from nextset.models.exercise import Exercise


class Workout(Base):
    __tablename__ = "workouts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    name: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    # None marks a reusable template; a dated workout is a scheduled instance
    date: Mapped[dt.date | None] = mapped_column(
        Date,
        nullable=True,
        index=True,
    )

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )

    # No ORM delete cascade here: nextset.services.workouts owns that policy
    exercises: Mapped[list[Exercise]] = relationship(
        back_populates="workout",
        order_by="[Exercise.name, Exercise.id]",
        lazy="selectin",
    )

    @property
    def is_template(self) -> bool:
        return self.date is None
