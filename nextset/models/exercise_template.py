from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from nextset.core.db import Base


class ExerciseTemplate(Base):
    __tablename__ = "exercise_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Unique case-insensitively; enforced by nextset.rules.find_template
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
