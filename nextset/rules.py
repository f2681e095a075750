"""Pure domain rules shared by the service layer.

Nothing here touches the database. The service modules load entities and
hand them to these functions, so the rules can be tested on plain objects.
"""
from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence
from typing import Protocol


class Named(Protocol):
    name: str | None


def start_of_day(day: dt.date | dt.datetime) -> dt.date:
    if isinstance(day, dt.datetime):
        return day.date()
    return day


def day_bounds(day: dt.date | dt.datetime) -> tuple[dt.date, dt.date]:
    """Half-open interval ``[start, end)`` covering one calendar day."""
    start = start_of_day(day)
    return start, start + dt.timedelta(days=1)


def _within(value: dt.date | dt.datetime | None, start: dt.date, end: dt.date) -> bool:
    if value is None:
        return False
    return start <= start_of_day(value) < end


def falls_on_day(exercise, day: dt.date | dt.datetime) -> bool:
    """True when the exercise is dated on ``day`` directly or through its workout."""
    start, end = day_bounds(day)
    if _within(exercise.date, start, end):
        return True
    workout = exercise.workout
    return workout is not None and _within(workout.date, start, end)


def exercises_on_day(day: dt.date | dt.datetime, exercises: Iterable) -> list:
    # sorted() is stable, so equal names keep their incoming order
    seen: set[int] = set()
    picked = []
    for exercise in exercises:
        if id(exercise) in seen or not falls_on_day(exercise, day):
            continue
        seen.add(id(exercise))
        picked.append(exercise)
    return sorted(picked, key=lambda e: e.name or "")


def normalize_name(name: str | None) -> str:
    return (name or "").strip()


def name_key(name: str | None) -> str:
    return normalize_name(name).casefold()


def find_template(name: str, templates: Sequence[Named]) -> Named | None:
    key = name_key(name)
    for template in templates:
        if name_key(template.name) == key:
            return template
    return None


def needs_template(name: str, templates: Sequence[Named]) -> bool:
    """Whether a catalog entry must be added for ``name``.

    Blank names never qualify; callers reject them before this point.
    """
    if not normalize_name(name):
        return False
    return find_template(name, templates) is None


def is_valid_set(weight: float | None, reps: int | None) -> bool:
    if weight is None or reps is None:
        return False
    return weight > 0 and reps > 0


def is_orphan(exercise) -> bool:
    return exercise.date is None and exercise.workout is None
