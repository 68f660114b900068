"""
Workout session draft service.

Drafts are recovered after a reload only while they are fresh; an
abandoned draft older than ``SESSION_DRAFT_MAX_AGE_HOURS`` is dropped so
that yesterday's half-finished workout does not reappear.  Freshness is
decided here, never by the engine.
"""

import datetime
import logging
from typing import Optional

from app.core.config import settings
from app.schemas.session_draft import WorkoutSessionDraft
from app.schemas.workout import WorkoutLog, WorkoutLogEntry

logger = logging.getLogger(__name__)


def _default_max_age() -> datetime.timedelta:
    return datetime.timedelta(hours=settings.SESSION_DRAFT_MAX_AGE_HOURS)


def _utc(instant: datetime.datetime) -> datetime.datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=datetime.timezone.utc)
    return instant.astimezone(datetime.timezone.utc)


def is_stale(
    draft: WorkoutSessionDraft,
    now: datetime.datetime,
    max_age: Optional[datetime.timedelta] = None,
) -> bool:
    """Whether *draft* was started more than *max_age* before *now*."""
    window = max_age if max_age is not None else _default_max_age()
    return _utc(now) - draft.started_at > window


def recover_draft(
    draft: Optional[WorkoutSessionDraft],
    now: datetime.datetime,
    max_age: Optional[datetime.timedelta] = None,
) -> Optional[WorkoutSessionDraft]:
    """Return *draft* if it is still fresh, otherwise ``None``."""
    if draft is None:
        return None
    if is_stale(draft, now, max_age):
        logger.warning(
            "Discarding stale session draft %s started at %s",
            draft.workout_id, draft.started_at.isoformat(),
        )
        return None
    return draft


def draft_to_workout_log(
    draft: WorkoutSessionDraft,
    finished_at: datetime.datetime,
) -> WorkoutLog:
    """Freeze a finished draft into a :class:`WorkoutLog`.

    Exercises without any logged set are left out.  The log is dated at
    the session start; its duration runs until *finished_at*.
    """
    entries = [
        WorkoutLogEntry(
            exercise_id=exercise_id,
            exercise_name=draft.exercise_names.get(exercise_id),
            sets=tuple(sets),
        )
        for exercise_id, sets in draft.session_log.items()
        if sets
    ]
    elapsed = (_utc(finished_at) - draft.started_at).total_seconds()
    return WorkoutLog(
        id=draft.workout_id,
        date=draft.started_at,
        workout_name=draft.workout_name,
        duration_seconds=max(elapsed, 0.0),
        exercises=tuple(entries),
    )
