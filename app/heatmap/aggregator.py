"""
Engagement aggregator — workout logs → raw per-muscle-group totals.

This is the core of the heatmap.  Given a collection of workout logs, an
exercise catalog and a date range it:

1. initialises a zero total for **every** muscle group,
2. keeps only logs whose date falls inside the range (bounds inclusive),
3. resolves each log entry to a category and computes its load with the
   volume calculator, then attributes the load:

   * **cardio categories** (the taxonomy defines intensity weights) fan
     out: every ``(muscle, weight)`` pair receives ``load × weight``.
     Weights are independent multipliers, so the total attributed load
     may be more or less than the entry's load;
   * **strength categories** attribute the *entire* load to the primary
     (first-listed) muscle group only.  Secondary groups exist for
     display; crediting them too would count the same work several times
     across correlated muscles.

4. returns the totals as a raw :class:`MuscleEngagementMap`.

Cardio sessions logged without any exercise (``activity_type`` +
``duration_seconds``) are treated as a single implicit entry of the
activity's category.

Design choices
--------------

1. **Pure** — no caches, no shared state; identical inputs give
   bit-identical output.  Memoisation, if wanted, belongs to the caller.
2. **Caller-chosen policy** for unknown exercises
   (:class:`~app.heatmap.catalog.OnMissingExercise`).  With ``ABORT`` the
   error is raised before any partial result exists.
3. **Integrity faults always propagate** — an unknown category or an
   empty muscle mapping is raised whatever the policy.
4. **Totals saturate** at :data:`~app.heatmap.volume.MAX_LOAD`, so a
   map built from absurd logs stays finite and normalisable.
5. **Empty is valid** — no logs, or no logs in range, gives an all-zero
   map, never an error.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.heatmap.catalog import (
    CatalogLike,
    ExerciseCatalog,
    OnMissingExercise,
    as_catalog,
    resolve_category,
)
from app.heatmap.errors import ExerciseNotFound
from app.heatmap.taxonomy import DEFAULT_TAXONOMY, MuscleGroup, Taxonomy
from app.heatmap.volume import MAX_LOAD, entry_load, session_load
from app.schemas.engagement import MuscleEngagementMap
from app.schemas.workout import DateRange, WorkoutLog

logger = logging.getLogger(__name__)


# ======================================================================
# Result model
# ======================================================================


class SkippedEntry(BaseModel):
    """A log entry dropped under the ``SKIP`` policy."""

    log_id: Optional[str] = None
    entry_index: int
    exercise_id: Optional[str] = None
    exercise_name: Optional[str] = None


class AggregationResult(BaseModel):
    """Raw engagement plus bookkeeping about what was (not) counted."""

    engagement: MuscleEngagementMap
    logs_in_range: int = Field(0, ge=0)
    skipped_entries: list[SkippedEntry] = Field(default_factory=list)


# ======================================================================
# Attribution
# ======================================================================


def _attribute(
    totals: dict[MuscleGroup, float],
    category: str,
    load: float,
    taxonomy: Taxonomy,
) -> None:
    """Add *load* for one entry of *category* into *totals*."""
    # Resolved even when load is 0 so taxonomy gaps always surface.
    primary = taxonomy.primary_muscle_group(category)

    weights = taxonomy.cardio_weights_for(category)
    if weights is not None:
        for muscle, weight in weights.items():
            totals[muscle] = min(totals[muscle] + load * weight, MAX_LOAD)
        return

    totals[primary] = min(totals[primary] + load, MAX_LOAD)


def _accumulate_log(
    totals: dict[MuscleGroup, float],
    log: WorkoutLog,
    catalog: ExerciseCatalog,
    taxonomy: Taxonomy,
    on_missing: OnMissingExercise,
    skipped: list[SkippedEntry],
) -> None:
    if not log.exercises:
        if log.activity_type is None:
            return
        category = taxonomy.category_for_activity(log.activity_type)
        if category is not None:
            _attribute(totals, category, session_load(log.duration_seconds), taxonomy)
        return

    for index, entry in enumerate(log.exercises):
        try:
            category = resolve_category(entry, catalog)
        except ExerciseNotFound as exc:
            if on_missing is OnMissingExercise.ABORT:
                raise exc.located(log.id, log.date, index) from exc
            logger.info(
                "Skipping entry %d of log %s: exercise id=%r name=%r not in catalog",
                index, log.id or log.date.isoformat(), entry.exercise_id,
                entry.exercise_name,
            )
            skipped.append(SkippedEntry(
                log_id=log.id,
                entry_index=index,
                exercise_id=entry.exercise_id,
                exercise_name=entry.exercise_name,
            ))
            continue

        _attribute(totals, category, entry_load(entry), taxonomy)


# ======================================================================
# Main entry points
# ======================================================================


def aggregate_detailed(
    logs: Iterable[WorkoutLog],
    catalog: CatalogLike,
    date_range: DateRange,
    *,
    on_missing: OnMissingExercise,
    taxonomy: Optional[Taxonomy] = None,
) -> AggregationResult:
    """Like :func:`aggregate`, also reporting logs counted and entries skipped."""
    tax = taxonomy or DEFAULT_TAXONOMY
    index = as_catalog(catalog)

    totals: dict[MuscleGroup, float] = {m: 0.0 for m in MuscleGroup}
    skipped: list[SkippedEntry] = []

    # --- Date filter (inclusive) ---
    all_logs = list(logs)
    in_range = [log for log in all_logs if date_range.contains(log.date)]
    if len(in_range) != len(all_logs):
        logger.debug(
            "%d of %d logs outside %s .. %s",
            len(all_logs) - len(in_range), len(all_logs),
            date_range.start.isoformat(), date_range.end.isoformat(),
        )

    # --- Attribution ---
    for log in in_range:
        _accumulate_log(totals, log, index, tax, on_missing, skipped)

    logger.debug(
        "Aggregated %d logs, skipped %d entries", len(in_range), len(skipped),
    )
    return AggregationResult(
        engagement=MuscleEngagementMap(engagement=totals),
        logs_in_range=len(in_range),
        skipped_entries=skipped,
    )


def aggregate(
    logs: Iterable[WorkoutLog],
    catalog: CatalogLike,
    date_range: DateRange,
    *,
    on_missing: OnMissingExercise,
    taxonomy: Optional[Taxonomy] = None,
) -> MuscleEngagementMap:
    """Compute raw per-muscle-group engagement over *date_range*.

    Args:
        logs: Workout logs in any order; only read, never mutated.
        catalog: Exercise definitions (a list or an :class:`ExerciseCatalog`).
        date_range: Inclusive window; logs outside it are ignored.
        on_missing: What to do when an entry's exercise is not in
            *catalog* — skip the entry or abort the whole computation.
        taxonomy: Optional :class:`Taxonomy` override (uses
            ``DEFAULT_TAXONOMY`` if ``None``).

    Returns:
        Raw :class:`MuscleEngagementMap` with a value for every muscle group.

    Raises:
        ExerciseNotFound: Only with ``OnMissingExercise.ABORT``; identifies
            the log and entry index.
        UnknownCategory: A resolved category is not in the taxonomy.
        EmptyMuscleGroupMapping: A resolved category maps to no muscles.
    """
    return aggregate_detailed(
        logs, catalog, date_range, on_missing=on_missing, taxonomy=taxonomy,
    ).engagement
