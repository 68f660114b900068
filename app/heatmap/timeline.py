"""
Time windows and per-day breakdowns for the dashboard.

The heatmap itself is always computed over a :class:`DateRange`; this
module builds the usual ranges ("this week", "last 7 days") and a
per-day chart-group breakdown used by the volume chart.

All calendar arithmetic is done in UTC, matching the normalised log
dates.
"""

from __future__ import annotations

import datetime
import logging
from collections import defaultdict
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.heatmap.aggregator import aggregate
from app.heatmap.catalog import CatalogLike, OnMissingExercise, as_catalog
from app.heatmap.chart_groups import fold_to_chart_groups
from app.heatmap.taxonomy import ChartGroup, Taxonomy
from app.schemas.workout import DateRange, WorkoutLog

logger = logging.getLogger(__name__)


def _utc(now: datetime.datetime) -> datetime.datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=datetime.timezone.utc)
    return now.astimezone(datetime.timezone.utc)


def week_range(now: datetime.datetime, week_starts_on: int = 0) -> DateRange:
    """From the start of the current week to *now*.

    Args:
        now: Reference instant (naive values are taken as UTC).
        week_starts_on: First weekday, ``0`` = Monday … ``6`` = Sunday.
    """
    if not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be in 0..6, got {week_starts_on}")
    now = _utc(now)
    offset = (now.weekday() - week_starts_on) % 7
    first_day = now.date() - datetime.timedelta(days=offset)
    return DateRange(start=first_day, end=now)


def last_n_days(now: datetime.datetime, days: int) -> DateRange:
    """Today plus the ``days - 1`` preceding calendar days, up to *now*."""
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    now = _utc(now)
    first_day = now.date() - datetime.timedelta(days=days - 1)
    return DateRange(start=first_day, end=now)


class DailyChartGroupVolume(BaseModel):
    """Raw load per chart group for one calendar day."""

    date: datetime.date
    totals: dict[ChartGroup, float] = Field(
        ..., description="Every chart group, 0.0 when untouched",
    )


def daily_chart_group_volume(
    logs: Iterable[WorkoutLog],
    catalog: CatalogLike,
    date_range: DateRange,
    *,
    on_missing: OnMissingExercise = OnMissingExercise.SKIP,
    taxonomy: Optional[Taxonomy] = None,
) -> list[DailyChartGroupVolume]:
    """One row per UTC day in *date_range* that has at least one log.

    Rows are in ascending date order.  Each day is aggregated
    independently and folded into chart groups.
    """
    index = as_catalog(catalog)

    by_day: dict[datetime.date, list[WorkoutLog]] = defaultdict(list)
    for log in logs:
        if date_range.contains(log.date):
            by_day[log.date.date()].append(log)

    rows: list[DailyChartGroupVolume] = []
    for day in sorted(by_day):
        raw = aggregate(
            by_day[day], index, date_range,
            on_missing=on_missing, taxonomy=taxonomy,
        )
        rows.append(DailyChartGroupVolume(
            date=day, totals=fold_to_chart_groups(raw, taxonomy),
        ))

    logger.debug("Daily volume: %d active days", len(rows))
    return rows
