"""
Heatmap service.

Thin adapter between the HTTP layer and the pure engine in
:mod:`app.heatmap`: fills in request defaults from settings, calls the
engine and maps engine errors to HTTP errors.

Error mapping:

- :class:`ExerciseNotFound` (``abort`` policy only) → 422
- taxonomy integrity faults → 409 (catalog and taxonomy disagree; the
  request cannot succeed until one of them is fixed)
"""

import datetime
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import HTTPException, status

from app.core.config import settings
from app.heatmap.aggregator import aggregate_detailed
from app.heatmap.catalog import ExerciseCatalog, OnMissingExercise
from app.heatmap.chart_groups import reduce_to_chart_groups
from app.heatmap.errors import ExerciseNotFound, TaxonomyIntegrityError
from app.heatmap.exercise_catalog import default_catalog
from app.heatmap.normalizer import FixedCeiling, NormalizationMode, RelativeToMax, normalize
from app.heatmap.taxonomy import Taxonomy
from app.heatmap.timeline import daily_chart_group_volume, week_range
from app.heatmap.views import BodyView, rank_for_view
from app.schemas.heatmap import (
    DailyVolumeRequest,
    DailyVolumeResponse,
    HeatmapRequest,
    HeatmapResponse,
    MusclePillsRequest,
    MusclePillsResponse,
)
from app.schemas.muscle import ChartGroup
from app.schemas.workout import DateRange, ExerciseDefinition

logger = logging.getLogger(__name__)


@contextmanager
def _engine_errors() -> Iterator[None]:
    """Translate engine exceptions raised inside the block to HTTP errors."""
    try:
        yield
    except ExerciseNotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except TaxonomyIntegrityError as exc:
        logger.error("Taxonomy integrity fault for category %r: %s", exc.category, exc)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc


class HeatmapService:
    """Service for heatmap computations."""

    def __init__(
        self,
        catalog: Optional[ExerciseCatalog] = None,
        taxonomy: Optional[Taxonomy] = None,
    ):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.taxonomy = taxonomy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute_heatmap(
        self, request: HeatmapRequest, now: Optional[datetime.datetime] = None,
    ) -> HeatmapResponse:
        date_range = request.range or self._default_range(now)
        mode = request.mode or self._default_mode()
        catalog = self._catalog_for(request.catalog)

        with _engine_errors():
            result = aggregate_detailed(
                request.logs, catalog, date_range,
                on_missing=self._policy(request.on_missing_exercise),
                taxonomy=self.taxonomy,
            )
            intensities = normalize(result.engagement, mode)
            groups: set[ChartGroup] = set()
            for log in request.logs:
                if date_range.contains(log.date):
                    groups |= reduce_to_chart_groups(log.exercises, catalog, self.taxonomy)

        return HeatmapResponse(
            range=date_range,
            mode=mode,
            raw=result.engagement.engagement,
            intensities=intensities.engagement,
            front=rank_for_view(intensities, BodyView.FRONT),
            back=rank_for_view(intensities, BodyView.BACK),
            engaged_chart_groups=sorted(groups, key=lambda g: g.value),
            logs_in_range=result.logs_in_range,
            skipped_entries=result.skipped_entries,
        )

    def muscle_pills(self, request: MusclePillsRequest) -> MusclePillsResponse:
        catalog = self._catalog_for(request.catalog)
        with _engine_errors():
            groups = reduce_to_chart_groups(request.entries, catalog, self.taxonomy)
        return MusclePillsResponse(chart_groups=sorted(groups, key=lambda g: g.value))

    def daily_volume(
        self, request: DailyVolumeRequest, now: Optional[datetime.datetime] = None,
    ) -> DailyVolumeResponse:
        date_range = request.range or self._default_range(now)
        with _engine_errors():
            days = daily_chart_group_volume(
                request.logs, self._catalog_for(request.catalog), date_range,
                on_missing=self._policy(request.on_missing_exercise),
                taxonomy=self.taxonomy,
            )
        return DailyVolumeResponse(range=date_range, days=days)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _catalog_for(self, definitions: Optional[list[ExerciseDefinition]]) -> ExerciseCatalog:
        if definitions is None:
            return self.catalog
        return ExerciseCatalog(definitions)

    @staticmethod
    def _default_range(now: Optional[datetime.datetime]) -> DateRange:
        now = now or datetime.datetime.now(datetime.timezone.utc)
        return week_range(now, settings.WEEK_STARTS_ON)

    @staticmethod
    def _default_mode() -> NormalizationMode:
        if settings.DEFAULT_NORMALIZATION == "fixed":
            return FixedCeiling(ceiling=settings.FIXED_CEILING)
        return RelativeToMax()

    @staticmethod
    def _policy(requested: Optional[OnMissingExercise]) -> OnMissingExercise:
        return requested or OnMissingExercise(settings.ON_MISSING_EXERCISE)
