"""Business logic services."""

from app.services.heatmap_service import HeatmapService
from app.services.session_draft_service import (
    draft_to_workout_log,
    is_stale,
    recover_draft,
)

__all__ = [
    "HeatmapService",
    "draft_to_workout_log",
    "is_stale",
    "recover_draft",
]
