"""
Shared API dependencies.

Reusable FastAPI dependencies for the heatmap endpoints.
"""

from functools import lru_cache

from app.heatmap.catalog import ExerciseCatalog
from app.heatmap.exercise_catalog import default_catalog
from app.services.heatmap_service import HeatmapService


@lru_cache
def get_builtin_catalog() -> ExerciseCatalog:
    """Built-in exercise catalog, indexed once per process."""
    return default_catalog()


def get_heatmap_service() -> HeatmapService:
    return HeatmapService(catalog=get_builtin_catalog())
