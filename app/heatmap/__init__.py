"""Heatmap core — taxonomy, volume, aggregation, normalization, chart groups."""

from app.heatmap.aggregator import aggregate
from app.heatmap.catalog import ExerciseCatalog, OnMissingExercise, resolve_category
from app.heatmap.chart_groups import fold_to_chart_groups, reduce_to_chart_groups
from app.heatmap.normalizer import FixedCeiling, RelativeToMax, normalize
from app.heatmap.taxonomy import DEFAULT_TAXONOMY, Taxonomy

__all__ = [
    "aggregate",
    "ExerciseCatalog",
    "OnMissingExercise",
    "resolve_category",
    "fold_to_chart_groups",
    "reduce_to_chart_groups",
    "FixedCeiling",
    "RelativeToMax",
    "normalize",
    "DEFAULT_TAXONOMY",
    "Taxonomy",
]
