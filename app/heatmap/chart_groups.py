"""
Chart group reducer — which coarse body regions did a workout touch?

Used for the small "pills" shown next to a workout in the history list
and for the per-day volume chart.  Always resolves with the ``SKIP``
policy: an unknown exercise simply contributes no pill.
"""

from __future__ import annotations

from typing import Iterable, Optional

from app.heatmap.catalog import CatalogLike, as_catalog
from app.heatmap.taxonomy import DEFAULT_TAXONOMY, ChartGroup, MuscleGroup, Taxonomy
from app.heatmap.volume import bounded_sum
from app.schemas.engagement import MuscleEngagementMap
from app.schemas.workout import ExerciseDefinition, WorkoutLogEntry


def _groups_for_definition(
    definition: ExerciseDefinition,
    taxonomy: Taxonomy,
) -> set[ChartGroup]:
    primary = taxonomy.primary_muscle_group(definition.category)
    # A listed target muscle set replaces the category, even when none of
    # its labels are recognised.
    if definition.target_muscles:
        return {
            taxonomy.target_muscle_chart_groups[label]
            for label in definition.target_muscles
            if label in taxonomy.target_muscle_chart_groups
        }
    return {taxonomy.chart_group_of(primary)}


def reduce_to_chart_groups(
    entries: Iterable[WorkoutLogEntry],
    catalog: CatalogLike,
    taxonomy: Optional[Taxonomy] = None,
) -> frozenset[ChartGroup]:
    """Distinct chart groups engaged by *entries*.

    Entries whose exercise is not in *catalog* are skipped.  Order is not
    meaningful; sort at the presentation layer.

    Raises:
        UnknownCategory: A resolved category is not in the taxonomy.
        EmptyMuscleGroupMapping: A resolved category maps to no muscles.
    """
    tax = taxonomy or DEFAULT_TAXONOMY
    index = as_catalog(catalog)

    groups: set[ChartGroup] = set()
    for entry in entries:
        definition = index.find(entry)
        if definition is None:
            continue
        groups |= _groups_for_definition(definition, tax)
    return frozenset(groups)


def fold_to_chart_groups(
    raw: MuscleEngagementMap,
    taxonomy: Optional[Taxonomy] = None,
) -> dict[ChartGroup, float]:
    """Sum per-muscle totals into their chart groups (every group present)."""
    tax = taxonomy or DEFAULT_TAXONOMY
    members: dict[ChartGroup, list[float]] = {g: [] for g in ChartGroup}
    for muscle in MuscleGroup:
        members[tax.chart_group_of(muscle)].append(raw[muscle])
    return {group: bounded_sum(values) for group, values in members.items()}
