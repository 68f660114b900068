"""
Taxonomy tables — the static vocabulary of the heatmap.

Three mappings drive every engagement computation:

* **Category → muscle groups** — an ordered, non-empty sequence per
  exercise category.  The first entry is the *primary* muscle group: it
  receives all strength load in the aggregator and is the only group
  used for chart pills.
* **Muscle group → chart group** — folds the 13 fine-grained regions
  into the six coarse display categories.  Total over
  :class:`MuscleGroup`; checked when the default taxonomy is built at
  import time.
* **Cardio intensity weights** — per cardio activity, a fractional
  engagement weight for each muscle it works.  Weights are independent
  multipliers: they are *not* a probability distribution and are never
  renormalised.

The tables are plain module-level dictionaries wrapped in a
:class:`Taxonomy` model so that they can be inspected, tested and
swapped (every engine entry point accepts ``taxonomy=None`` and falls
back to :data:`DEFAULT_TAXONOMY`).  Adding a category means adding a
table row, never a code path.

.. note::

   The cardio weights are heuristics describing relative engagement, not
   measured activation data.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.heatmap.errors import EmptyMuscleGroupMapping, UnknownCategory
from app.schemas.muscle import ActivityType, ChartGroup, MuscleGroup


# ======================================================================
# Tables
# ======================================================================

# Alias for brevity in the tables below
M = MuscleGroup

_CATEGORY_TO_MUSCLE_GROUPS: dict[str, tuple[MuscleGroup, ...]] = {
    # ── Strength: body regions ────────────────────────────────────
    "Chest": (M.CHEST, M.SHOULDERS_FRONT, M.TRICEPS),
    "Back": (M.LATS, M.TRAPS, M.BICEPS, M.BACK_LOWER),
    "Shoulders": (M.SHOULDERS_FRONT, M.SHOULDERS_BACK, M.TRICEPS),
    "Legs": (M.QUADS, M.GLUTES, M.HAMSTRINGS, M.CALVES),
    "Arms": (M.BICEPS, M.TRICEPS),
    "Core": (M.ABS,),

    # ── Strength: single muscles ──────────────────────────────────
    "Lats": (M.LATS, M.BICEPS),
    "Traps": (M.TRAPS, M.SHOULDERS_BACK),
    "Lower Back": (M.BACK_LOWER, M.GLUTES, M.HAMSTRINGS),
    "Quads": (M.QUADS, M.GLUTES),
    "Hamstrings": (M.HAMSTRINGS, M.GLUTES),
    "Glutes": (M.GLUTES, M.HAMSTRINGS),
    "Calves": (M.CALVES,),
    "Biceps": (M.BICEPS,),
    "Triceps": (M.TRICEPS,),

    # ── Strength: compound splits ─────────────────────────────────
    "Full Body": (
        M.CHEST, M.LATS, M.TRAPS, M.SHOULDERS_FRONT, M.SHOULDERS_BACK,
        M.QUADS, M.GLUTES, M.HAMSTRINGS, M.BICEPS, M.TRICEPS, M.ABS,
    ),
    "Upper Body": (
        M.CHEST, M.LATS, M.TRAPS, M.SHOULDERS_FRONT, M.SHOULDERS_BACK,
        M.BICEPS, M.TRICEPS,
    ),
    "Lower Body": (M.QUADS, M.GLUTES, M.HAMSTRINGS, M.CALVES, M.ABS),

    # ── Cardio / conditioning ─────────────────────────────────────
    "Run": (M.QUADS, M.HAMSTRINGS, M.GLUTES, M.CALVES, M.ABS),
    "Walk": (M.CALVES, M.QUADS, M.GLUTES, M.HAMSTRINGS, M.ABS),
    "Cycle": (M.QUADS, M.GLUTES, M.HAMSTRINGS, M.CALVES),
    "HIIT": (
        M.QUADS, M.GLUTES, M.ABS, M.CHEST, M.SHOULDERS_FRONT,
        M.HAMSTRINGS, M.CALVES, M.TRICEPS,
    ),
}

_MUSCLE_TO_CHART_GROUP: dict[MuscleGroup, ChartGroup] = {
    M.CHEST: ChartGroup.CHEST,
    M.LATS: ChartGroup.BACK,
    M.TRAPS: ChartGroup.BACK,
    M.BACK_LOWER: ChartGroup.BACK,
    M.SHOULDERS_FRONT: ChartGroup.SHOULDERS,
    M.SHOULDERS_BACK: ChartGroup.SHOULDERS,
    M.QUADS: ChartGroup.LEGS,
    M.GLUTES: ChartGroup.LEGS,
    M.HAMSTRINGS: ChartGroup.LEGS,
    M.CALVES: ChartGroup.LEGS,
    M.BICEPS: ChartGroup.ARMS,
    M.TRICEPS: ChartGroup.ARMS,
    M.ABS: ChartGroup.CORE,
}

# Relative engagement per activity.  Rows need not sum to 1.
_CARDIO_INTENSITY_WEIGHTS: dict[str, dict[MuscleGroup, float]] = {
    "Run": {
        M.QUADS: 0.30, M.HAMSTRINGS: 0.25, M.GLUTES: 0.25,
        M.CALVES: 0.15, M.ABS: 0.05,
    },
    "Walk": {
        M.CALVES: 0.25, M.QUADS: 0.20, M.GLUTES: 0.20,
        M.HAMSTRINGS: 0.15, M.ABS: 0.05,
    },
    "Cycle": {
        M.QUADS: 0.40, M.GLUTES: 0.25, M.HAMSTRINGS: 0.15, M.CALVES: 0.15,
    },
    "HIIT": {
        M.QUADS: 0.20, M.GLUTES: 0.15, M.ABS: 0.15, M.CHEST: 0.10,
        M.SHOULDERS_FRONT: 0.10, M.HAMSTRINGS: 0.10, M.CALVES: 0.10,
        M.TRICEPS: 0.05,
    },
}

# Cardio activity logged without sets → the category carrying its weights.
_ACTIVITY_TO_CATEGORY: dict[ActivityType, str] = {
    ActivityType.RUN: "Run",
    ActivityType.WALK: "Walk",
    ActivityType.CYCLE: "Cycle",
    ActivityType.HIIT: "HIIT",
}

# Free-form target-muscle labels attached to catalog exercises → chart group.
_TARGET_MUSCLE_TO_CHART_GROUP: dict[str, ChartGroup] = {
    "Chest": ChartGroup.CHEST,
    "Upper Chest": ChartGroup.CHEST,
    "Middle Chest": ChartGroup.CHEST,
    "Lower Chest": ChartGroup.CHEST,
    "Back": ChartGroup.BACK,
    "Lats": ChartGroup.BACK,
    "Traps": ChartGroup.BACK,
    "Lower Back": ChartGroup.BACK,
    "Rhomboids": ChartGroup.BACK,
    "Shoulders": ChartGroup.SHOULDERS,
    "Front Delts": ChartGroup.SHOULDERS,
    "Side Delts": ChartGroup.SHOULDERS,
    "Rear Delts": ChartGroup.SHOULDERS,
    "Arms": ChartGroup.ARMS,
    "Biceps": ChartGroup.ARMS,
    "Triceps": ChartGroup.ARMS,
    "Forearms": ChartGroup.ARMS,
    "Legs": ChartGroup.LEGS,
    "Quads": ChartGroup.LEGS,
    "Hamstrings": ChartGroup.LEGS,
    "Glutes": ChartGroup.LEGS,
    "Calves": ChartGroup.LEGS,
    "Hip Flexors": ChartGroup.LEGS,
    "Core": ChartGroup.CORE,
    "Abs": ChartGroup.CORE,
    "Obliques": ChartGroup.CORE,
}


# ======================================================================
# Taxonomy model
# ======================================================================

class Taxonomy(BaseModel):
    """Immutable bundle of the lookup tables used by the engine."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    category_muscle_groups: dict[str, tuple[MuscleGroup, ...]] = Field(
        default_factory=lambda: dict(_CATEGORY_TO_MUSCLE_GROUPS),
        description="Category → ordered muscle groups (first = primary)",
    )
    muscle_chart_groups: dict[MuscleGroup, ChartGroup] = Field(
        default_factory=lambda: dict(_MUSCLE_TO_CHART_GROUP),
        description="Muscle group → coarse chart group (total)",
    )
    cardio_intensity_weights: dict[str, dict[MuscleGroup, float]] = Field(
        default_factory=lambda: {
            k: dict(v) for k, v in _CARDIO_INTENSITY_WEIGHTS.items()
        },
        description="Cardio category → per-muscle engagement weight in [0, 1]",
    )
    activity_categories: dict[ActivityType, str] = Field(
        default_factory=lambda: dict(_ACTIVITY_TO_CATEGORY),
        description="Cardio activity type → category for set-less sessions",
    )
    target_muscle_chart_groups: dict[str, ChartGroup] = Field(
        default_factory=lambda: dict(_TARGET_MUSCLE_TO_CHART_GROUP),
        description="Target-muscle display label → chart group",
    )

    @field_validator(
        "category_muscle_groups",
        "muscle_chart_groups",
        "cardio_intensity_weights",
        "activity_categories",
        "target_muscle_chart_groups",
    )
    @classmethod
    def freeze_table(cls, value: dict[Any, Any]) -> MappingProxyType:
        """Expose every table as a read-only view over a private copy."""
        return MappingProxyType({
            key: MappingProxyType(dict(inner)) if isinstance(inner, dict) else inner
            for key, inner in value.items()
        })

    @model_validator(mode="after")
    def validate_tables(self) -> Self:
        """Reject tables that would make a lookup non-total.

        Empty category sequences are allowed here on purpose: they are
        reported as :class:`EmptyMuscleGroupMapping` when resolved.
        """
        missing = [m.value for m in MuscleGroup if m not in self.muscle_chart_groups]
        if missing:
            raise ValueError(
                f"Chart-group table is missing muscle groups: {missing}"
            )

        for category, weights in self.cardio_intensity_weights.items():
            if category not in self.category_muscle_groups:
                raise ValueError(
                    f"Cardio category '{category}' has no muscle-group mapping"
                )
            out_of_range = {
                m.value: w for m, w in weights.items() if not 0.0 <= w <= 1.0
            }
            if out_of_range:
                raise ValueError(
                    f"Cardio weights for '{category}' outside [0, 1]: "
                    f"{out_of_range}"
                )

        for activity, category in self.activity_categories.items():
            if category not in self.cardio_intensity_weights:
                raise ValueError(
                    f"Activity '{activity.value}' maps to non-cardio "
                    f"category '{category}'"
                )
        return self

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def muscle_groups_for(self, category: str) -> tuple[MuscleGroup, ...]:
        """Ordered muscle groups for *category* (first = primary)."""
        groups = self.category_muscle_groups.get(category)
        if groups is None:
            raise UnknownCategory(category, sorted(self.category_muscle_groups))
        if not groups:
            raise EmptyMuscleGroupMapping(category)
        return groups

    def primary_muscle_group(self, category: str) -> MuscleGroup:
        return self.muscle_groups_for(category)[0]

    def chart_group_of(self, muscle: MuscleGroup) -> ChartGroup:
        return self.muscle_chart_groups[MuscleGroup(muscle)]

    def cardio_weights_for(self, category: str) -> Optional[dict[MuscleGroup, float]]:
        """Weights for a cardio category, ``None`` for everything else."""
        weights = self.cardio_intensity_weights.get(category)
        if weights is None:
            return None
        return dict(weights)

    def category_for_activity(self, activity: ActivityType) -> Optional[str]:
        return self.activity_categories.get(activity)

    def categories(self) -> list[str]:
        return sorted(self.category_muscle_groups)


# Built once at import; a non-total chart-group table fails here.
DEFAULT_TAXONOMY = Taxonomy()


# ======================================================================
# Public API
# ======================================================================

def category_to_muscle_groups(
    category: str,
    taxonomy: Optional[Taxonomy] = None,
) -> tuple[MuscleGroup, ...]:
    """Resolve *category* to its ordered, non-empty muscle-group sequence.

    Raises:
        UnknownCategory: *category* is not in the table.
        EmptyMuscleGroupMapping: *category* maps to an empty sequence.
    """
    return (taxonomy or DEFAULT_TAXONOMY).muscle_groups_for(category)


def chart_group_of(
    muscle: MuscleGroup,
    taxonomy: Optional[Taxonomy] = None,
) -> ChartGroup:
    """Coarse chart group for a muscle group.  Total over the enum."""
    return (taxonomy or DEFAULT_TAXONOMY).chart_group_of(muscle)


def cardio_weights(
    category: str,
    taxonomy: Optional[Taxonomy] = None,
) -> Optional[dict[MuscleGroup, float]]:
    """Per-muscle weights for a cardio category, ``None`` otherwise."""
    return (taxonomy or DEFAULT_TAXONOMY).cardio_weights_for(category)
