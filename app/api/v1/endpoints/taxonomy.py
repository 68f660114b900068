"""
Taxonomy endpoints — read-only views of the lookup tables and built-in catalog.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_builtin_catalog
from app.heatmap.catalog import ExerciseCatalog
from app.heatmap.taxonomy import DEFAULT_TAXONOMY
from app.heatmap.views import MUSCLE_DISPLAY_NAMES, view_of
from app.schemas.workout import ExerciseDefinition

router = APIRouter()


@router.get("/categories", summary="Exercise categories with their muscle groups and cardio weights.", )
def list_categories():
    """The first muscle group of each category is its primary one."""
    tax = DEFAULT_TAXONOMY
    rows = []
    for category in tax.categories():
        weights = tax.cardio_weights_for(category)
        rows.append({
            "category": category,
            "muscle_groups": [m.value for m in tax.category_muscle_groups[category]],
            "cardio_weights": {m.value: w for m, w in weights.items()} if weights is not None else None,
        })
    return rows


@router.get("/chart-groups", summary="Muscle group to chart group mapping.", )
def list_chart_groups():
    return [
        {
            "muscle_group": muscle.value,
            "display_name": MUSCLE_DISPLAY_NAMES[muscle],
            "chart_group": chart_group.value,
            "view": view_of(muscle).value,
        }
        for muscle, chart_group in DEFAULT_TAXONOMY.muscle_chart_groups.items()
    ]


@router.get("/exercises", summary="Built-in exercise catalog.", response_model=list[ExerciseDefinition], )
def list_exercises(catalog: ExerciseCatalog = Depends(get_builtin_catalog)):
    return list(catalog)
