"""
Built-in exercise catalog.

Each entry is an :class:`~app.schemas.workout.ExerciseDefinition` whose
``category`` must be a key of the taxonomy's category table (checked by
the unit tests).  It seeds new accounts and serves as the default catalog
of the HTTP layer when a request does not carry its own.

The catalog is intentionally small but **extensible** — callers can pass
any definition list to the engine, or call :func:`register_exercise` at
import time to extend this one.

Cardio activities are modelled as pseudo-exercises (``run``, ``walk``,
``cycle``, ``hiit``) whose sets record a duration.
"""

from __future__ import annotations

from app.heatmap.catalog import ExerciseCatalog
from app.schemas.workout import ExerciseDefinition

# ======================================================================
# Catalog storage
# ======================================================================

EXERCISE_CATALOG: dict[str, ExerciseDefinition] = {}


def register_exercise(definition: ExerciseDefinition) -> None:
    """Register an exercise definition in the global catalog."""
    EXERCISE_CATALOG[definition.id] = definition


def get_exercise(exercise_id: str) -> ExerciseDefinition | None:
    """Look up an exercise by its ID.  Returns ``None`` if not found."""
    return EXERCISE_CATALOG.get(exercise_id)


def default_catalog() -> ExerciseCatalog:
    """Index over every registered exercise."""
    return ExerciseCatalog(EXERCISE_CATALOG.values())


# ======================================================================
# Built-in exercises
# ======================================================================

_E = ExerciseDefinition

_EXERCISES: list[ExerciseDefinition] = [
    # ── Chest ─────────────────────────────────────────────────────
    _E(id="barbell_bench_press", name="Barbell Bench Press", category="Chest",
       target_muscles=("Middle Chest", "Front Delts", "Triceps")),
    _E(id="dumbbell_bench_press", name="Dumbbell Bench Press", category="Chest"),
    _E(id="incline_dumbbell_press", name="Incline Dumbbell Press", category="Chest",
       target_muscles=("Upper Chest", "Front Delts")),
    _E(id="chest_fly", name="Chest Fly", category="Chest"),
    _E(id="push_up", name="Push-up", category="Chest"),
    _E(id="dip", name="Dip", category="Chest"),

    # ── Back ──────────────────────────────────────────────────────
    _E(id="pull_up", name="Pull-up", category="Back",
       target_muscles=("Lats", "Biceps")),
    _E(id="lat_pulldown", name="Lat Pulldown", category="Lats"),
    _E(id="bent_over_row", name="Bent-over Row", category="Back"),
    _E(id="seated_cable_row", name="Seated Cable Row", category="Back"),
    _E(id="t_bar_row", name="T-Bar Row", category="Back"),
    _E(id="deadlift", name="Deadlift", category="Back",
       target_muscles=("Lower Back", "Glutes", "Hamstrings")),
    _E(id="back_extension", name="Back Extension", category="Lower Back"),
    _E(id="superman", name="Superman", category="Lower Back"),
    _E(id="shrug", name="Shrug", category="Traps"),

    # ── Legs ──────────────────────────────────────────────────────
    _E(id="barbell_squat", name="Barbell Squat", category="Legs"),
    _E(id="goblet_squat", name="Goblet Squat", category="Legs"),
    _E(id="bodyweight_squat", name="Bodyweight Squat", category="Legs"),
    _E(id="lunge", name="Lunge", category="Legs"),
    _E(id="leg_press", name="Leg Press", category="Legs"),
    _E(id="leg_extension", name="Leg Extension", category="Quads"),
    _E(id="hamstring_curl", name="Hamstring Curl", category="Hamstrings"),
    _E(id="romanian_deadlift", name="Romanian Deadlift", category="Hamstrings"),
    _E(id="glute_bridge", name="Glute Bridge", category="Glutes"),
    _E(id="calf_raise", name="Calf Raise", category="Calves"),
    _E(id="wall_sit", name="Wall Sit", category="Quads"),

    # ── Shoulders ─────────────────────────────────────────────────
    _E(id="overhead_press", name="Overhead Press", category="Shoulders"),
    _E(id="arnold_press", name="Arnold Press", category="Shoulders"),
    _E(id="lateral_raise", name="Lateral Raise", category="Shoulders",
       target_muscles=("Side Delts",)),
    _E(id="front_raise", name="Front Raise", category="Shoulders"),
    _E(id="face_pull", name="Face Pull", category="Shoulders",
       target_muscles=("Rear Delts", "Traps")),

    # ── Arms ──────────────────────────────────────────────────────
    _E(id="bicep_curl", name="Bicep Curl", category="Biceps"),
    _E(id="hammer_curl", name="Hammer Curl", category="Arms",
       target_muscles=("Biceps", "Forearms")),
    _E(id="preacher_curl", name="Preacher Curl", category="Biceps"),
    _E(id="triceps_pushdown", name="Triceps Pushdown", category="Triceps"),
    _E(id="skull_crusher", name="Skull Crusher", category="Triceps"),
    _E(id="overhead_triceps_extension", name="Overhead Triceps Extension",
       category="Triceps"),

    # ── Core ──────────────────────────────────────────────────────
    _E(id="crunch", name="Crunch", category="Core"),
    _E(id="plank", name="Plank", category="Core"),
    _E(id="leg_raise", name="Leg Raise", category="Core",
       target_muscles=("Abs", "Hip Flexors")),
    _E(id="russian_twist", name="Russian Twist", category="Core",
       target_muscles=("Obliques",)),
    _E(id="ab_rollout", name="Ab Rollout", category="Core"),

    # ── Compound splits ───────────────────────────────────────────
    _E(id="burpee", name="Burpee", category="Full Body"),
    _E(id="thruster", name="Thruster", category="Full Body"),
    _E(id="kettlebell_swing", name="Kettlebell Swing", category="Lower Body"),

    # ── Cardio pseudo-exercises ───────────────────────────────────
    _E(id="run", name="Run", category="Run"),
    _E(id="walk", name="Walk", category="Walk"),
    _E(id="cycle", name="Cycle", category="Cycle"),
    _E(id="hiit", name="HIIT", category="HIIT"),
]

# Auto-register all built-in exercises
for _ex in _EXERCISES:
    register_exercise(_ex)
