"""Simulate a training week through the heatmap engine and print the results."""

import datetime
from collections import defaultdict

from app.heatmap.aggregator import aggregate
from app.heatmap.catalog import OnMissingExercise
from app.heatmap.chart_groups import reduce_to_chart_groups
from app.heatmap.exercise_catalog import default_catalog
from app.heatmap.normalizer import FixedCeiling, RelativeToMax, normalize
from app.heatmap.timeline import daily_chart_group_volume
from app.heatmap.views import MUSCLE_DISPLAY_NAMES, BodyView, rank_for_view
from app.schemas.muscle import ChartGroup, MuscleGroup
from app.schemas.workout import DateRange, WorkoutLog

# ─── Raw sets: (date, exercise id, weight kg, reps, seconds) ─────────
RAW_DATA = [
    # Mon - Push
    ("2025-11-10", "barbell_bench_press", 60, 8, None),
    ("2025-11-10", "barbell_bench_press", 60, 8, None),
    ("2025-11-10", "barbell_bench_press", 65, 6, None),
    ("2025-11-10", "overhead_press", 35, 8, None),
    ("2025-11-10", "overhead_press", 35, 8, None),
    ("2025-11-10", "triceps_pushdown", 25, 12, None),
    ("2025-11-10", "push_up", None, 15, None),
    ("2025-11-10", "push_up", None, 12, None),
    # Tue - Run (logged as a pseudo-exercise)
    ("2025-11-11", "run", None, None, 1800),
    # Wed - Pull
    ("2025-11-12", "deadlift", 100, 5, None),
    ("2025-11-12", "deadlift", 100, 5, None),
    ("2025-11-12", "pull_up", None, 8, None),
    ("2025-11-12", "pull_up", None, 7, None),
    ("2025-11-12", "bicep_curl", 12, 10, None),
    ("2025-11-12", "face_pull", 20, 15, None),
    ("2025-11-12", "plank", None, None, 60),
    ("2025-11-12", "plank", None, None, 45),
    # Fri - Legs
    ("2025-11-14", "barbell_squat", 80, 5, None),
    ("2025-11-14", "barbell_squat", 80, 5, None),
    ("2025-11-14", "barbell_squat", 85, 5, None),
    ("2025-11-14", "romanian_deadlift", 60, 8, None),
    ("2025-11-14", "calf_raise", 40, 15, None),
    ("2025-11-14", "wall_sit", None, None, 90),
    # Sat - something the catalog does not know
    ("2025-11-15", "sled_push", 80, None, 60),
]

# Sun - set-less cycling session
CARDIO_SESSIONS = [
    {"id": "ride-1", "date": "2025-11-16", "activityType": "cycle", "duration": "45 min"},
]


def _build_logs() -> list[WorkoutLog]:
    sets_by_day: dict[str, dict[str, list]] = defaultdict(lambda: defaultdict(list))
    for date, exercise_id, weight, reps, seconds in RAW_DATA:
        sets_by_day[date][exercise_id].append(
            {"weight": weight, "reps": reps, "duration_seconds": seconds}
        )

    logs = [
        WorkoutLog.model_validate({
            "id": f"log-{date}",
            "date": date,
            "exercises": [
                {"exercise_id": exercise_id, "sets": sets}
                for exercise_id, sets in exercises.items()
            ],
        })
        for date, exercises in sorted(sets_by_day.items())
    ]
    logs.extend(WorkoutLog.model_validate(s) for s in CARDIO_SESSIONS)
    return logs


def main():
    catalog = default_catalog()
    logs = _build_logs()
    week = DateRange(start=datetime.date(2025, 11, 10), end=datetime.date(2025, 11, 16))

    raw = aggregate(logs, catalog, week, on_missing=OnMissingExercise.SKIP)
    relative = normalize(raw, RelativeToMax())
    fixed = normalize(raw, FixedCeiling(ceiling=5000.0))

    # ── Per-muscle totals ───────────────────────────────────────────
    print()
    print("=" * 64)
    print(f"{'Muscle':<18} {'Raw':>12} {'Relative':>10} {'Fixed 5k':>10}")
    print("=" * 64)
    for muscle in MuscleGroup:
        print(
            f"{MUSCLE_DISPLAY_NAMES[muscle]:<18} {raw[muscle]:>12.1f} "
            f"{relative[muscle]:>10.2f} {fixed[muscle]:>10.2f}"
        )

    # ── Body views ──────────────────────────────────────────────────
    for view in BodyView:
        print()
        print(f"{view.value.upper()} VIEW")
        for ranked in rank_for_view(relative, view):
            print(f"  {ranked.display_name:<18} {ranked.percentage:>3}%")

    # ── Pills per workout ───────────────────────────────────────────
    print()
    print("=" * 64)
    for log in logs:
        pills = sorted(g.value for g in reduce_to_chart_groups(log.exercises, catalog))
        print(f"{log.date.date().isoformat():<12} {', '.join(pills) or '-'}")

    # ── Daily chart-group volume ────────────────────────────────────
    print()
    print("=" * 80)
    print(f"{'Date':<12}" + "".join(f"{g.value:>11}" for g in ChartGroup))
    print("=" * 80)
    for row in daily_chart_group_volume(logs, catalog, week):
        print(
            f"{row.date.isoformat():<12}"
            + "".join(f"{row.totals[g]:>11.0f}" for g in ChartGroup)
        )


if __name__ == "__main__":
    main()
