"""Tests for the engagement aggregator.

Pure unit tests: logs, catalog and taxonomy are built in memory.
"""

import datetime
import logging

import pytest

from app.heatmap.aggregator import aggregate, aggregate_detailed
from app.heatmap.catalog import ExerciseCatalog, OnMissingExercise
from app.heatmap.errors import EmptyMuscleGroupMapping, ExerciseNotFound, UnknownCategory
from app.heatmap.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from app.heatmap.volume import MAX_LOAD
from app.schemas.muscle import MuscleGroup
from app.schemas.workout import DateRange, ExerciseDefinition, WorkoutLog


# ======================================================================
# Helpers
# ======================================================================

CATALOG = [
    ExerciseDefinition(id="bench", name="Bench Press", category="Chest"),
    ExerciseDefinition(id="pushup", name="Push-up", category="Chest"),
    ExerciseDefinition(id="squat", name="Squat", category="Legs"),
    ExerciseDefinition(id="plank", name="Plank", category="Core"),
    ExerciseDefinition(id="run", name="Run", category="Run"),
    ExerciseDefinition(id="hiit", name="HIIT", category="HIIT"),
]

WEEK = DateRange(start=datetime.date(2025, 3, 3), end=datetime.date(2025, 3, 9))


def _make_log(date="2025-03-05", *entries, log_id=None, **fields) -> WorkoutLog:
    return WorkoutLog.model_validate({"id": log_id, "date": date, "exercises": list(entries), **fields})


def _entry(exercise_id=None, *sets, name=None) -> dict:
    return {"exercise_id": exercise_id, "exercise_name": name, "sets": list(sets)}


def _run(logs, catalog=CATALOG, date_range=WEEK, on_missing=OnMissingExercise.SKIP, **kwargs):
    return aggregate(logs, catalog, date_range, on_missing=on_missing, **kwargs)


# ======================================================================
# Totality and empty input
# ======================================================================


class TestTotality:
    def test_empty_logs_all_zero(self):
        result = _run([])
        assert set(result.engagement) == set(MuscleGroup)
        assert result.is_zero()
        assert not result.is_normalized

    def test_every_group_present_after_partial_work(self):
        result = _run([_make_log("2025-03-05", _entry("bench", {"weight": 100, "reps": 5}))])
        assert set(result.engagement) == set(MuscleGroup)
        assert result[MuscleGroup.CALVES] == 0.0

    def test_no_logs_in_range_all_zero(self):
        result = _run([_make_log("2025-04-01", _entry("bench", {"weight": 100, "reps": 5}))])
        assert result.is_zero()

    def test_empty_catalog_with_skip_all_zero(self):
        logs = [_make_log("2025-03-05", _entry("bench", {"weight": 100, "reps": 5}))]
        assert _run(logs, catalog=[]).is_zero()


# ======================================================================
# Date range
# ======================================================================


class TestDateRange:
    @pytest.mark.parametrize(
        "date, counted",
        [
            ("2025-03-02T23:59:59", False),
            ("2025-03-03T00:00:00", True),
            ("2025-03-06T12:00:00", True),
            ("2025-03-09T23:59:59", True),
            ("2025-03-10T00:00:00", False),
        ],
    )
    def test_inclusive_boundaries(self, date, counted):
        result = _run([_make_log(date, _entry("bench", {"weight": 10, "reps": 10}))])
        assert (result[MuscleGroup.CHEST] == 100.0) is counted, (
            f"Log at {date} counted={not counted}, expected counted={counted}"
        )

    def test_outside_logs_excluded(self):
        logs = [
            _make_log("2025-03-04", _entry("bench", {"weight": 100, "reps": 5})),
            _make_log("2025-02-20", _entry("bench", {"weight": 100, "reps": 5})),
            _make_log("2025-03-20", _entry("squat", {"weight": 100, "reps": 5})),
        ]
        result = _run(logs)
        assert result[MuscleGroup.CHEST] == pytest.approx(500.0)
        assert result[MuscleGroup.QUADS] == 0.0

    def test_timezone_aware_dates_compared_in_utc(self):
        # 2025-03-10 01:00 in UTC+02:00 is still 2025-03-09 in UTC
        log = _make_log("2025-03-10T01:00:00+02:00", _entry("bench", {"weight": 10, "reps": 1}))
        assert _run([log])[MuscleGroup.CHEST] == pytest.approx(10.0)


# ======================================================================
# Attribution
# ======================================================================


class TestCardioFanOut:
    def test_run_load_100(self):
        log = _make_log("2025-03-05", _entry("run", {"duration_seconds": 100}))
        result = _run([log])
        assert result[MuscleGroup.QUADS] == pytest.approx(30.0)
        assert result[MuscleGroup.HAMSTRINGS] == pytest.approx(25.0)
        assert result[MuscleGroup.GLUTES] == pytest.approx(25.0)
        assert result[MuscleGroup.CALVES] == pytest.approx(15.0)
        assert result[MuscleGroup.ABS] == pytest.approx(5.0)
        assert result[MuscleGroup.CHEST] == 0.0
        weighted = set(DEFAULT_TAXONOMY.cardio_weights_for("Run"))
        for muscle in MuscleGroup:
            if muscle not in weighted:
                assert result[muscle] == 0.0, muscle.value
        assert result.total() == pytest.approx(100.0)

    def test_weights_not_renormalised(self):
        log = _make_log("2025-03-05", _entry("hiit", {"duration_seconds": 100}))
        result = _run([log])
        weight_sum = sum(DEFAULT_TAXONOMY.cardio_weights_for("HIIT").values())
        assert result.total() == pytest.approx(100.0 * weight_sum)

    def test_setless_cardio_session(self):
        log = _make_log("2025-03-05", activityType="run", duration="30 min")
        result = _run([log])
        assert result[MuscleGroup.QUADS] == pytest.approx(1800 * 0.30)
        assert result[MuscleGroup.ABS] == pytest.approx(1800 * 0.05)

    def test_setless_resistance_log_contributes_nothing(self):
        log = _make_log("2025-03-05", activity_type="resistance", duration_seconds=3600)
        assert _run([log]).is_zero()

    def test_session_fields_ignored_when_exercises_present(self):
        log = _make_log(
            "2025-03-05", _entry("bench", {"weight": 10, "reps": 10}),
            activity_type="run", duration_seconds=3600,
        )
        result = _run([log])
        assert result[MuscleGroup.QUADS] == 0.0
        assert result[MuscleGroup.CHEST] == pytest.approx(100.0)


class TestStrengthPrimaryOnly:
    def test_chest_load_500(self):
        log = _make_log("2025-03-05", _entry("bench", {"weight": 100, "reps": 5}))
        result = _run([log])
        assert result[MuscleGroup.CHEST] == pytest.approx(500.0)
        assert result[MuscleGroup.SHOULDERS_FRONT] == 0.0
        assert result[MuscleGroup.TRICEPS] == 0.0
        assert result.total() == pytest.approx(500.0)

    def test_reps_only_fallback(self):
        """Push-ups 10 + 12 reps with no weight → 22 on chest."""
        log = _make_log("2025-03-05", _entry("pushup", {"reps": 10}, {"reps": 12}))
        assert _run([log])[MuscleGroup.CHEST] == pytest.approx(22.0)

    def test_loads_accumulate_across_logs(self):
        logs = [
            _make_log("2025-03-03", _entry("squat", {"weight": 100, "reps": 5})),
            _make_log("2025-03-07", _entry("squat", {"weight": 100, "reps": 3}), _entry("plank", {"duration_seconds": 60})),
        ]
        result = _run(logs)
        assert result[MuscleGroup.QUADS] == pytest.approx(800.0)
        assert result[MuscleGroup.ABS] == pytest.approx(60.0)

    def test_lookup_by_name(self):
        log = _make_log("2025-03-05", _entry(None, {"weight": 50, "reps": 2}, name="Bench Press"))
        assert _run([log])[MuscleGroup.CHEST] == pytest.approx(100.0)


# ======================================================================
# Missing-exercise policy
# ======================================================================


class TestMissingExercisePolicy:
    def _logs(self):
        return [
            _make_log(
                "2025-03-05",
                _entry("bench", {"weight": 100, "reps": 5}),
                _entry("sled_push", {"weight": 80, "reps": 10}),
                log_id="log-1",
            )
        ]

    def test_skip_ignores_unknown(self):
        result = _run(self._logs(), on_missing=OnMissingExercise.SKIP)
        assert result[MuscleGroup.CHEST] == pytest.approx(500.0)
        assert result.total() == pytest.approx(500.0)

    def test_skip_reports_entry(self):
        detailed = aggregate_detailed(self._logs(), CATALOG, WEEK, on_missing=OnMissingExercise.SKIP)
        assert detailed.logs_in_range == 1
        assert len(detailed.skipped_entries) == 1
        skipped = detailed.skipped_entries[0]
        assert skipped.log_id == "log-1"
        assert skipped.entry_index == 1
        assert skipped.exercise_id == "sled_push"

    def test_skip_logs_info(self, caplog):
        caplog.set_level(logging.INFO, logger="app.heatmap.aggregator")
        _run(self._logs(), on_missing=OnMissingExercise.SKIP)
        assert "sled_push" in caplog.text

    def test_abort_raises_located_error(self):
        with pytest.raises(ExerciseNotFound) as exc_info:
            _run(self._logs(), on_missing=OnMissingExercise.ABORT)
        err = exc_info.value
        assert err.log_id == "log-1"
        assert err.entry_index == 1
        assert err.entry.exercise_id == "sled_push"

    def test_abort_ignores_unknown_outside_range(self):
        logs = [_make_log("2024-01-01", _entry("sled_push", {"reps": 1}))]
        assert _run(logs, on_missing=OnMissingExercise.ABORT).is_zero()


# ======================================================================
# Integrity faults
# ======================================================================


class TestIntegrityFaults:
    @pytest.mark.parametrize("policy", list(OnMissingExercise))
    def test_unknown_category_propagates(self, policy):
        catalog = [ExerciseDefinition(id="x", name="X", category="Forearms")]
        log = _make_log("2025-03-05", _entry("x", {"weight": 10, "reps": 10}))
        with pytest.raises(UnknownCategory):
            _run([log], catalog=catalog, on_missing=policy)

    def test_unknown_category_raised_even_with_zero_load(self):
        catalog = [ExerciseDefinition(id="x", name="X", category="Forearms")]
        log = _make_log("2025-03-05", _entry("x"))
        with pytest.raises(UnknownCategory):
            _run([log], catalog=catalog)

    def test_empty_mapping_propagates(self):
        tax = Taxonomy(
            category_muscle_groups={**DEFAULT_TAXONOMY.category_muscle_groups, "Mobility": ()},
        )
        catalog = [ExerciseDefinition(id="m", name="Mobility Flow", category="Mobility")]
        log = _make_log("2025-03-05", _entry("m", {"duration_seconds": 600}))
        with pytest.raises(EmptyMuscleGroupMapping):
            _run([log], catalog=catalog, taxonomy=tax)

    @pytest.mark.parametrize(
        "log_fields",
        [
            {"exercises": [{"exercise_id": "run", "sets": [{"duration_seconds": 100}]}]},
            {"activity_type": "run", "duration_seconds": 100},
        ],
    )
    def test_empty_mapping_on_cardio_category_propagates(self, log_fields):
        tax = Taxonomy(
            category_muscle_groups={**DEFAULT_TAXONOMY.category_muscle_groups, "Run": ()},
        )
        log = WorkoutLog.model_validate({"date": "2025-03-05", **log_fields})
        with pytest.raises(EmptyMuscleGroupMapping):
            _run([log], taxonomy=tax)


# ======================================================================
# Huge loads
# ======================================================================


class TestHugeLoads:
    def test_totals_stay_finite(self):
        logs = [
            _make_log("2025-03-04", _entry("bench", {"weight": 1e308, "reps": 1})),
            _make_log("2025-03-05", _entry("bench", {"weight": 1e308, "reps": 1})),
        ]
        assert _run(logs)[MuscleGroup.CHEST] == MAX_LOAD

    def test_overflowing_set_contributes_nothing(self):
        log = _make_log(
            "2025-03-05",
            _entry("bench", {"weight": 1e308, "reps": 10}),
            _entry("squat", {"weight": 100, "reps": 5}),
        )
        result = _run([log])
        assert result[MuscleGroup.CHEST] == 0.0
        assert result[MuscleGroup.QUADS] == pytest.approx(500.0)


# ======================================================================
# Purity
# ======================================================================


class TestPurity:
    def test_deterministic(self):
        logs = [
            _make_log("2025-03-04", _entry("run", {"duration_seconds": 1234.5})),
            _make_log("2025-03-05", _entry("bench", {"weight": 62.5, "reps": 7})),
        ]
        first = _run(logs)
        second = _run(logs)
        assert first == second

    def test_accepts_prebuilt_catalog_and_generator(self):
        index = ExerciseCatalog(CATALOG)
        logs = (log for log in [_make_log("2025-03-05", _entry("bench", {"weight": 10, "reps": 3}))])
        assert _run(logs, catalog=index)[MuscleGroup.CHEST] == pytest.approx(30.0)

    def test_custom_taxonomy(self):
        table = dict(DEFAULT_TAXONOMY.category_muscle_groups)
        table["Chest"] = (MuscleGroup.TRICEPS, MuscleGroup.CHEST)
        tax = Taxonomy(category_muscle_groups=table)
        log = _make_log("2025-03-05", _entry("bench", {"weight": 10, "reps": 10}))
        result = _run([log], taxonomy=tax)
        assert result[MuscleGroup.TRICEPS] == pytest.approx(100.0)
        assert result[MuscleGroup.CHEST] == 0.0
