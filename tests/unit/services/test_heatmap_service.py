"""Tests for the heatmap service (defaults and error mapping)."""

import datetime
import logging

import pytest
from fastapi import HTTPException

from app.heatmap.normalizer import FixedCeiling, RelativeToMax
from app.schemas.heatmap import DailyVolumeRequest, HeatmapRequest, MusclePillsRequest
from app.schemas.muscle import ChartGroup, MuscleGroup
from app.services.heatmap_service import HeatmapService

UTC = datetime.timezone.utc
NOW = datetime.datetime(2025, 3, 6, 12, 0, tzinfo=UTC)


def _make_request(logs, **fields) -> HeatmapRequest:
    return HeatmapRequest.model_validate({"logs": logs, **fields})


def _log(date, *entries, **fields) -> dict:
    return {"date": date, "exercises": list(entries), **fields}


def _entry(exercise_id, *sets) -> dict:
    return {"exercise_id": exercise_id, "sets": list(sets)}


class TestComputeHeatmap:
    def test_builtin_catalog_and_current_week_by_default(self):
        request = _make_request([
            _log("2025-03-04", _entry("barbell_bench_press", {"weight": 100, "reps": 5})),
            _log("2025-03-01", _entry("barbell_squat", {"weight": 100, "reps": 5})),
        ])
        response = HeatmapService().compute_heatmap(request, now=NOW)
        assert response.range.start == datetime.datetime(2025, 3, 3, tzinfo=UTC)
        assert response.raw[MuscleGroup.CHEST] == pytest.approx(500.0)
        assert response.raw[MuscleGroup.QUADS] == 0.0
        assert response.intensities[MuscleGroup.CHEST] == 1.0
        assert response.logs_in_range == 1

    def test_default_mode_is_relative(self):
        response = HeatmapService().compute_heatmap(_make_request([]), now=NOW)
        assert response.mode == RelativeToMax()

    def test_fixed_mode(self):
        request = _make_request(
            [_log("2025-03-04", _entry("barbell_bench_press", {"weight": 100, "reps": 5}))],
            mode={"kind": "fixed", "ceiling": 1000},
        )
        response = HeatmapService().compute_heatmap(request, now=NOW)
        assert response.mode == FixedCeiling(ceiling=1000.0)
        assert response.intensities[MuscleGroup.CHEST] == pytest.approx(0.5)

    def test_views_and_pills(self):
        request = _make_request([
            _log("2025-03-04", _entry("barbell_bench_press", {"weight": 100, "reps": 5})),
            _log("2025-03-05", _entry("deadlift", {"weight": 120, "reps": 5})),
        ])
        response = HeatmapService().compute_heatmap(request, now=NOW)
        assert [r.muscle for r in response.front] == [MuscleGroup.CHEST]
        assert [r.muscle for r in response.back] == [MuscleGroup.LATS]
        # Target muscles on the built-in definitions drive the pills.
        assert response.engaged_chart_groups == [
            ChartGroup.ARMS, ChartGroup.BACK, ChartGroup.CHEST, ChartGroup.LEGS, ChartGroup.SHOULDERS,
        ]

    def test_skipped_entries_reported(self):
        request = _make_request([_log("2025-03-04", _entry("sled_push", {"reps": 10}))])
        response = HeatmapService().compute_heatmap(request, now=NOW)
        assert len(response.skipped_entries) == 1
        assert response.raw[MuscleGroup.CHEST] == 0.0

    def test_abort_maps_to_422(self):
        request = _make_request(
            [_log("2025-03-04", _entry("sled_push", {"reps": 10}))],
            on_missing_exercise="abort",
        )
        with pytest.raises(HTTPException) as exc_info:
            HeatmapService().compute_heatmap(request, now=NOW)
        assert exc_info.value.status_code == 422
        assert "sled_push" in exc_info.value.detail

    def test_integrity_fault_maps_to_409(self, caplog):
        caplog.set_level(logging.ERROR, logger="app.services.heatmap_service")
        request = _make_request(
            [_log("2025-03-04", _entry("wrist_curl", {"weight": 10, "reps": 10}))],
            catalog=[{"id": "wrist_curl", "name": "Wrist Curl", "category": "Forearms"}],
        )
        with pytest.raises(HTTPException) as exc_info:
            HeatmapService().compute_heatmap(request, now=NOW)
        assert exc_info.value.status_code == 409
        assert "Forearms" in exc_info.value.detail
        assert "Forearms" in caplog.text


class TestMusclePills:
    def test_sorted_alphabetically(self):
        request = MusclePillsRequest.model_validate({
            "entries": [
                {"exercise_id": "barbell_squat"},
                {"exercise_id": "barbell_bench_press"},
                {"exercise_name": "Bicep Curl"},
            ],
        })
        response = HeatmapService().muscle_pills(request)
        assert response.chart_groups == [
            ChartGroup.ARMS, ChartGroup.CHEST, ChartGroup.LEGS, ChartGroup.SHOULDERS,
        ]


class TestDailyVolume:
    def test_rows_for_active_days(self):
        request = DailyVolumeRequest.model_validate({
            "logs": [
                _log("2025-03-04", _entry("barbell_squat", {"weight": 100, "reps": 5})),
                _log("2025-03-05", activityType="run", duration="10 min"),
            ],
            "range": {"start": "2025-03-03", "end": "2025-03-09"},
        })
        response = HeatmapService().daily_volume(request)
        assert [d.date for d in response.days] == [datetime.date(2025, 3, 4), datetime.date(2025, 3, 5)]
        assert response.days[0].totals[ChartGroup.LEGS] == pytest.approx(500.0)
        assert response.days[1].totals[ChartGroup.CORE] == pytest.approx(600 * 0.05)
