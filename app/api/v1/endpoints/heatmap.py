"""
Heatmap endpoints — body heatmap, workout pills, daily volume.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_heatmap_service
from app.schemas.heatmap import (
    DailyVolumeRequest,
    DailyVolumeResponse,
    HeatmapRequest,
    HeatmapResponse,
    MusclePillsRequest,
    MusclePillsResponse,
)
from app.services.heatmap_service import HeatmapService

router = APIRouter()


@router.post("", summary="Compute the muscle engagement heatmap for a date range.", response_model=HeatmapResponse, )
def compute_heatmap(data: HeatmapRequest, service: HeatmapService = Depends(get_heatmap_service), ):
    """Raw load and normalized intensity per muscle group, plus front/back rankings.

    Defaults: built-in catalog, current week, server normalization mode and
    missing-exercise policy.
    """
    return service.compute_heatmap(data)


@router.post("/muscle-pills", summary="Chart groups engaged by one workout.", response_model=MusclePillsResponse, )
def muscle_pills(data: MusclePillsRequest, service: HeatmapService = Depends(get_heatmap_service), ):
    return service.muscle_pills(data)


@router.post("/daily-volume", summary="Per-day chart-group volume for a date range.",
             response_model=DailyVolumeResponse, )
def daily_volume(data: DailyVolumeRequest, service: HeatmapService = Depends(get_heatmap_service), ):
    return service.daily_volume(data)
