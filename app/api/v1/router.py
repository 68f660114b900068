"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import heatmap, taxonomy

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    heatmap.router, prefix="/heatmap", tags=["Heatmap"]
)
api_router.include_router(
    taxonomy.router, prefix="/taxonomy", tags=["Taxonomy"]
)
