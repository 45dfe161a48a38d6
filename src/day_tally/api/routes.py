"""Main API routes for Day Tally."""

from fastapi import APIRouter

from .statistics import router as statistics_router
from .tasks import router as tasks_router

# Main API router
router = APIRouter()

# Include sub-routers
router.include_router(statistics_router, prefix="/statistics", tags=["statistics"])
router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
