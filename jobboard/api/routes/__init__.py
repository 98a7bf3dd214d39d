"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from jobboard.api.routes.job_routes import router as job_router
from jobboard.api.routes.subscriber_routes import router as subscriber_router
from jobboard.api.routes.ai_routes import router as ai_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(job_router)
api_router.include_router(subscriber_router)
api_router.include_router(ai_router)
