"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from path2placement.api.routes.auth_routes import router as auth_router
from path2placement.api.routes.dashboard_routes import router as dashboard_router
from path2placement.api.routes.placement_routes import router as placement_router
from path2placement.api.routes.resume_routes import router as resume_router
from path2placement.schemas.schemas import ErrorResponse

# Error bodies every screen can get back from a failed backend or table call
ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Not logged in or rejected credentials"},
    502: {"model": ErrorResponse, "description": "Backend server error"},
    503: {"model": ErrorResponse, "description": "Backend or placement table unreachable"},
}

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router, responses=ERROR_RESPONSES)
api_router.include_router(dashboard_router, responses=ERROR_RESPONSES)
api_router.include_router(placement_router, responses=ERROR_RESPONSES)
api_router.include_router(resume_router, responses=ERROR_RESPONSES)
