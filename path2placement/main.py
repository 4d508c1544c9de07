"""
Path2Placement - Main Application

Local FastAPI app behind the Path2Placement screens:
- Dashboard over the hosted placement table (Supabase Postgres)
- Placement prediction, college finder and insights (backend API)
- Resume upload and analysis (backend API)
- One persisted login session

Run: uvicorn path2placement.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from path2placement.api.routes import api_router
from path2placement.core.config import get_settings
from path2placement.core.session import get_session_store
from path2placement.db.postgres import test_postgres_connection
from path2placement.services.backend_client import get_backend_client

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Path2Placement",
    description="""
    Placement statistics, prediction and resume analysis for students.

    ## Screens
    - **Dashboard**: KPIs and charts over every college's placement records
    - **Prediction**: Past and predicted placement for one college, one timeline
    - **Finder**: Top colleges by location and course
    - **Insights**: Placement/salary trends and top recruiters
    - **Resume Analyzer**: Upload resumes, score them against a job role
    - **Account**: Login, register, logout, profile
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Load the persisted session and resolve its profile."""
    store = get_session_store()
    if store.token:
        store.refresh_profile()
        logger.info("Restored session (profile %s)", "loaded" if store.profile else "unavailable")
    else:
        logger.info("No saved session")


@app.get("/", tags=["Health"])
async def root():
    """Basic status."""
    return {"status": "healthy", "app": "Path2Placement", "docs": "/docs"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "backend": "reachable" if get_backend_client().test_connection() else "unreachable",
        "placement_db": "connected" if test_postgres_connection() else "disconnected"
    }
