"""
API module - FastAPI routers, one per screen of the client.

Usage:
    from path2placement.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
