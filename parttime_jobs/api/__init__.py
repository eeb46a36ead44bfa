"""
API module - FastAPI routers and endpoint definitions.

Usage:
    from parttime_jobs.api.routes import api_router
    app.include_router(api_router)
"""
