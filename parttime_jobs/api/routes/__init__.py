"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from parttime_jobs.api.routes.auth_routes import router as auth_router
from parttime_jobs.api.routes.shell_routes import router as shell_router
from parttime_jobs.api.routes.job_routes import router as job_router
from parttime_jobs.api.routes.student_routes import router as student_router
from parttime_jobs.api.routes.employer_routes import router as employer_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(shell_router)
api_router.include_router(job_router)
api_router.include_router(student_router)
api_router.include_router(employer_router)
