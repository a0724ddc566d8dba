"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from jobportal.api.routes.auth_routes import router as auth_router
from jobportal.api.routes.job_routes import router as job_router
from jobportal.api.routes.candidate_routes import router as candidate_router
from jobportal.api.routes.recruiter_routes import router as recruiter_router
from jobportal.api.routes.company_routes import router as company_router
from jobportal.api.routes.assistant_routes import router as assistant_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(job_router)
api_router.include_router(candidate_router)
api_router.include_router(recruiter_router)
api_router.include_router(company_router)
api_router.include_router(assistant_router)
