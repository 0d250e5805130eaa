"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.interview_routes import router as interview_router
from app.api.routes.resume_routes import router as resume_router
from app.api.routes.ai_routes import router as ai_router
from app.api.routes.jobs_routes import router as jobs_router
from app.api.routes.companies_routes import router as companies_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(interview_router)
api_router.include_router(resume_router)
api_router.include_router(ai_router)
api_router.include_router(jobs_router)
api_router.include_router(companies_router)
