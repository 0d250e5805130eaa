"""
PrepWise API - Main Application

FastAPI backend with:
- PostgreSQL for structured data
- MongoDB for supporting documents
- Groq / OpenAI for resume analysis and interview feedback
- JWT authentication (httpOnly cookie or Bearer header)

Run: uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import register_error_handlers
from app.core.logging import RequestLoggingMiddleware, configure_logging
from app.db.mongodb import init_mongo_indexes, test_mongo_connection
from app.db.postgres import test_postgres_connection
from app.utils.file_upload import AUDIO_SUBDIR, RESUME_SUBDIR, upload_dir

settings = get_settings()

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="PrepWise API",
    description="""
    Job preparation backend.

    ## Features
    - **Authentication**: JWT in an httpOnly cookie, Bearer header also accepted
    - **Jobs & Companies**: Curated listings, saving, applying, following
    - **Resumes**: Upload (DOCX/PDF/TXT) with AI ATS analysis
    - **Interviews**: AI-generated questions, answer capture, scored feedback
    - **Realtime**: Ephemeral OpenAI realtime sessions for voice interviews

    ## Databases
    - PostgreSQL: Users, jobs, resumes, interview sessions/questions/answers
    - MongoDB: Raw resume text, analysis cache, raw LLM feedback
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS - the SPA sends the auth cookie, so origins must be explicit
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_error_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")

# Uploaded files
app.mount("/uploads/resumes", StaticFiles(directory=upload_dir(RESUME_SUBDIR)), name="resumes")
app.mount("/uploads/interview-audio", StaticFiles(directory=upload_dir(AUDIO_SUBDIR)), name="interview-audio")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
        logger.info("MongoDB indexes initialized")
    except PyMongoError as e:
        logger.warning("MongoDB index initialization failed: %s", e)


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok"}


@app.get("/health/details", tags=["Health"])
async def health_details():
    """Detailed health check."""
    return {
        "status": "ok",
        "postgres": "connected" if test_postgres_connection() else "disconnected",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
