"""
Job Routes

GET /jobs - List active jobs with filters
GET /jobs/{job_id} - Get job details
POST /jobs/sync - Refresh curated jobs
POST /jobs/{job_id}/save - Save a job
DELETE /jobs/{job_id}/save - Unsave a job
GET /jobs/user/saved - Get saved jobs
POST /jobs/{job_id}/apply - Apply to a job
GET /jobs/user/applications - Get my applications
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.exc import IntegrityError

from app.core.auth import get_current_user
from app.core.errors import FOREIGN_KEY_VIOLATION, SESSION_EXPIRED_MESSAGE, pg_error_code
from app.schemas.schemas import SaveJobRequest, ApplyJobRequest, MessageResponse
from app.services import job_service, resume_service
from app.services.curated_job_service import ensure_curated_jobs_seeded, seed_curated_jobs

router = APIRouter(prefix="/jobs", tags=["Jobs"])


# Seeding blocks on Postgres, so these handlers are sync and run in the threadpool.
@router.get("")
def list_jobs(
    search: Optional[str] = Query(None, description="Search in title and description"),
    location: Optional[str] = Query(None),
    job_type: Optional[str] = Query(None),
    experience_level: Optional[str] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """List active jobs, newest first, with pagination."""
    ensure_curated_jobs_seeded()

    jobs, total = job_service.list_jobs(search, location, job_type, experience_level, limit, offset)
    return {
        "jobs": jobs,
        "pagination": {
            "total": total,
            "limit": limit,
            "offset": offset,
            "hasMore": offset + len(jobs) < total,
        },
    }


@router.post("/sync", response_model=MessageResponse)
def sync_jobs():
    seed_curated_jobs()
    return MessageResponse(message="Curated jobs refreshed")


@router.get("/user/saved")
async def get_saved_jobs(user: dict = Depends(get_current_user)):
    return {"jobs": job_service.list_saved_jobs(user["id"])}


@router.get("/user/applications")
async def get_applications(user: dict = Depends(get_current_user)):
    return {"applications": job_service.list_applications(user["id"])}


@router.get("/{job_id}")
def get_job(job_id: UUID):
    """Get job details with company info."""
    ensure_curated_jobs_seeded()

    job = job_service.get_job(str(job_id))
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return {"job": job}


@router.post("/{job_id}/save", response_model=MessageResponse, status_code=201)
async def save_job(
    job_id: UUID,
    data: Optional[SaveJobRequest] = None,
    user: dict = Depends(get_current_user),
):
    if not job_service.job_exists(str(job_id)):
        raise HTTPException(status_code=404, detail="Job not found")

    job_service.save_job(user["id"], str(job_id), data.notes if data else None)
    return MessageResponse(message="Job saved successfully")


@router.delete("/{job_id}/save", response_model=MessageResponse)
async def unsave_job(job_id: UUID, user: dict = Depends(get_current_user)):
    job_service.unsave_job(user["id"], str(job_id))
    return MessageResponse(message="Job removed from saved list")


@router.post("/{job_id}/apply", status_code=201)
async def apply_to_job(
    job_id: UUID,
    data: Optional[ApplyJobRequest] = None,
    user: dict = Depends(get_current_user),
):
    """Submit an application, optionally with a resume and cover letter."""
    if not job_service.job_exists(str(job_id)):
        raise HTTPException(status_code=404, detail="Job not found")

    data = data or ApplyJobRequest()
    if data.resume_id and not resume_service.get_resume(user["id"], str(data.resume_id)):
        raise HTTPException(status_code=404, detail="Resume not found")

    try:
        application_id = job_service.apply_to_job(
            user["id"],
            str(job_id),
            str(data.resume_id) if data.resume_id else None,
            data.cover_letter,
        )
    except IntegrityError as e:
        # The user row is gone (account deleted while the token is still valid)
        if pg_error_code(e) == FOREIGN_KEY_VIOLATION:
            raise HTTPException(status_code=401, detail=SESSION_EXPIRED_MESSAGE)
        raise

    return {"message": "Application submitted successfully", "application_id": application_id}
