"""
Company Routes

GET /companies - List companies with job counts
GET /companies/{company_id} - Company details with active jobs
POST /companies/{company_id}/follow - Follow a company
DELETE /companies/{company_id}/follow - Unfollow a company
GET /companies/user/following - Get followed companies
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.exc import SQLAlchemyError

from app.core.auth import get_current_user, get_optional_user
from app.schemas.schemas import MessageResponse
from app.services import company_service
from app.services.curated_job_service import ensure_curated_jobs_seeded

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("")
def list_companies(
    search: Optional[str] = Query(None, description="Search in name and description"),
    industry: Optional[str] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """List companies ordered by number of active jobs."""
    # Lazy-seed curated data on an empty directory
    try:
        if company_service.count_companies() == 0:
            ensure_curated_jobs_seeded()
    except SQLAlchemyError as e:
        logger.warning("Companies lazy seed check failed: %s", e)

    companies, total = company_service.list_companies(search, industry, limit, offset)
    return {
        "companies": companies,
        "pagination": {
            "total": total,
            "limit": limit,
            "offset": offset,
            "hasMore": offset + len(companies) < total,
        },
    }


@router.get("/user/following")
async def get_following(user: dict = Depends(get_current_user)):
    return {"companies": company_service.list_followed_companies(user["id"])}


@router.get("/{company_id}")
async def get_company(company_id: UUID, user: Optional[dict] = Depends(get_optional_user)):
    """Company with all active jobs; `is_following` is false for anonymous callers."""
    company = company_service.get_company(str(company_id))
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")

    jobs = company_service.list_company_jobs(str(company_id))
    following = company_service.is_following(user["id"], str(company_id)) if user else False

    return {
        "company": {**company, "job_count": len(jobs), "is_following": following},
        "jobs": jobs,
    }


@router.post("/{company_id}/follow", response_model=MessageResponse, status_code=201)
async def follow_company(company_id: UUID, user: dict = Depends(get_current_user)):
    if not company_service.get_company(str(company_id)):
        raise HTTPException(status_code=404, detail="Company not found")

    company_service.follow_company(user["id"], str(company_id))
    return MessageResponse(message="Company followed successfully")


@router.delete("/{company_id}/follow", response_model=MessageResponse)
async def unfollow_company(company_id: UUID, user: dict = Depends(get_current_user)):
    company_service.unfollow_company(user["id"], str(company_id))
    return MessageResponse(message="Company unfollowed successfully")
