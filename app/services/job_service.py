"""
Job Service - listing, saving and applying to jobs.
"""

import uuid
from typing import List, Optional, Tuple

from app.db.postgres import execute_raw_sql, fetch_one

JOB_WITH_COMPANY = """
    SELECT j.*, c.name AS company_name, c.website_url, c.logo_url, c.industry
    FROM jobs j
    JOIN companies c ON j.company_id = c.id
"""


def _job_filters(
    search: Optional[str],
    location: Optional[str],
    job_type: Optional[str],
    experience_level: Optional[str],
) -> Tuple[str, dict]:
    clauses = ["j.is_active = true"]
    params = {}
    if search:
        clauses.append("(j.title ILIKE :search OR j.description ILIKE :search)")
        params["search"] = f"%{search}%"
    if location:
        clauses.append("j.location ILIKE :location")
        params["location"] = f"%{location}%"
    if job_type:
        clauses.append("j.job_type = :job_type")
        params["job_type"] = job_type
    if experience_level:
        clauses.append("j.experience_level = :experience_level")
        params["experience_level"] = experience_level
    return " WHERE " + " AND ".join(clauses), params


def list_jobs(
    search: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[str] = None,
    experience_level: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[dict], int]:
    """Active jobs matching the filters, newest first. Returns (page, total)."""
    where, params = _job_filters(search, location, job_type, experience_level)

    jobs = execute_raw_sql(
        JOB_WITH_COMPANY + where + " ORDER BY j.posted_date DESC LIMIT :limit OFFSET :offset",
        {**params, "limit": limit, "offset": offset},
    )
    count = fetch_one("SELECT COUNT(*) AS total FROM jobs j" + where, params)
    return jobs, int(count["total"]) if count else 0


def get_job(job_id: str) -> Optional[dict]:
    return fetch_one(
        """
        SELECT j.*, c.name AS company_name, c.website_url, c.logo_url, c.industry,
               c.description AS company_description, c.size AS company_size
        FROM jobs j
        JOIN companies c ON j.company_id = c.id
        WHERE j.id = :id AND j.is_active = true
        """,
        {"id": job_id},
    )


def job_exists(job_id: str) -> bool:
    return fetch_one("SELECT id FROM jobs WHERE id = :id", {"id": job_id}) is not None


def save_job(user_id: str, job_id: str, notes: Optional[str] = None) -> None:
    """Save a job for the user; saving again only replaces the notes."""
    execute_raw_sql(
        """
        INSERT INTO saved_jobs (id, user_id, job_id, notes)
        VALUES (:id, :user_id, :job_id, :notes)
        ON CONFLICT (user_id, job_id) DO UPDATE SET notes = EXCLUDED.notes
        """,
        {"id": str(uuid.uuid4()), "user_id": user_id, "job_id": job_id, "notes": notes or None},
    )


def unsave_job(user_id: str, job_id: str) -> None:
    execute_raw_sql(
        "DELETE FROM saved_jobs WHERE user_id = :user_id AND job_id = :job_id",
        {"user_id": user_id, "job_id": job_id},
    )


def list_saved_jobs(user_id: str) -> List[dict]:
    return execute_raw_sql(
        """
        SELECT j.*, sj.id AS saved_job_id, sj.notes, sj.saved_at,
               c.name AS company_name, c.website_url, c.logo_url
        FROM saved_jobs sj
        JOIN jobs j ON sj.job_id = j.id
        JOIN companies c ON j.company_id = c.id
        WHERE sj.user_id = :user_id
        ORDER BY sj.saved_at DESC
        """,
        {"user_id": user_id},
    )


def apply_to_job(
    user_id: str,
    job_id: str,
    resume_id: Optional[str] = None,
    cover_letter: Optional[str] = None,
) -> str:
    """Create a submitted application and return its id."""
    application_id = str(uuid.uuid4())
    execute_raw_sql(
        """
        INSERT INTO job_applications (id, user_id, job_id, resume_id, cover_letter, status)
        VALUES (:id, :user_id, :job_id, :resume_id, :cover_letter, 'submitted')
        """,
        {
            "id": application_id,
            "user_id": user_id,
            "job_id": job_id,
            "resume_id": resume_id,
            "cover_letter": cover_letter or None,
        },
    )
    return application_id


def list_applications(user_id: str) -> List[dict]:
    return execute_raw_sql(
        """
        SELECT ja.*, j.title AS job_title, j.location AS job_location,
               c.name AS company_name, c.logo_url
        FROM job_applications ja
        JOIN jobs j ON ja.job_id = j.id
        JOIN companies c ON j.company_id = c.id
        WHERE ja.user_id = :user_id
        ORDER BY ja.applied_at DESC
        """,
        {"user_id": user_id},
    )
