"""
Curated Job Service - keeps the curated listings in Postgres up to date.

Companies are matched by name, jobs by external_id. Re-running the seed
refreshes every field and re-activates the job.
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy import text

from app.data.curated_jobs import CURATED_JOB_SEEDS
from app.db.postgres import get_db_session

logger = logging.getLogger(__name__)

_seed_lock = threading.Lock()


def _upsert_company(db, company: dict) -> str:
    existing = db.execute(
        text("SELECT id FROM companies WHERE name = :name"),
        {"name": company["name"]},
    ).fetchone()

    params = {
        "name": company["name"],
        "website_url": company["website_url"],
        "logo_url": company.get("logo_url"),
        "industry": company.get("industry"),
        "location": company.get("location"),
        "size": company.get("size"),
        "description": company.get("description"),
    }

    if existing:
        params["id"] = existing[0]
        db.execute(
            text("""
                UPDATE companies
                SET website_url = :website_url,
                    logo_url = COALESCE(:logo_url, logo_url),
                    industry = COALESCE(:industry, industry),
                    location = COALESCE(:location, location),
                    size = COALESCE(:size, size),
                    description = COALESCE(:description, description)
                WHERE id = :id
            """),
            params,
        )
        return str(existing[0])

    params["id"] = str(uuid.uuid4())
    db.execute(
        text("""
            INSERT INTO companies (id, name, website_url, logo_url, industry, location, size, description)
            VALUES (:id, :name, :website_url, :logo_url, :industry, :location, :size, :description)
        """),
        params,
    )
    return params["id"]


def _upsert_job(db, external_id: str, company_id: str, job: dict, now: datetime) -> None:
    params = {
        "external_id": external_id,
        "company_id": company_id,
        "title": job["title"],
        "location": job["location"],
        "job_type": job.get("job_type"),
        "experience_level": job.get("experience_level"),
        "salary_min": job.get("salary_min"),
        "salary_max": job.get("salary_max"),
        "salary_currency": job.get("salary_currency") or "USD",
        "description": job["description"],
        "requirements": job.get("requirements"),
        "responsibilities": job.get("responsibilities"),
        "benefits": job.get("benefits"),
        "posted_date": now - timedelta(days=job.get("posted_days_ago", 0)),
        "application_url": job["application_url"],
        "source": job["source"],
    }

    existing = db.execute(
        text("SELECT id FROM jobs WHERE external_id = :external_id"),
        {"external_id": external_id},
    ).fetchone()

    if existing:
        db.execute(
            text("""
                UPDATE jobs
                SET company_id = :company_id, title = :title, location = :location,
                    job_type = :job_type, experience_level = :experience_level,
                    salary_min = :salary_min, salary_max = :salary_max,
                    salary_currency = :salary_currency, description = :description,
                    requirements = :requirements, responsibilities = :responsibilities,
                    benefits = :benefits, posted_date = :posted_date,
                    application_url = :application_url, is_active = true,
                    source = :source, updated_at = NOW()
                WHERE external_id = :external_id
            """),
            params,
        )
        return

    params["id"] = str(uuid.uuid4())
    db.execute(
        text("""
            INSERT INTO jobs (id, company_id, title, location, job_type, experience_level,
                salary_min, salary_max, salary_currency, description, requirements,
                responsibilities, benefits, posted_date, application_url, is_active,
                external_id, source)
            VALUES (:id, :company_id, :title, :location, :job_type, :experience_level,
                :salary_min, :salary_max, :salary_currency, :description, :requirements,
                :responsibilities, :benefits, :posted_date, :application_url, true,
                :external_id, :source)
        """),
        params,
    )


def seed_curated_jobs() -> int:
    """Upsert every curated company and job in one transaction. Returns the job count."""
    now = datetime.now(timezone.utc)
    with get_db_session() as db:
        for seed in CURATED_JOB_SEEDS:
            company_id = _upsert_company(db, seed["company"])
            _upsert_job(db, seed["external_id"], company_id, seed["job"], now)
    logger.info("Seeded %d curated jobs", len(CURATED_JOB_SEEDS))
    return len(CURATED_JOB_SEEDS)


def ensure_curated_jobs_seeded() -> None:
    """
    Refresh curated jobs, sharing one run between concurrent callers.
    A caller that arrives while a run is in progress waits for it and
    does not start another.
    """
    if _seed_lock.acquire(blocking=False):
        try:
            seed_curated_jobs()
        finally:
            _seed_lock.release()
        return

    # Another request is seeding; wait for it to finish
    with _seed_lock:
        pass
