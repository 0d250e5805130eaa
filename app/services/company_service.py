"""
Company Service - company directory and follows.
"""

import uuid
from typing import List, Optional, Tuple

from app.db.postgres import execute_raw_sql, fetch_one


def count_companies() -> int:
    row = fetch_one("SELECT COUNT(*) AS total FROM companies")
    return int(row["total"]) if row else 0


def list_companies(
    search: Optional[str] = None,
    industry: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[dict], int]:
    """Companies with their active job counts, busiest first. Returns (page, total)."""
    where = " WHERE 1=1"
    params = {}
    if search:
        where += " AND (c.name ILIKE :search OR c.description ILIKE :search)"
        params["search"] = f"%{search}%"
    if industry:
        where += " AND c.industry ILIKE :industry"
        params["industry"] = f"%{industry}%"

    companies = execute_raw_sql(
        """
        SELECT c.*, COUNT(j.id) AS job_count
        FROM companies c
        LEFT JOIN jobs j ON c.id = j.company_id AND j.is_active = true
        """ + where + """
        GROUP BY c.id
        ORDER BY job_count DESC, c.name ASC
        LIMIT :limit OFFSET :offset
        """,
        {**params, "limit": limit, "offset": offset},
    )
    count = fetch_one("SELECT COUNT(DISTINCT c.id) AS total FROM companies c" + where, params)
    return companies, int(count["total"]) if count else 0


def get_company(company_id: str) -> Optional[dict]:
    return fetch_one("SELECT * FROM companies WHERE id = :id", {"id": company_id})


def list_company_jobs(company_id: str) -> List[dict]:
    return execute_raw_sql(
        """
        SELECT j.*, c.name AS company_name, c.website_url, c.logo_url, c.industry
        FROM jobs j
        JOIN companies c ON j.company_id = c.id
        WHERE j.company_id = :company_id AND j.is_active = true
        ORDER BY j.posted_date DESC
        """,
        {"company_id": company_id},
    )


def is_following(user_id: str, company_id: str) -> bool:
    row = fetch_one(
        "SELECT id FROM company_followers WHERE user_id = :user_id AND company_id = :company_id",
        {"user_id": user_id, "company_id": company_id},
    )
    return row is not None


def follow_company(user_id: str, company_id: str) -> None:
    execute_raw_sql(
        """
        INSERT INTO company_followers (id, user_id, company_id)
        VALUES (:id, :user_id, :company_id)
        ON CONFLICT (user_id, company_id) DO NOTHING
        """,
        {"id": str(uuid.uuid4()), "user_id": user_id, "company_id": company_id},
    )


def unfollow_company(user_id: str, company_id: str) -> None:
    execute_raw_sql(
        "DELETE FROM company_followers WHERE user_id = :user_id AND company_id = :company_id",
        {"user_id": user_id, "company_id": company_id},
    )


def list_followed_companies(user_id: str) -> List[dict]:
    return execute_raw_sql(
        """
        SELECT c.*, cf.id AS follow_id, cf.followed_at, COUNT(j.id) AS job_count
        FROM company_followers cf
        JOIN companies c ON cf.company_id = c.id
        LEFT JOIN jobs j ON c.id = j.company_id AND j.is_active = true
        WHERE cf.user_id = :user_id
        GROUP BY cf.id, c.id
        ORDER BY cf.followed_at DESC
        """,
        {"user_id": user_id},
    )
