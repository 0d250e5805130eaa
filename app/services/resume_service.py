"""
Resume Service - resume rows in Postgres.

The stored file lives under the resumes upload dir; `file_path` holds only
the generated file name.
"""

import json
import uuid
from typing import List, Optional

from app.db.postgres import execute_raw_sql, fetch_one

RESUME_COLUMNS = (
    "id, user_id, file_name, file_path, file_size, analysis_results, "
    "overall_score, ats_score, created_at, updated_at"
)


def create_resume(
    user_id: str,
    file_name: str,
    stored_name: str,
    file_size: int,
    analysis: dict,
) -> dict:
    """Insert a resume with its analysis and return the new row."""
    return fetch_one(
        f"""
        INSERT INTO resumes (id, user_id, file_name, file_path, file_size,
            analysis_results, overall_score, ats_score)
        VALUES (:id, :user_id, :file_name, :file_path, :file_size,
            CAST(:analysis AS JSONB), :overall_score, :ats_score)
        RETURNING {RESUME_COLUMNS}
        """,
        {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "file_name": file_name,
            "file_path": stored_name,
            "file_size": file_size,
            "analysis": json.dumps(analysis),
            "overall_score": analysis.get("overallScore"),
            "ats_score": analysis.get("atsScore"),
        },
    )


def list_resumes(user_id: str) -> List[dict]:
    return execute_raw_sql(
        f"SELECT {RESUME_COLUMNS} FROM resumes WHERE user_id = :user_id ORDER BY created_at DESC",
        {"user_id": user_id},
    )


def get_resume(user_id: str, resume_id: str) -> Optional[dict]:
    return fetch_one(
        f"SELECT {RESUME_COLUMNS} FROM resumes WHERE user_id = :user_id AND id = :id LIMIT 1",
        {"user_id": user_id, "id": resume_id},
    )


def delete_resume(user_id: str, resume_id: str) -> Optional[str]:
    """Delete the row; returns the stored file name, or None if nothing matched."""
    row = fetch_one(
        "DELETE FROM resumes WHERE user_id = :user_id AND id = :id RETURNING file_path",
        {"user_id": user_id, "id": resume_id},
    )
    return row["file_path"] if row else None
