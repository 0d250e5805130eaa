"""
Schema management - applies the SQL files in app/db/migrations in order.

Every migration is written to be re-runnable (IF NOT EXISTS / OR REPLACE),
so applying all of them again is safe.
"""

import logging
from pathlib import Path
from typing import List

from app.db.postgres import get_engine

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

# Drop order respects foreign keys
TABLES = [
    "company_followers",
    "job_applications",
    "saved_jobs",
    "interview_answers",
    "interview_questions",
    "interview_sessions",
    "resumes",
    "jobs",
    "companies",
    "users",
]


def list_migrations(directory: Path = MIGRATIONS_DIR) -> List[Path]:
    """Migration files sorted by their numeric prefix (001_, 002_, ...)."""
    return sorted(directory.glob("[0-9][0-9][0-9]_*.sql"))


def apply_migrations(directory: Path = MIGRATIONS_DIR) -> List[str]:
    """Run every migration in one transaction. Returns the applied file names."""
    applied = []
    with get_engine().begin() as conn:
        for path in list_migrations(directory):
            logger.info("Running migration %s", path.name)
            # Driver-level execution: the files contain $$ function bodies and :: casts
            conn.exec_driver_sql(path.read_text(encoding="utf-8"))
            applied.append(path.name)
    return applied


def drop_all_tables() -> None:
    with get_engine().begin() as conn:
        for table in TABLES:
            conn.exec_driver_sql(f"DROP TABLE IF EXISTS {table} CASCADE")
        conn.exec_driver_sql("DROP FUNCTION IF EXISTS update_updated_at() CASCADE")
    logger.info("Dropped %d tables", len(TABLES))
