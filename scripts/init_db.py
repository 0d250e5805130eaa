#!/usr/bin/env python3
"""
Database Init Script

Applies app/db/migrations/*.sql in order, then seeds curated jobs.
Usage: python scripts/init_db.py [--no-seed]
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import assert_required_settings
from app.core.logging import configure_logging
from app.db.schema import apply_migrations
from app.services.curated_job_service import seed_curated_jobs


def main():
    configure_logging()
    try:
        assert_required_settings()
    except RuntimeError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print("🔌 Connecting to database...")
    try:
        applied = apply_migrations()
        for name in applied:
            print(f"✅ {name}")
        if "--no-seed" not in sys.argv:
            count = seed_curated_jobs()
            print(f"✅ Seeded {count} curated jobs")
    except SQLAlchemyError as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)

    print("\n✅ Database initialized successfully!")


if __name__ == "__main__":
    main()
