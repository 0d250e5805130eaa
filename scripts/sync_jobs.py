#!/usr/bin/env python3
"""
Curated Jobs Sync

Upserts the curated companies and jobs without starting the API.
Usage: python scripts/sync_jobs.py
"""
import sys
sys.path.insert(0, '.')

from app.core.config import assert_required_settings
from app.core.logging import configure_logging
from app.services.curated_job_service import seed_curated_jobs


def main():
    configure_logging()
    assert_required_settings()
    count = seed_curated_jobs()
    print(f"✅ Synced {count} curated jobs")


if __name__ == "__main__":
    main()
