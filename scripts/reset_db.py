#!/usr/bin/env python3
"""
Database Reset Script

Drops every application table. Run init_db.py afterwards.
Usage: python scripts/reset_db.py --yes
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import assert_required_settings
from app.core.logging import configure_logging
from app.db.schema import drop_all_tables


def main():
    if "--yes" not in sys.argv:
        print("This drops all tables. Re-run with --yes to confirm.")
        sys.exit(1)

    configure_logging()
    assert_required_settings()

    print("🗑️  Dropping all tables...")
    try:
        drop_all_tables()
    except SQLAlchemyError as e:
        print(f"❌ Error dropping tables: {e}")
        sys.exit(1)

    print("✅ All tables dropped successfully!")
    print("Now run: python scripts/init_db.py")


if __name__ == "__main__":
    main()
