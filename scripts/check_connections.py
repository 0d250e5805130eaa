#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify database and AI provider connections.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.mongodb import test_mongo_connection
from app.db.postgres import test_postgres_connection
from app.services.llm_client import get_groq_client, get_openai_client


def main():
    settings = get_settings()
    print("=" * 50)
    print("PREPWISE API - CONNECTION CHECK")
    print("=" * 50)

    # PostgreSQL
    print("\n[1] Testing PostgreSQL...")
    if not settings.database_url:
        print("    ❌ DATABASE_URL is not configured")
    elif test_postgres_connection():
        print("    ✅ PostgreSQL: CONNECTED")
    else:
        print("    ❌ PostgreSQL: FAILED")

    # MongoDB
    print("\n[2] Testing MongoDB...")
    print(f"    Database: {settings.mongodb_db}")
    if test_mongo_connection():
        print("    ✅ MongoDB: CONNECTED")
    else:
        print("    ❌ MongoDB: FAILED")

    # AI providers (only if keys are set)
    providers = [
        ("Groq", settings.groq_api_key, get_groq_client),
        ("OpenAI", settings.openai_api_key, get_openai_client),
    ]
    for i, (name, key, get_client) in enumerate(providers, start=3):
        print(f"\n[{i}] Testing {name} API...")
        if not key:
            print(f"    ⚠️  {name}: API key not configured (mock/fallback mode)")
            continue
        if get_client().test_connection():
            print(f"    ✅ {name}: CONNECTED")
        else:
            print(f"    ❌ {name}: FAILED")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
