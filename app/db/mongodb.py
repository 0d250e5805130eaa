"""
MongoDB Connection Utility

MongoDB stores:
- Raw resume text extracted from uploads
- Cached AI resume analyses (keyed by text hash)
- Raw LLM feedback payloads for interviews

Postgres stays the source of truth; these documents are supporting data.
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, serverSelectionTimeoutMS=3000)
    return _client


def get_mongo_db() -> Database:
    """Get the documents database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection by name (see COLLECTIONS)."""
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "raw_resumes": "raw_resumes",
    "resume_analysis_cache": "resume_analysis_cache",
    "interview_feedback_raw": "interview_feedback_raw",
}


def init_mongo_indexes():
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = get_mongo_db()

    db[COLLECTIONS["raw_resumes"]].create_index("user_id")
    db[COLLECTIONS["raw_resumes"]].create_index("resume_id")

    # One cached analysis per distinct document text
    db[COLLECTIONS["resume_analysis_cache"]].create_index(
        [("text_hash", ASCENDING)], unique=True
    )

    db[COLLECTIONS["interview_feedback_raw"]].create_index("session_id")

    logger.info("MongoDB indexes created")
