"""
MongoDB Service - document storage next to the relational data.

Collections:
1. raw_resumes            - Extracted resume text per upload
2. resume_analysis_cache  - AI analysis keyed by text hash
3. interview_feedback_raw - Raw LLM feedback payloads per interview session

Mongo is supporting storage only: callers treat every failure here as
non-fatal and carry on with Postgres.
"""

import hashlib
import logging
from datetime import datetime, timezone
from typing import Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.db.mongodb import get_collection, COLLECTIONS

logger = logging.getLogger(__name__)


def compute_text_hash(text: str) -> str:
    """SHA-256 of the normalized text, used as the analysis cache key."""
    normalized = " ".join(text.split())
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


class RawResumeStore:
    """Original resume text, one document per upload."""

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["raw_resumes"])

    def insert(self, user_id: str, resume_id: str, resume_text: str, filename: str = None) -> str:
        doc = {
            "user_id": user_id,
            "resume_id": resume_id,
            "resume_text": resume_text,
            "text_hash": compute_text_hash(resume_text),
            "filename": filename,
            "uploaded_at": datetime.now(timezone.utc),
        }
        result = self.collection.insert_one(doc)
        return str(result.inserted_id)

    def delete_by_resume(self, resume_id: str) -> int:
        return self.collection.delete_many({"resume_id": resume_id}).deleted_count


class ResumeAnalysisCache:
    """
    Never analyze the same document twice: the AI result is cached under
    the hash of the extracted text.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["resume_analysis_cache"])

    def get(self, text_hash: str) -> Optional[dict]:
        doc = self.collection.find_one({"text_hash": text_hash})
        return doc["analysis"] if doc else None

    def put(self, text_hash: str, analysis: dict, model: str = None) -> None:
        self.collection.update_one(
            {"text_hash": text_hash},
            {"$set": {
                "analysis": analysis,
                "model": model,
                "cached_at": datetime.now(timezone.utc),
            }},
            upsert=True,
        )


class InterviewFeedbackStore:
    """Raw LLM feedback payloads, kept for auditing scores later."""

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["interview_feedback_raw"])

    def insert(self, session_id: str, user_id: str, payload: dict, kind: str) -> str:
        doc = {
            "session_id": session_id,
            "user_id": user_id,
            "kind": kind,
            "payload": payload,
            "created_at": datetime.now(timezone.utc),
        }
        result = self.collection.insert_one(doc)
        return str(result.inserted_id)


# ============================================================
# Best-effort helpers used by request handlers
# ============================================================

def store_raw_resume(user_id: str, resume_id: str, resume_text: str, filename: str = None) -> Optional[str]:
    try:
        return RawResumeStore().insert(user_id, resume_id, resume_text, filename)
    except PyMongoError as e:
        logger.warning("Could not store raw resume %s: %s", resume_id, e)
        return None


def delete_raw_resume(resume_id: str) -> None:
    try:
        RawResumeStore().delete_by_resume(resume_id)
    except PyMongoError as e:
        logger.warning("Could not delete raw resume %s: %s", resume_id, e)


def get_cached_analysis(text_hash: str) -> Optional[dict]:
    try:
        return ResumeAnalysisCache().get(text_hash)
    except PyMongoError as e:
        logger.warning("Resume analysis cache lookup failed: %s", e)
        return None


def cache_analysis(text_hash: str, analysis: dict, model: str = None) -> None:
    try:
        ResumeAnalysisCache().put(text_hash, analysis, model)
    except PyMongoError as e:
        logger.warning("Resume analysis cache write failed: %s", e)


def store_feedback_payload(session_id: str, user_id: str, payload: dict, kind: str) -> None:
    try:
        InterviewFeedbackStore().insert(session_id, user_id, payload, kind)
    except PyMongoError as e:
        logger.warning("Could not store raw feedback for session %s: %s", session_id, e)
