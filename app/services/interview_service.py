"""
Interview Service - sessions, questions and answers in Postgres.

Session metadata is a JSONB document:
    jobRole, experienceLevel, questionsAsked, currentQuestionNumber,
    totalQuestions, startTime (ISO-8601), phase

Every session lookup is scoped by user_id, so one user can never read or
mutate another user's interview.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import text

from app.core.errors import NotFoundError
from app.db.postgres import execute_raw_sql, fetch_one, get_db_session, row_to_dict

logger = logging.getLogger(__name__)

SESSION_COLUMNS = (
    "id, user_id, job_id, interview_type, duration, transcript, feedback, "
    "score, status, metadata, created_at, completed_at"
)
SESSION_NOT_FOUND = "Interview session not found"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def session_duration_seconds(metadata: Optional[dict], now: Optional[datetime] = None) -> Optional[int]:
    """Whole seconds since metadata.startTime, or None if it is missing or unparseable."""
    start = (metadata or {}).get("startTime")
    if not start:
        return None
    try:
        started = datetime.fromisoformat(str(start).replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Unparseable interview startTime: %s", start)
        return None
    if started.tzinfo is None:
        started = started.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max(0, int((now - started).total_seconds()))


# ============================================================
# SESSIONS
# ============================================================

def list_sessions(user_id: str, limit: int = 50) -> List[dict]:
    return execute_raw_sql(
        f"""
        SELECT {SESSION_COLUMNS} FROM interview_sessions
        WHERE user_id = :user_id
        ORDER BY created_at DESC
        LIMIT :limit
        """,
        {"user_id": user_id, "limit": limit},
    )


def create_session(
    user_id: str,
    interview_type: str,
    job_id: Optional[str] = None,
    metadata: Optional[dict] = None,
) -> dict:
    """Create an in-progress session. Default metadata starts in the intro phase."""
    if metadata is None:
        metadata = {"phase": "intro", "questionsAsked": 0, "startTime": utc_now_iso()}

    return fetch_one(
        f"""
        INSERT INTO interview_sessions (id, user_id, job_id, interview_type, status, transcript, metadata)
        VALUES (:id, :user_id, :job_id, :interview_type, 'in_progress',
            CAST(:transcript AS JSONB), CAST(:metadata AS JSONB))
        RETURNING {SESSION_COLUMNS}
        """,
        {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "job_id": job_id,
            "interview_type": interview_type,
            "transcript": json.dumps({"messages": []}),
            "metadata": json.dumps(metadata),
        },
    )


def get_session(user_id: str, session_id: str) -> Optional[dict]:
    """Session with the linked job title and company name."""
    return fetch_one(
        """
        SELECT s.*, j.title AS job_title, c.name AS company_name
        FROM interview_sessions s
        LEFT JOIN jobs j ON s.job_id = j.id
        LEFT JOIN companies c ON j.company_id = c.id
        WHERE s.user_id = :user_id AND s.id = :id
        LIMIT 1
        """,
        {"user_id": user_id, "id": session_id},
    )


def get_owned_session(user_id: str, session_id: str) -> Optional[dict]:
    return fetch_one(
        f"SELECT {SESSION_COLUMNS} FROM interview_sessions WHERE id = :id AND user_id = :user_id",
        {"id": session_id, "user_id": user_id},
    )


def get_metadata(user_id: str, session_id: str) -> Optional[dict]:
    row = fetch_one(
        "SELECT metadata FROM interview_sessions WHERE id = :id AND user_id = :user_id",
        {"id": session_id, "user_id": user_id},
    )
    if row is None:
        return None
    return row["metadata"] or {}


def update_metadata(user_id: str, session_id: str, updates: dict) -> dict:
    """Shallow-merge `updates` into the stored metadata and return the result."""
    with get_db_session() as db:
        row = db.execute(
            text("""
                SELECT metadata FROM interview_sessions
                WHERE id = :id AND user_id = :user_id
                FOR UPDATE
            """),
            {"id": session_id, "user_id": user_id},
        ).fetchone()
        if row is None:
            raise NotFoundError(SESSION_NOT_FOUND)

        metadata = {**(row[0] or {}), **updates}
        db.execute(
            text("""
                UPDATE interview_sessions SET metadata = CAST(:metadata AS JSONB)
                WHERE id = :id AND user_id = :user_id
            """),
            {"metadata": json.dumps(metadata), "id": session_id, "user_id": user_id},
        )
    return metadata


def update_session(user_id: str, session_id: str, updates: dict) -> Optional[dict]:
    """
    Apply a partial update. Supported keys: transcript (list of strings),
    status, feedback, score, duration. Returns the row or None when the
    session is not the user's.
    """
    set_clauses = []
    params = {"user_id": user_id, "id": session_id}

    if updates.get("transcript") is not None:
        set_clauses.append(
            "transcript = jsonb_set(COALESCE(transcript, CAST('{}' AS JSONB)), '{messages}', CAST(:transcript AS JSONB))"
        )
        params["transcript"] = json.dumps(updates["transcript"])

    if updates.get("status"):
        set_clauses.append("status = :status")
        params["status"] = updates["status"]
        if updates["status"] == "completed":
            set_clauses.append("completed_at = NOW()")

    if "feedback" in updates:
        set_clauses.append("feedback = CAST(:feedback AS JSONB)")
        params["feedback"] = json.dumps(updates["feedback"]) if updates["feedback"] is not None else None

    if "score" in updates:
        set_clauses.append("score = :score")
        params["score"] = updates["score"]

    if "duration" in updates:
        set_clauses.append("duration = :duration")
        params["duration"] = updates["duration"]

    if not set_clauses:
        raise ValueError("No updates provided")

    return fetch_one(
        f"""
        UPDATE interview_sessions SET {", ".join(set_clauses)}
        WHERE user_id = :user_id AND id = :id
        RETURNING {SESSION_COLUMNS}
        """,
        params,
    )


def complete_session(
    user_id: str,
    session_id: str,
    feedback: dict,
    score,
    duration: Optional[int],
    transcript: Optional[List[str]] = None,
) -> Optional[dict]:
    """Mark the session completed with its feedback; phase moves to completed."""
    transcript_clause = ""
    params = {
        "feedback": json.dumps(feedback),
        "score": score,
        "duration": duration,
        "user_id": user_id,
        "id": session_id,
    }
    if transcript is not None:
        transcript_clause = (
            ", transcript = jsonb_set(COALESCE(transcript, CAST('{}' AS JSONB)), "
            "'{messages}', CAST(:transcript AS JSONB))"
        )
        params["transcript"] = json.dumps(transcript)

    return fetch_one(
        f"""
        UPDATE interview_sessions
        SET status = 'completed',
            feedback = CAST(:feedback AS JSONB),
            score = :score,
            duration = :duration,
            completed_at = NOW(),
            metadata = COALESCE(metadata, CAST('{{}}' AS JSONB)) || CAST('{{"phase": "completed"}}' AS JSONB)
            {transcript_clause}
        WHERE user_id = :user_id AND id = :id
        RETURNING {SESSION_COLUMNS}
        """,
        params,
    )


# ============================================================
# QUESTIONS & ANSWERS
# ============================================================

def create_questions(session_id: str, questions: List[dict]) -> List[dict]:
    """Store questions numbered 1..N in one transaction."""
    stored = []
    with get_db_session() as db:
        for number, question in enumerate(questions, start=1):
            row = db.execute(
                text("""
                    INSERT INTO interview_questions
                        (id, interview_session_id, question_number, question_text, category, difficulty)
                    VALUES (:id, :session_id, :number, :question_text, :category, :difficulty)
                    RETURNING *
                """),
                {
                    "id": str(uuid.uuid4()),
                    "session_id": session_id,
                    "number": number,
                    "question_text": question["question_text"],
                    "category": question.get("category"),
                    "difficulty": question.get("difficulty"),
                },
            ).fetchone()
            stored.append(row_to_dict(row))
    return stored


def get_session_questions(session_id: str) -> List[dict]:
    return execute_raw_sql(
        """
        SELECT * FROM interview_questions
        WHERE interview_session_id = :session_id
        ORDER BY question_number ASC
        """,
        {"session_id": session_id},
    )


def get_session_answers(session_id: str) -> List[dict]:
    return execute_raw_sql(
        """
        SELECT a.*, q.question_number, q.question_text
        FROM interview_answers a
        JOIN interview_questions q ON a.question_id = q.id
        WHERE a.interview_session_id = :session_id
        ORDER BY q.question_number ASC
        """,
        {"session_id": session_id},
    )


def answer_exists(question_id: str) -> bool:
    row = fetch_one("SELECT id FROM interview_answers WHERE question_id = :question_id", {"question_id": question_id})
    return row is not None


def create_answer(
    session_id: str,
    question_id: str,
    answer_text: str,
    transcription_confidence: Optional[float] = None,
    audio_duration: Optional[int] = None,
    audio_file_path: Optional[str] = None,
) -> dict:
    return fetch_one(
        """
        INSERT INTO interview_answers
            (id, interview_session_id, question_id, answer_text,
             transcription_confidence, audio_duration, audio_file_path)
        VALUES (:id, :session_id, :question_id, :answer_text,
             :confidence, :duration, :audio_file_path)
        RETURNING *
        """,
        {
            "id": str(uuid.uuid4()),
            "session_id": session_id,
            "question_id": question_id,
            "answer_text": answer_text,
            "confidence": transcription_confidence,
            "duration": audio_duration,
            "audio_file_path": audio_file_path,
        },
    )


def record_answer_progress(user_id: str, session_id: str, question_index: int) -> dict:
    """Bump questionsAsked and point currentQuestionNumber past the answered question."""
    with get_db_session() as db:
        row = db.execute(
            text("""
                SELECT metadata FROM interview_sessions
                WHERE id = :id AND user_id = :user_id
                FOR UPDATE
            """),
            {"id": session_id, "user_id": user_id},
        ).fetchone()
        if row is None:
            raise NotFoundError(SESSION_NOT_FOUND)

        metadata = dict(row[0] or {})
        metadata["questionsAsked"] = int(metadata.get("questionsAsked") or 0) + 1
        metadata["currentQuestionNumber"] = question_index + 2
        db.execute(
            text("UPDATE interview_sessions SET metadata = CAST(:metadata AS JSONB) WHERE id = :id"),
            {"metadata": json.dumps(metadata), "id": session_id},
        )
    return metadata


def get_qa_pairs(session_id: str) -> List[dict]:
    """Every question with its answer text (None when unanswered), in order."""
    return execute_raw_sql(
        """
        SELECT q.question_number, q.question_text, q.category, a.answer_text
        FROM interview_questions q
        LEFT JOIN interview_answers a ON a.question_id = q.id
        WHERE q.interview_session_id = :session_id
        ORDER BY q.question_number ASC
        """,
        {"session_id": session_id},
    )
