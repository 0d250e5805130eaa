"""
Interview Routes (all require auth)

GET /interviews - List my sessions
POST /interviews - Create a session
POST /interviews/start - Start an AI interview with generated questions
POST /interviews/submit-answer - Answer a question (JSON or multipart with audio)
POST /interviews/generate-feedback - Score a finished interview
GET /interviews/{session_id} - Get a session
GET /interviews/{session_id}/metadata - Get session metadata
PATCH /interviews/{session_id}/metadata - Merge session metadata
PATCH /interviews/{session_id} - Update a session
GET /interviews/{session_id}/questions - Questions in order
GET /interviews/{session_id}/answers - Answers in order
"""

import json
import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.auth import get_current_user
from app.core.config import get_settings
from app.core.errors import AIServiceError, NotFoundError, UNIQUE_VIOLATION, pg_error_code
from app.schemas.schemas import (
    CreateSessionRequest, StartInterviewRequest, SubmitAnswerRequest, SessionIdRequest,
    UpdateMetadataRequest, UpdateSessionRequest
)
from app.services import interview_service
from app.services.document_store import store_feedback_payload
from app.services.interview_ai import (
    FOLLOW_UP_PROMPT, generate_interview_feedback, generate_interview_questions, needs_elaboration
)
from app.services.llm_client import openai_configured
from app.utils.file_upload import AUDIO_SUBDIR, remove_stored_file, save_audio_upload

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/interviews", tags=["Interviews"])

SESSION_NOT_FOUND = interview_service.SESSION_NOT_FOUND
ALREADY_ANSWERED = "This question has already been answered"
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def _require_session(user_id: str, session_id: str) -> dict:
    session = interview_service.get_owned_session(user_id, session_id)
    if not session:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND)
    return session


@router.get("")
async def list_sessions(user: dict = Depends(get_current_user)):
    return {"sessions": interview_service.list_sessions(user["id"])}


@router.post("", status_code=201)
async def create_session(
    data: Optional[CreateSessionRequest] = None,
    user: dict = Depends(get_current_user),
):
    data = data or CreateSessionRequest()
    session = interview_service.create_session(
        user["id"],
        data.interview_type,
        str(data.job_id) if data.job_id else None,
    )
    return {"session": session}


@router.post("/start", status_code=201)
def start_interview(data: StartInterviewRequest, user: dict = Depends(get_current_user)):
    """
    Start a structured AI interview.

    Questions are generated for the role and level (question bank fills any
    gap) and stored numbered 1..N before the session is returned.
    """
    questions = generate_interview_questions(
        data.job_role, data.experience_level, settings.interview_question_count
    )

    metadata = {
        "jobRole": data.job_role,
        "experienceLevel": data.experience_level,
        "questionsAsked": 0,
        "currentQuestionNumber": 1,
        "totalQuestions": len(questions),
        "startTime": interview_service.utc_now_iso(),
        "phase": "interviewing",
    }
    session = interview_service.create_session(
        user["id"],
        data.interview_type,
        str(data.job_id) if data.job_id else None,
        metadata=metadata,
    )
    stored = interview_service.create_questions(str(session["id"]), questions)

    logger.info("Started interview %s with %d questions", session["id"], len(stored))
    return {
        "session": session,
        "firstQuestion": stored[0] if stored else None,
        "totalQuestions": len(stored),
    }


async def _read_answer_payload(request: Request):
    """Parse submit-answer from a form (multipart or urlencoded) or JSON. Returns (payload, audio)."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        audio = form.get("audio")
        payload = {
            key: form.get(key)
            for key in ("sessionId", "questionId", "answerText", "transcriptionConfidence", "audioDuration")
            if form.get(key) is not None
        }
        return payload, audio if isinstance(audio, StarletteUploadFile) else None

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Validation error: Invalid JSON body")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Validation error: Expected a JSON object")
    return payload, None


@router.post("/submit-answer")
async def submit_answer(request: Request, user: dict = Depends(get_current_user)):
    """
    Store the answer to one question and return the next one.

    Answers under 8 words (after the first question) come back with a
    follow-up prompt asking the candidate to elaborate.
    """
    payload, audio = await _read_answer_payload(request)
    try:
        data = SubmitAnswerRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    session_id = str(data.session_id)
    question_id = str(data.question_id)
    _require_session(user["id"], session_id)

    questions = interview_service.get_session_questions(session_id)
    index = next((i for i, q in enumerate(questions) if str(q["id"]) == question_id), -1)
    if index == -1:
        raise HTTPException(status_code=400, detail="Question does not belong to this interview")

    if interview_service.answer_exists(question_id):
        raise HTTPException(status_code=409, detail=ALREADY_ANSWERED)

    audio_name = await save_audio_upload(audio) if audio is not None else None

    try:
        answer = interview_service.create_answer(
            session_id,
            question_id,
            data.answer_text,
            data.transcription_confidence,
            data.audio_duration,
            audio_name,
        )
    except IntegrityError as e:
        if audio_name:
            remove_stored_file(AUDIO_SUBDIR, audio_name)
        if pg_error_code(e) == UNIQUE_VIOLATION:
            raise HTTPException(status_code=409, detail=ALREADY_ANSWERED)
        raise

    interview_service.record_answer_progress(user["id"], session_id, index)

    next_question = questions[index + 1] if index + 1 < len(questions) else None
    elaborate = needs_elaboration(data.answer_text, index + 1)

    return {
        "answer": answer,
        "nextQuestion": next_question,
        "isComplete": next_question is None,
        "progress": {"current": index + 1, "total": len(questions)},
        "needsElaboration": elaborate,
        "followUpPrompt": FOLLOW_UP_PROMPT if elaborate else None,
    }


@router.post("/generate-feedback")
def generate_feedback(data: SessionIdRequest, user: dict = Depends(get_current_user)):
    """Score the interview's answers and mark the session completed."""
    session_id = str(data.session_id)
    session = _require_session(user["id"], session_id)

    if not openai_configured():
        raise HTTPException(status_code=500, detail="AI service not configured")

    qa_pairs = interview_service.get_qa_pairs(session_id)
    if not any(pair.get("answer_text") for pair in qa_pairs):
        raise HTTPException(status_code=400, detail="No answers submitted for this interview")

    metadata = session.get("metadata") or {}
    try:
        feedback = generate_interview_feedback(
            metadata.get("jobRole"), metadata.get("experienceLevel"), qa_pairs
        )
    except AIServiceError as e:
        logger.error("Feedback generation failed for session %s: %s", session_id, e)
        raise HTTPException(status_code=500, detail="Failed to generate interview feedback")

    store_feedback_payload(session_id, user["id"], feedback, kind="qa_feedback")

    updated = interview_service.complete_session(
        user["id"],
        session_id,
        feedback,
        feedback["score"],
        interview_service.session_duration_seconds(metadata),
    )
    return {"feedback": feedback, "session": updated}


@router.get("/{session_id}")
async def get_session(session_id: UUID, user: dict = Depends(get_current_user)):
    session = interview_service.get_session(user["id"], str(session_id))
    if not session:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND)
    return {"session": session}


@router.get("/{session_id}/metadata")
async def get_metadata(session_id: UUID, user: dict = Depends(get_current_user)):
    metadata = interview_service.get_metadata(user["id"], str(session_id))
    if metadata is None:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND)
    return {"metadata": metadata}


@router.patch("/{session_id}/metadata")
async def update_metadata(
    session_id: UUID,
    data: UpdateMetadataRequest,
    user: dict = Depends(get_current_user),
):
    try:
        metadata = interview_service.update_metadata(user["id"], str(session_id), data.to_metadata())
    except NotFoundError:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND)
    return {"metadata": metadata}


@router.patch("/{session_id}")
async def update_session(
    session_id: UUID,
    data: UpdateSessionRequest,
    user: dict = Depends(get_current_user),
):
    updates = data.model_dump(exclude_unset=True, mode="json")
    for key in ("transcript", "status"):
        if updates.get(key) is None:
            updates.pop(key, None)
    if not updates:
        raise HTTPException(status_code=400, detail="No updates provided")

    session = interview_service.update_session(user["id"], str(session_id), updates)
    if not session:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND)
    return {"session": session}


@router.get("/{session_id}/questions")
async def get_questions(session_id: UUID, user: dict = Depends(get_current_user)):
    _require_session(user["id"], str(session_id))
    return {"questions": interview_service.get_session_questions(str(session_id))}


@router.get("/{session_id}/answers")
async def get_answers(session_id: UUID, user: dict = Depends(get_current_user)):
    _require_session(user["id"], str(session_id))
    return {"answers": interview_service.get_session_answers(str(session_id))}
