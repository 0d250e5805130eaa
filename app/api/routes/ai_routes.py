"""
AI Routes (all require auth)

POST /ai/analyze-interview - Evaluate a voice interview transcript and complete the session
POST /ai/analyze - Evaluate a transcript without a session (legacy)
POST /ai/realtime-token - Create an ephemeral OpenAI realtime session
"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, HTTPException, Depends

from app.core.auth import get_current_user
from app.core.config import get_settings
from app.core.errors import AIServiceError
from app.schemas.schemas import AnalyzeInterviewRequest, TranscriptRequest, RealtimeTokenRequest
from app.services import interview_service
from app.services.document_store import store_feedback_payload
from app.services.interview_ai import analyze_transcript, build_interview_instructions
from app.services.llm_client import openai_configured

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/ai", tags=["AI"])

REALTIME_VOICE = "alloy"
REALTIME_TEMPERATURE = 0.8
REALTIME_MAX_OUTPUT_TOKENS = 4096
REALTIME_TIMEOUT_SECONDS = 15.0


def _require_openai() -> None:
    if not openai_configured():
        raise HTTPException(status_code=500, detail="AI service not configured")


@router.post("/analyze-interview")
def analyze_interview(data: AnalyzeInterviewRequest, user: dict = Depends(get_current_user)):
    """
    Evaluate the transcript and complete the session with the result.
    Role and level default to what the session metadata recorded.
    """
    _require_openai()
    session_id = str(data.session_id)

    metadata = interview_service.get_metadata(user["id"], session_id)
    if metadata is None:
        raise HTTPException(status_code=404, detail=interview_service.SESSION_NOT_FOUND)

    role = data.job_role or metadata.get("jobRole")
    level = data.experience_level or metadata.get("experienceLevel")
    if not role or not level:
        raise HTTPException(status_code=400, detail="Job role and experience level are required for analysis")

    try:
        feedback = analyze_transcript(data.transcript, role, level)
    except AIServiceError as e:
        logger.error("Transcript analysis failed for session %s: %s", session_id, e)
        raise HTTPException(status_code=500, detail="Failed to generate interview feedback")

    store_feedback_payload(session_id, user["id"], feedback, kind="transcript_analysis")
    interview_service.complete_session(
        user["id"],
        session_id,
        feedback,
        feedback["overall_score"],
        interview_service.session_duration_seconds(metadata),
        transcript=data.transcript,
    )
    return feedback


@router.post("/analyze")
def analyze(data: TranscriptRequest, user: dict = Depends(get_current_user)):
    _require_openai()
    try:
        return analyze_transcript(data.transcript)
    except AIServiceError as e:
        logger.error("Transcript analysis failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to analyze interview")


@router.post("/realtime-token")
async def realtime_token(data: Optional[RealtimeTokenRequest] = None, user: dict = Depends(get_current_user)):
    """
    Request an ephemeral realtime session from OpenAI for the voice client.

    Instructions come from the phase plus session metadata when both are
    given, else the caller's text, else the intro phase.
    """
    _require_openai()
    data = data or RealtimeTokenRequest()
    phase = data.phase.value if data.phase else None

    if data.session_id and phase:
        metadata = interview_service.get_metadata(user["id"], str(data.session_id))
        instructions = build_interview_instructions(phase, metadata)
    elif data.instructions:
        instructions = data.instructions
    else:
        instructions = build_interview_instructions(phase or "intro")

    payload = {
        "model": settings.openai_realtime_model,
        "voice": REALTIME_VOICE,
        "instructions": instructions,
        "temperature": REALTIME_TEMPERATURE,
        "max_response_output_tokens": REALTIME_MAX_OUTPUT_TOKENS,
    }
    try:
        async with httpx.AsyncClient(timeout=REALTIME_TIMEOUT_SECONDS) as client:
            response = await client.post(
                f"{settings.openai_base_url.rstrip('/')}/realtime/sessions",
                headers={"Authorization": f"Bearer {settings.openai_api_key}"},
                json=payload,
            )
    except httpx.HTTPError as e:
        logger.error("Realtime session request failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to request realtime session")

    if response.status_code >= 400:
        logger.error("Realtime token error %s: %s", response.status_code, response.text)
        raise HTTPException(status_code=500, detail="Failed to request realtime session")

    return response.json()
