"""
Pydantic Schemas - Request/Response Validation

All API request schemas in one file for simplicity. The SPA sends camelCase
for interview payloads, so those models accept both alias and field names.
"""

import math

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List, Any, Dict
from uuid import UUID
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class InterviewPhase(str, Enum):
    intro = "intro"
    collecting_info = "collecting_info"
    interviewing = "interviewing"
    completed = "completed"


class InterviewStatus(str, Enum):
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"
    paused = "paused"


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class CredentialsRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class AuthUser(BaseModel):
    id: str
    email: Optional[str] = None


class AuthResponse(BaseModel):
    token: str
    user: AuthUser


# ============================================================
# JOB / COMPANY SCHEMAS
# ============================================================

class SaveJobRequest(BaseModel):
    notes: Optional[str] = None


class ApplyJobRequest(BaseModel):
    resume_id: Optional[UUID] = None
    cover_letter: Optional[str] = None


# ============================================================
# INTERVIEW SCHEMAS
# ============================================================

class CreateSessionRequest(CamelModel):
    interview_type: str = Field("AI Voice Interview", min_length=1, alias="interviewType")
    job_id: Optional[UUID] = Field(None, alias="jobId")


class UpdateSessionRequest(BaseModel):
    transcript: Optional[List[str]] = None
    status: Optional[InterviewStatus] = None
    feedback: Optional[Dict[str, Any]] = None
    score: Optional[float] = Field(None, ge=0, le=100)
    duration: Optional[int] = Field(None, ge=0)


class UpdateMetadataRequest(CamelModel):
    job_role: Optional[str] = Field(None, alias="jobRole")
    experience_level: Optional[str] = Field(None, alias="experienceLevel")
    phase: Optional[InterviewPhase] = None
    questions_asked: Optional[int] = Field(None, alias="questionsAsked")

    def to_metadata(self) -> dict:
        """Only the fields the client actually sent, in stored (camelCase) form."""
        updates = self.model_dump(by_alias=True, exclude_unset=True)
        if "phase" in updates and updates["phase"] is not None:
            updates["phase"] = InterviewPhase(updates["phase"]).value
        return updates


class StartInterviewRequest(CamelModel):
    interview_type: str = Field("AI Interview", alias="interviewType")
    job_id: Optional[UUID] = Field(None, alias="jobId")
    job_role: str = Field(..., min_length=1, alias="jobRole")
    experience_level: str = Field(..., min_length=1, alias="experienceLevel")


class SubmitAnswerRequest(CamelModel):
    session_id: UUID = Field(..., alias="sessionId")
    question_id: UUID = Field(..., alias="questionId")
    answer_text: str = Field(..., min_length=1, alias="answerText")
    transcription_confidence: Optional[float] = Field(None, ge=0, le=1, alias="transcriptionConfidence")
    audio_duration: Optional[int] = Field(None, ge=0, alias="audioDuration")

    @field_validator("transcription_confidence", mode="before")
    @classmethod
    def coerce_confidence(cls, v):
        if v is None or v == "":
            return None
        try:
            value = float(v)
        except (TypeError, ValueError, OverflowError):
            return None
        return value if math.isfinite(value) else None

    @field_validator("audio_duration", mode="before")
    @classmethod
    def coerce_duration(cls, v):
        if v is None or v == "":
            return None
        try:
            return int(float(v))
        except (TypeError, ValueError, OverflowError):
            return None


class SessionIdRequest(CamelModel):
    session_id: UUID = Field(..., alias="sessionId")


# ============================================================
# AI SCHEMAS
# ============================================================

class AnalyzeInterviewRequest(CamelModel):
    session_id: UUID = Field(..., alias="sessionId")
    transcript: List[str] = Field(..., min_length=1)
    job_role: Optional[str] = Field(None, alias="jobRole")
    experience_level: Optional[str] = Field(None, alias="experienceLevel")


class TranscriptRequest(CamelModel):
    transcript: List[str] = Field(..., min_length=1)
    session_id: Optional[str] = Field(None, alias="sessionId")


class RealtimeTokenRequest(CamelModel):
    instructions: Optional[str] = None
    session_id: Optional[UUID] = Field(None, alias="sessionId")
    phase: Optional[InterviewPhase] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
