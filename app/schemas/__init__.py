"""
Schemas module - Request/Response schemas for API endpoints.
"""
from app.schemas.schemas import (
    CredentialsRequest,
    AuthResponse,
    StartInterviewRequest,
    SubmitAnswerRequest,
    MessageResponse,
)

__all__ = [
    "CredentialsRequest",
    "AuthResponse",
    "StartInterviewRequest",
    "SubmitAnswerRequest",
    "MessageResponse",
]
