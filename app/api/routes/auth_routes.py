"""
Authentication Routes

POST /auth/register - Register new user (sets auth cookie)
POST /auth/login - Login (sets auth cookie)
POST /auth/logout - Clear auth cookie
GET /auth/check - Validate current session
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, HTTPException, Depends, Response
from sqlalchemy.exc import IntegrityError

from app.core.auth import (
    hash_password, verify_password, create_access_token, get_current_user,
    set_auth_cookie, clear_auth_cookie
)
from app.core.errors import UNIQUE_VIOLATION, pg_error_code
from app.schemas.schemas import CredentialsRequest, AuthResponse
from app.services import user_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(request: CredentialsRequest, response: Response):
    """
    Register a new user account.

    The token is returned in the body and also set as an httpOnly cookie.
    """
    if user_service.get_user_by_email(request.email):
        raise HTTPException(status_code=409, detail="Email already registered")

    try:
        user = user_service.create_user(request.email, hash_password(request.password))
    except IntegrityError as e:
        if pg_error_code(e) == UNIQUE_VIOLATION:
            raise HTTPException(status_code=409, detail="Email already registered")
        raise

    token = create_access_token(user["id"], user["email"])
    set_auth_cookie(response, token)
    return {"token": token, "user": user}


@router.post("/login", response_model=AuthResponse)
async def login(request: CredentialsRequest, response: Response):
    """Login and receive a JWT (body + cookie)."""
    user = user_service.get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    user_id = str(user["id"])
    token = create_access_token(user_id, user["email"])
    set_auth_cookie(response, token)
    return {"token": token, "user": {"id": user_id, "email": user["email"]}}


@router.post("/logout")
async def logout(response: Response):
    clear_auth_cookie(response)
    return {"success": True}


@router.get("/check")
async def check_session(user: dict = Depends(get_current_user)):
    """Session validation for the SPA."""
    return {"authenticated": True, "user": user}


@router.get("/me")
async def get_me(user: dict = Depends(get_current_user)):
    return {"user": user}
