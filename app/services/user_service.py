"""
User accounts - lookup and registration.
"""

import uuid
from typing import Optional

from app.db.postgres import execute_raw_sql, fetch_one


def get_user_by_email(email: str) -> Optional[dict]:
    return fetch_one(
        "SELECT id, email, password_hash FROM users WHERE email = :email",
        {"email": email.lower()},
    )


def create_user(email: str, password_hash: str) -> dict:
    """
    Insert a user and return {id, email}.
    A duplicate email surfaces as a unique_violation IntegrityError.
    """
    user_id = str(uuid.uuid4())
    email = email.lower()
    execute_raw_sql(
        "INSERT INTO users (id, email, password_hash) VALUES (:id, :email, :password_hash)",
        {"id": user_id, "email": email, "password_hash": password_hash},
    )
    return {"id": user_id, "email": email}
