"""
Auth Service Module

Registration, credential checks and token issuance. Token verification
lives in the ``require_auth`` guard at the HTTP boundary.
"""

import logging
from typing import Optional, Dict, Any
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from blogcms.extensions import db
from blogcms.models.user import User
from blogcms.utils.auth import create_token, check_password_hash, hash_password
from blogcms.utils.errors import ValidationError, ConflictError, UnauthorizedError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def register(username: str, email: str, password: str, confirm_password: str) -> Dict[str, Any]:
    """
    Create a user account.

    Raises:
        ValidationError: password and confirmation differ
        ConflictError: username or email already taken
    """
    if password != confirm_password:
        raise ValidationError("Password and confirmation do not match")

    username = username.strip()
    email = email.strip().lower()

    existing = User.query.filter(or_(User.username == username, User.email == email)).first()
    if existing:
        if existing.username == username:
            raise ConflictError("Username already exists")
        raise ConflictError("Email already registered")

    user = User(username=username, email=email, password=hash_password(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # lost a race with another registration for the same name or email
        db.session.rollback()
        raise ConflictError("Username or email already registered")

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user.to_dict()


def validate_user(username: str, password: str) -> Optional[Dict[str, Any]]:
    """Return the user view (no password) when the credentials match, else None."""
    user = User.query.filter_by(username=username).first()
    if user and check_password_hash(user.password, password):
        return user.to_dict()
    return None


def login(username: str, password: str) -> Dict[str, Any]:
    # Same message for unknown user and bad password
    user = validate_user(username, password)
    if not user:
        logger.warning("Failed login for username %r", username)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    token = create_token(user["id"], user["username"])
    return {
        "token": token,
        "user": {"id": user["id"], "username": user["username"], "email": user["email"]},
    }
