from datetime import UTC, datetime, timedelta

import jwt

from src.auth.identity import Identity
from src.config.settings import settings


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be decoded or lacks a subject."""

    pass


def create_access_token(identity: Identity, expires_delta: timedelta | None = None) -> str:
    """Create a signed token for an identity (used by the CLI and tests)."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": identity.user_id,
        "exp": datetime.now(UTC) + expires_delta,
    }
    if identity.email:
        to_encode["email"] = identity.email
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.PyJWTError as e:
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Token has no subject")
    return Identity(user_id=str(user_id), email=payload.get("email"))
