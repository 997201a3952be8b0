"""Signed session cookie tokens."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from fritter.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class SessionClaims(BaseModel):
    """Claims carried by the ``auth_token`` cookie."""

    sub: str
    username: str
    iat: datetime
    exp: datetime


class SessionTokenError(Exception):
    """The session cookie could not be trusted."""


def encode_session(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a session token for ``user_id``.

    The username is informational only, requests resolve the user by ``sub``.
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session(token: str, settings: AuthSettings) -> SessionClaims:
    """Check the signature and expiry of a session token.

    Raises:
        SessionTokenError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise SessionTokenError("Session has expired") from e
    except jwt.InvalidTokenError as e:
        raise SessionTokenError(f"Invalid session token: {e}") from e

    try:
        return SessionClaims.model_validate(claims)
    except ValidationError as e:
        raise SessionTokenError("Session token is missing claims") from e
