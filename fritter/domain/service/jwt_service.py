"""Session token domain service."""

import logfire

from fritter.config import AuthSettings
from fritter.util.jwt import (
    SessionClaims,
    SessionTokenError,
    decode_session,
    encode_session,
)

from .base import Service


class JWTService(Service):
    """Issues and reads the ``auth_token`` session cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Sign a session token for a user who just registered or signed in."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return encode_session(user_id, username, self.auth_settings)

    def read_claims(self, token: str) -> SessionClaims:
        """Decode a session token.

        Raises:
            SessionTokenError: If the token is invalid or expired
        """
        return decode_session(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Resolve the cookie to a user id, or None for an anonymous caller.

        A bad cookie counts as signed out; the validation chain turns a
        missing user id into a 403.
        """
        if not token:
            return None

        try:
            return self.read_claims(token).sub
        except SessionTokenError as e:
            logfire.debug("Ignoring session cookie", reason=str(e))
            return None
