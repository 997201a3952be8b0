"""Unit tests for JWTService."""

import jwt
import pytest

from fritter.config import AuthSettings
from fritter.domain.service import JWTService
from fritter.util.jwt import SessionTokenError

SECRET = "fritter-test-secret-of-at-least-32-bytes"
SETTINGS = AuthSettings(jwt_secret=SECRET)


class TestSessionTokens:
    """Tests for issuing and reading the session cookie."""

    def test_token_resolves_to_user_id(self):
        """A freshly issued token should read back as its user."""
        service = JWTService(SETTINGS)

        token = service.create_token("user-1", "alice")

        assert service.get_user_id_from_token(token) == "user-1"
        assert service.read_claims(token).username == "alice"

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbled_token_is_anonymous(self, token):
        """Anything that is not a valid token reads as signed out."""
        assert JWTService(SETTINGS).get_user_id_from_token(token) is None

    def test_token_signed_with_other_secret_is_rejected(self):
        """A token from another secret must not authenticate."""
        other = AuthSettings(jwt_secret="another-secret-of-at-least-32-bytes")
        forged = JWTService(other).create_token("user-1", "alice")

        service = JWTService(SETTINGS)

        with pytest.raises(SessionTokenError):
            service.read_claims(forged)
        assert service.get_user_id_from_token(forged) is None

    def test_expired_token_is_rejected(self):
        """Expiry is enforced on decode."""
        expired = JWTService(AuthSettings(jwt_secret=SECRET, jwt_expiry_days=-1))
        token = expired.create_token("user-1", "alice")

        with pytest.raises(SessionTokenError, match="expired"):
            JWTService(SETTINGS).read_claims(token)

    def test_token_without_subject_is_rejected(self):
        """Tokens must carry the user id claim."""
        token = jwt.encode({"username": "alice"}, SECRET, algorithm="HS256")

        with pytest.raises(SessionTokenError):
            JWTService(SETTINGS).read_claims(token)
