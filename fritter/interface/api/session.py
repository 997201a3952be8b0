"""Session cookie helpers."""

from fastapi import Response

from fritter.config import AuthSettings, Settings

AUTH_COOKIE = "auth_token"


def set_session_cookie(
    response: Response, token: str, settings: Settings, auth_settings: AuthSettings
) -> None:
    """Attach the session token to the response."""
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=auth_settings.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session token from the client."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
