"""Unit tests for the error to status code mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from fritter.domain.error import (
    ConflictError,
    ContentTooLongError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    StorageUnavailableError,
    UnauthenticatedError,
)
from fritter.interface.api.errors import register_error_handlers, status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (UnauthenticatedError(), 403),
            (ForbiddenError("no"), 403),
            (NotFoundError("Freet", "1"), 404),
            (ConflictError("taken"), 409),
            (ContentTooLongError("long"), 413),
            (InvalidInputError("bad"), 400),
            (StorageUnavailableError(), 503),
            (DomainError("unknown"), 500),
        ],
    )
    def test_each_error_has_one_status(self, error, code):
        assert status_for(error) == code

    def test_not_found_default_message(self):
        assert str(NotFoundError("Freet", "abc")) == "Freet with ID abc does not exist."


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/forbidden")
    async def forbidden():
        raise ForbiddenError("Cannot modify other users' freets.")

    @app.get("/database")
    async def database():
        raise OperationalError("SELECT 1", None, Exception("connection refused"))

    @app.get("/number/{value}")
    async def number(value: int):
        return {"value": value}

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


class TestHandlers:
    """Tests for the installed exception handlers."""

    def test_domain_error_body(self, client):
        response = client.get("/forbidden")

        assert response.status_code == 403
        assert response.json() == {"error": "Cannot modify other users' freets."}

    def test_storage_error_is_503(self, client):
        response = client.get("/database")

        assert response.status_code == 503
        assert response.json() == {"error": "The data store is temporarily unavailable."}

    def test_malformed_request_is_400(self, client):
        response = client.get("/number/abc")

        assert response.status_code == 400
        assert "error" in response.json()
