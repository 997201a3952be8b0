"""End-to-end tests for accounts and sessions."""

from tests.harness import create_client_fixture, register, sign_in

client = create_client_fixture()


class TestRegister:
    """POST /api/users"""

    def test_register_signs_in(self, client):
        response = client.post("/api/users", json={"username": "alice", "password": "pw"})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == (
            "Your account was created successfully. You have been logged in as alice"
        )
        assert body["user"]["username"] == "alice"
        assert "password" not in str(body)

        session = client.get("/api/users/session").json()
        assert session["user"]["username"] == "alice"

    def test_duplicate_username_ignores_case(self, client):
        register(client, "alice")
        client.cookies.clear()

        response = client.post("/api/users", json={"username": "ALICE", "password": "pw"})

        assert response.status_code == 409
        assert response.json() == {"error": "An account with this username already exists."}

    def test_invalid_username(self, client):
        response = client.post("/api/users", json={"username": "a b", "password": "pw"})

        assert response.status_code == 400
        assert response.json()["error"] == "Username must be a nonempty alphanumeric string."

    def test_invalid_password(self, client):
        response = client.post("/api/users", json={"username": "alice", "password": ""})

        assert response.status_code == 400


class TestSession:
    """/api/users/session"""

    def test_anonymous_session(self, client):
        response = client.get("/api/users/session")

        assert response.status_code == 200
        assert response.json()["user"] is None

    def test_sign_in_and_out(self, client):
        register(client, "alice", "pw")
        sign_in(client, "alice", "pw")

        response = client.delete("/api/users/session")

        assert response.status_code == 200
        assert response.json() == {"message": "You have been logged out successfully."}
        assert client.get("/api/users/session").json()["user"] is None

    def test_sign_out_without_session(self, client):
        response = client.delete("/api/users/session")

        assert response.status_code == 403

    def test_wrong_password(self, client):
        register(client, "alice", "pw")
        client.cookies.clear()

        response = client.post(
            "/api/users/session", json={"username": "alice", "password": "nope"}
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Invalid user login credentials provided."}

    def test_missing_credentials(self, client):
        response = client.post("/api/users/session", json={"username": "alice"})

        assert response.status_code == 400

    def test_garbage_cookie_is_anonymous(self, client):
        client.cookies.set("auth_token", "not-a-jwt")

        assert client.get("/api/users/session").json()["user"] is None
        assert client.post("/api/freets", json={"content": "hi"}).status_code == 403


class TestProfile:
    """PATCH and DELETE /api/users"""

    def test_rename(self, client):
        register(client, "alice")

        response = client.patch("/api/users", json={"username": "alicia"})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alicia"
        assert client.get("/api/users/session").json()["user"]["username"] == "alicia"

    def test_rename_to_taken_name(self, client):
        register(client, "bob")
        register(client, "alice")

        response = client.patch("/api/users", json={"username": "Bob"})

        assert response.status_code == 409

    def test_update_requires_session(self, client):
        assert client.patch("/api/users", json={"username": "x"}).status_code == 403

    def test_update_body_checked_after_session(self, client):
        assert client.patch("/api/users", json={"username": 5}).status_code == 403

        register(client, "alice")
        response = client.patch("/api/users", json={"username": 5})

        assert response.status_code == 400
        assert response.json()["error"] == "Username must be a nonempty alphanumeric string."

    def test_delete_account(self, client):
        register(client, "alice")

        response = client.delete("/api/users")

        assert response.status_code == 200
        assert client.get("/api/users/session").json()["user"] is None
        assert client.get("/api/freets", params={"author": "alice"}).status_code == 404
