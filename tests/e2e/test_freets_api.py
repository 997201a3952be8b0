"""End-to-end tests for freets and tags."""

from tests.harness import create_client_fixture, register, sign_in

client = create_client_fixture()

MISSING_ID = "8f14e45f-ceea-467f-a8f6-6a1b2c3d4e5f"


def post_freet(client, content, tags=None):
    response = client.post("/api/freets", json={"content": content, "tags": tags or []})
    assert response.status_code == 201, response.text
    return response.json()["freet"]


class TestCreateFreet:
    """POST /api/freets"""

    def test_create(self, client):
        register(client, "alice")

        response = client.post(
            "/api/freets", json={"content": "Hello Fritter", "tags": ["news"]}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Your freet was created successfully."
        assert body["freet"]["author"] == "alice"
        assert body["freet"]["tags"] == ["news"]

    def test_requires_session(self, client):
        response = client.post("/api/freets", json={"content": "Hello"})

        assert response.status_code == 403
        assert response.json() == {"error": "You must be logged in to complete this action."}

    def test_blank_content(self, client):
        register(client, "alice")
        assert client.post("/api/freets", json={"content": "  "}).status_code == 400

    def test_content_too_long(self, client):
        register(client, "alice")

        response = client.post("/api/freets", json={"content": "x" * 141})

        assert response.status_code == 413
        assert response.json() == {
            "error": "Freet content must be no more than 140 characters."
        }


class TestReadFreets:
    """GET /api/freets"""

    def test_list_newest_first(self, client):
        register(client, "alice")
        post_freet(client, "first")
        post_freet(client, "second")

        contents = [f["content"] for f in client.get("/api/freets").json()]

        assert contents == ["second", "first"]

    def test_list_by_author(self, client):
        register(client, "alice")
        post_freet(client, "from alice")
        register(client, "bob")
        post_freet(client, "from bob")

        response = client.get("/api/freets", params={"author": "Bob"})

        assert [f["content"] for f in response.json()] == ["from bob"]

    def test_unknown_author(self, client):
        response = client.get("/api/freets", params={"author": "ghost"})

        assert response.status_code == 404
        assert response.json() == {"error": "A user with username ghost does not exist."}

    def test_get_one_and_missing(self, client):
        register(client, "alice")
        freet = post_freet(client, "hello")

        assert client.get(f"/api/freets/{freet['id']}").json()["content"] == "hello"
        assert client.get(f"/api/freets/{MISSING_ID}").status_code == 404
        assert client.get("/api/freets/not-a-uuid").status_code == 404


class TestModifyFreet:
    """PATCH and DELETE /api/freets/{freet_id}"""

    def test_author_edits(self, client):
        register(client, "alice")
        freet = post_freet(client, "draft", ["old"])

        response = client.patch(f"/api/freets/{freet['id']}", json={"content": "final"})

        assert response.status_code == 200
        assert response.json()["freet"]["content"] == "final"
        assert response.json()["freet"]["tags"] == ["old"]

    def test_validation_order(self, client):
        """Session, then existence, then authorship, then payload."""
        register(client, "alice")
        freet = post_freet(client, "mine")
        register(client, "bob")
        too_long = {"content": "x" * 500}

        assert client.patch(f"/api/freets/{MISSING_ID}", json=too_long).status_code == 404
        assert client.patch(f"/api/freets/{freet['id']}", json=too_long).status_code == 403

        client.cookies.clear()
        assert client.patch(f"/api/freets/{MISSING_ID}", json=too_long).status_code == 403

        sign_in(client, "alice")
        assert client.patch(f"/api/freets/{freet['id']}", json=too_long).status_code == 413

    def test_body_shape_checked_last(self, client):
        """A wrongly typed or missing body does not mask earlier checks."""
        register(client, "alice")
        freet = post_freet(client, "mine")
        register(client, "bob")
        bad_tags = {"tags": "news"}

        assert client.patch("/api/freets/nope", json=bad_tags).status_code == 404
        assert client.patch(f"/api/freets/{freet['id']}", json=bad_tags).status_code == 403

        client.cookies.clear()
        assert client.patch(f"/api/freets/{freet['id']}").status_code == 403
        assert client.post("/api/freets").status_code == 403

        sign_in(client, "alice")
        response = client.patch(f"/api/freets/{freet['id']}", json=bad_tags)
        assert response.status_code == 400
        assert response.json() == {"error": "tags must be a list of strings."}

        response = client.post("/api/freets", json={"content": 42})
        assert response.status_code == 400
        assert response.json() == {"error": "content must be a string."}

    def test_delete(self, client):
        register(client, "alice")
        freet = post_freet(client, "bye")

        response = client.delete(f"/api/freets/{freet['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Your freet was deleted successfully."}
        assert client.get(f"/api/freets/{freet['id']}").status_code == 404


class TestTags:
    """GET /api/tags"""

    def test_tag_registry_and_taglist(self, client):
        register(client, "alice")
        freet = post_freet(client, "tagged", ["science", "art", "science"])
        post_freet(client, "more", ["math"])

        names = [t["name"] for t in client.get("/api/tags").json()]
        taglist = client.get(f"/api/tags/{freet['id']}").json()

        assert names == ["art", "math", "science"]
        assert taglist == {"freet_id": freet["id"], "tags": ["art", "science"]}

    def test_bad_tag(self, client):
        register(client, "alice")

        response = client.post("/api/freets", json={"content": "hi", "tags": ["a-b"]})

        assert response.status_code == 400
        assert response.json() == {"error": "Tag must be a nonempty alphanumeric string."}
