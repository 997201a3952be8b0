"""End-to-end tests for follows, filters and the content feed."""

import pytest

from tests.harness import create_client_fixture, register, sign_in

client = create_client_fixture()


@pytest.fixture
def authors(client):
    """bob and carol post; alice is signed in at the end."""
    register(client, "bob")
    client.post("/api/freets", json={"content": "bob plain"})
    register(client, "carol")
    client.post("/api/freets", json={"content": "carol science", "tags": ["science"]})
    client.post("/api/freets", json={"content": "carol plain"})
    register(client, "alice")


def contents(response):
    assert response.status_code == 200, response.text
    return sorted(f["content"] for f in response.json())


class TestFollow:
    """/api/follow"""

    def test_follow_and_list(self, client, authors):
        response = client.post("/api/follow", json={"source": "bob", "type": "User"})

        assert response.status_code == 201
        assert response.json()["follow"]["following"] == "bob"
        following = client.get("/api/follow", params={"followingOf": "alice"}).json()
        followers = client.get("/api/follow", params={"followersOf": "bob"}).json()
        assert [f["following"] for f in following] == ["bob"]
        assert [f["follower"] for f in followers] == ["alice"]

    @pytest.mark.parametrize(
        "body,code",
        [
            ({"source": "ghost", "type": "User"}, 404),
            ({"source": "bob", "type": "Planet"}, 404),
            ({"source": "alice", "type": "User"}, 409),
        ],
    )
    def test_rejected_follows(self, client, authors, body, code):
        assert client.post("/api/follow", json=body).status_code == code

    def test_duplicate_follow(self, client, authors):
        client.post("/api/follow", json={"source": "science", "type": "Tag"})

        response = client.post("/api/follow", json={"source": "science", "type": "Tag"})

        assert response.status_code == 409
        assert response.json() == {"error": "You already followed this source."}

    def test_follow_body_checked_after_session(self, client, authors):
        client.cookies.clear()

        assert client.post("/api/follow").status_code == 403
        assert client.post("/api/follow", json={"source": 5, "type": 5}).status_code == 403

    def test_follow_source_must_be_text(self, client, authors):
        response = client.post("/api/follow", json={"source": ["bob"], "type": "User"})

        assert response.status_code == 400
        assert response.json() == {"error": "source must be a string."}

    def test_list_needs_exactly_one_parameter(self, client):
        assert client.get("/api/follow").status_code == 400

    def test_unfollow_only_own(self, client, authors):
        follow = client.post("/api/follow", json={"source": "bob", "type": "User"}).json()
        sign_in(client, "carol")

        assert client.delete(f"/api/follow/{follow['follow']['id']}").status_code == 403

        sign_in(client, "alice")
        assert client.delete(f"/api/follow/{follow['follow']['id']}").status_code == 200


class TestFilters:
    """/api/filters"""

    def test_create_list_update_delete(self, client, authors):
        response = client.post(
            "/api/filters", json={"name": "friends", "usernames": ["bob"], "tags": []}
        )
        assert response.status_code == 201
        filter_id = response.json()["filter"]["id"]

        single = client.get("/api/filters", params={"name": "friends"}).json()
        assert single["usernames"] == ["bob"]

        response = client.patch(
            f"/api/filters/{filter_id}",
            json={"name": "friends", "usernames": ["carol"], "tags": ["science"]},
        )
        assert response.status_code == 200
        assert response.json()["filter"]["usernames"] == ["carol"]

        assert client.delete(f"/api/filters/{filter_id}").status_code == 200
        assert client.get("/api/filters").json() == []

    def test_name_unique_per_owner(self, client, authors):
        client.post("/api/filters", json={"name": "mine"})

        assert client.post("/api/filters", json={"name": "mine"}).status_code == 409

        sign_in(client, "bob")
        assert client.post("/api/filters", json={"name": "mine"}).status_code == 201

    def test_validation_order(self, client, authors):
        bad_name = client.post("/api/filters", json={"name": "", "usernames": ["ghost"]})
        unknown_user = client.post(
            "/api/filters", json={"name": "x", "usernames": ["ghost"], "tags": ["b a d"]}
        )
        bad_tag = client.post("/api/filters", json={"name": "x", "tags": ["b a d"]})

        assert bad_name.status_code == 400
        assert unknown_user.status_code == 404
        assert bad_tag.status_code == 400

    def test_other_users_filter(self, client, authors):
        created = client.post("/api/filters", json={"name": "mine"}).json()
        sign_in(client, "bob")

        response = client.delete(f"/api/filters/{created['filter']['id']}")

        assert response.status_code == 403

    def test_filter_body_checked_last(self, client, authors):
        created = client.post("/api/filters", json={"name": "mine"}).json()
        url = f"/api/filters/{created['filter']['id']}"
        bad = {"name": "mine", "usernames": "bob"}

        assert client.patch("/api/filters/nope", json=bad).status_code == 404
        assert client.patch(url, json=bad).status_code == 400

        sign_in(client, "bob")
        assert client.patch(url, json=bad).status_code == 403

        client.cookies.clear()
        assert client.post("/api/filters").status_code == 403
        assert client.patch(url).status_code == 403


class TestContent:
    """/api/content"""

    def test_requires_session(self, client):
        assert client.get("/api/content").status_code == 403

    def test_explicit_sources(self, client, authors):
        response = client.get("/api/content", params={"usernames": "bob", "tags": "science"})

        assert contents(response) == ["bob plain", "carol science"]

    def test_explicit_sources_in_body(self, client, authors):
        response = client.post("/api/content", json={"usernames": "bob", "tags": ""})

        assert contents(response) == ["bob plain"]

    def test_partial_sources(self, client, authors):
        response = client.get("/api/content", params={"usernames": "bob"})

        assert response.status_code == 400
        assert response.json() == {"error": "Provided parameters must be nonempty."}

    def test_saved_filter(self, client, authors):
        client.post("/api/filters", json={"name": "sci", "tags": ["science"]})

        response = client.get("/api/content", params={"name": "sci"})

        assert contents(response) == ["carol science"]

    def test_following_feed(self, client, authors):
        client.post("/api/follow", json={"source": "bob", "type": "User"})
        client.post("/api/follow", json={"source": "science", "type": "Tag"})

        assert contents(client.get("/api/content")) == ["bob plain", "carol science"]

    def test_filter_name_ignored_beside_sources(self, client, authors):
        response = client.get(
            "/api/content", params={"usernames": "bob", "tags": "", "name": "nosuch"}
        )

        assert contents(response) == ["bob plain"]


class TestAccountDeletion:
    """Deleting an account cleans up everything around it."""

    def test_cascade(self, client, authors):
        client.post("/api/filters", json={"name": "pals", "usernames": ["bob", "carol"]})
        client.post("/api/follow", json={"source": "bob", "type": "User"})
        sign_in(client, "bob")
        freet_id = client.get("/api/freets", params={"author": "bob"}).json()[0]["id"]
        client.post("/api/follow", json={"source": "carol", "type": "User"})
        sign_in(client, "carol")
        carol_freet = client.get("/api/freets", params={"author": "carol"}).json()[0]["id"]
        sign_in(client, "bob")
        client.post(f"/api/credibility/{carol_freet}/votes", json={"credible": True})

        assert client.delete("/api/users").status_code == 200

        assert client.get(f"/api/freets/{freet_id}").status_code == 404
        assert client.get(f"/api/credibility/{carol_freet}/votes").json() == []
        assert client.get("/api/follow", params={"followingOf": "alice"}).json() == []
        assert client.get("/api/follow", params={"followersOf": "carol"}).json() == []
        sign_in(client, "alice")
        assert client.get("/api/filters", params={"name": "pals"}).json()["usernames"] == ["carol"]
