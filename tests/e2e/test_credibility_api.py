"""End-to-end tests for credibility votes and reference links."""

import pytest

from tests.harness import create_client_fixture, register, sign_in

client = create_client_fixture()


@pytest.fixture
def freet(client):
    """A freet by alice, with bob signed in."""
    register(client, "alice")
    response = client.post("/api/freets", json={"content": "The sky is green"})
    register(client, "bob")
    return response.json()["freet"]


class TestVotes:
    """/api/credibility/{freet_id}/votes"""

    def test_vote_and_list(self, client, freet):
        response = client.post(f"/api/credibility/{freet['id']}/votes", json={"credible": False})

        assert response.status_code == 201
        assert response.json()["message"] == "Your vote was issued successfully."
        votes = client.get(f"/api/credibility/{freet['id']}/votes").json()
        assert [(v["issuer"], v["credible"]) for v in votes] == [("bob", False)]
        assert client.get(f"/api/freets/{freet['id']}").json()["downvotes"] == ["bob"]

    def test_second_vote_conflicts(self, client, freet):
        url = f"/api/credibility/{freet['id']}/votes"
        client.post(url, json={"credible": True})

        response = client.post(url, json={"credible": False})

        assert response.status_code == 409
        assert response.json() == {"error": "You have already issued a vote for this freet."}

    def test_change_vote(self, client, freet):
        url = f"/api/credibility/{freet['id']}/votes"
        client.post(url, json={"credible": True})

        assert client.delete(url).status_code == 200
        assert client.delete(url).status_code == 404
        assert client.post(url, json={"credible": False}).status_code == 201

        view = client.get(f"/api/freets/{freet['id']}").json()
        assert view["upvotes"] == []
        assert view["downvotes"] == ["bob"]

    def test_missing_side(self, client, freet):
        response = client.post(f"/api/credibility/{freet['id']}/votes", json={})
        assert response.status_code == 400

    def test_requires_session(self, client, freet):
        client.cookies.clear()
        response = client.post(f"/api/credibility/{freet['id']}/votes", json={"credible": True})
        assert response.status_code == 403

    @pytest.mark.parametrize("body", [{"credible": "maybe"}, None])
    def test_session_checked_before_body(self, client, freet, body):
        client.cookies.clear()

        response = client.post(f"/api/credibility/{freet['id']}/votes", json=body)

        assert response.status_code == 403

    def test_freet_checked_before_body(self, client, freet):
        response = client.post("/api/credibility/nope/votes", json={"credible": "maybe"})

        assert response.status_code == 404
        assert response.json() == {"error": "Freet with freet ID nope does not exist."}

    def test_credible_must_be_boolean(self, client, freet):
        url = f"/api/credibility/{freet['id']}/votes"

        response = client.post(url, json={"credible": "maybe"})

        assert response.status_code == 400
        assert response.json() == {"error": "credible must be true or false."}
        assert client.get(url).json() == []


class TestLinks:
    """/api/credibility/{freet_id}/links"""

    def test_add_and_remove(self, client, freet):
        url = f"/api/credibility/{freet['id']}/links"

        response = client.post(url, json={"link": "https://www.nasa.gov/sky"})

        assert response.status_code == 201
        link = response.json()["refLink"]
        assert link["issuer"] == "bob"
        assert [ref["link"] for ref in client.get(url).json()] == ["https://www.nasa.gov/sky"]

        sign_in(client, "alice")
        assert client.delete(f"{url}/{link['id']}").status_code == 403

        sign_in(client, "bob")
        response = client.delete(f"{url}/{link['id']}")
        assert response.status_code == 200
        assert client.get(url).json() == []

    def test_invalid_link(self, client, freet):
        response = client.post(
            f"/api/credibility/{freet['id']}/links", json={"link": "not a url"}
        )

        assert response.status_code == 413
        assert response.json() == {"error": "Link must be a valid URL."}

    def test_link_body_checked_last(self, client, freet):
        url = f"/api/credibility/{freet['id']}/links"

        assert client.post("/api/credibility/nope/links", json={"link": 7}).status_code == 404
        assert client.post(url, json={"link": 7}).status_code == 400

        client.cookies.clear()
        assert client.post(url, json={"link": 7}).status_code == 403
        assert client.post(url).status_code == 403

    def test_link_inside_text(self, client, freet):
        response = client.post(
            f"/api/credibility/{freet['id']}/links", json={"link": "see https://example.com"}
        )

        assert response.status_code == 201

    def test_unknown_link(self, client, freet):
        response = client.delete(f"/api/credibility/{freet['id']}/links/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Reference link with ID nope does not exist."}

    def test_deleting_freet_drops_links(self, client, freet):
        client.post(f"/api/credibility/{freet['id']}/links", json={"link": "https://x.org"})
        sign_in(client, "alice")

        client.delete(f"/api/freets/{freet['id']}")

        assert client.get(f"/api/credibility/{freet['id']}/links").status_code == 404
