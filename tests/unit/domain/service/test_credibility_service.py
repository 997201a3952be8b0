"""Unit tests for CredibilityService."""

from uuid import uuid4

import pytest

from fritter.domain.error import ConflictError, ContentTooLongError, NotFoundError
from fritter.domain.service import CredibilityService
from fritter.domain.value import FreetId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestVotes:
    """Tests for adding and removing credibility votes."""

    @pytest.mark.asyncio
    async def test_add_vote_records_side(self, unit_env):
        """Credible votes land in upvotes, the rest in downvotes."""
        # Arrange
        service = await unit_env.get(CredibilityService)
        freet_id = FreetId(uuid4())
        alice, bob = UserId(uuid4()), UserId(uuid4())

        # Act
        await service.add_vote(freet_id, alice, credible=True)
        await service.add_vote(freet_id, bob, credible=False)

        # Assert
        credibility = (await service.get_credibility([freet_id]))[freet_id]
        assert credibility.upvotes == frozenset({alice})
        assert credibility.downvotes == frozenset({bob})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("second", [True, False])
    async def test_second_vote_conflicts_either_way(self, unit_env, second):
        """A user gets one vote per freet regardless of which side."""
        service = await unit_env.get(CredibilityService)
        freet_id, user_id = FreetId(uuid4()), UserId(uuid4())
        await service.add_vote(freet_id, user_id, credible=True)

        with pytest.raises(ConflictError, match="already issued a vote"):
            await service.add_vote(freet_id, user_id, credible=second)

    @pytest.mark.asyncio
    async def test_remove_vote_without_vote_is_not_found(self, unit_env):
        service = await unit_env.get(CredibilityService)

        with pytest.raises(NotFoundError, match="not issued a vote"):
            await service.remove_vote(FreetId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_remove_vote_succeeds_once(self, unit_env):
        """Withdrawing twice should fail the second time."""
        service = await unit_env.get(CredibilityService)
        freet_id, user_id = FreetId(uuid4()), UserId(uuid4())
        await service.add_vote(freet_id, user_id, credible=False)

        await service.remove_vote(freet_id, user_id)

        with pytest.raises(NotFoundError):
            await service.remove_vote(freet_id, user_id)

    @pytest.mark.asyncio
    async def test_vote_sets_stay_disjoint(self, unit_env):
        """Switching sides goes through remove then add and never double counts."""
        service = await unit_env.get(CredibilityService)
        freet_id = FreetId(uuid4())
        users = [UserId(uuid4()) for _ in range(3)]

        for user_id in users:
            await service.add_vote(freet_id, user_id, credible=True)
        await service.remove_vote(freet_id, users[0])
        await service.add_vote(freet_id, users[0], credible=False)
        for user_id in users:
            with pytest.raises(ConflictError):
                await service.add_vote(freet_id, user_id, credible=False)

        credibility = (await service.get_credibility([freet_id]))[freet_id]
        assert not credibility.upvotes & credibility.downvotes
        assert credibility.upvotes == frozenset(users[1:])
        assert credibility.downvotes == frozenset({users[0]})

    @pytest.mark.asyncio
    async def test_get_credibility_has_entry_for_every_freet(self, unit_env):
        service = await unit_env.get(CredibilityService)
        freet_ids = [FreetId(uuid4()), FreetId(uuid4())]

        credibility = await service.get_credibility(freet_ids)

        assert set(credibility) == set(freet_ids)
        assert all(not c.upvotes and not c.links for c in credibility.values())


class TestLinks:
    """Tests for reference links."""

    @pytest.mark.parametrize(
        "link",
        [
            "https://www.mit.edu/research",
            "http://example.com",
            "https://a.b/c/d",
            "see https://example.com",
        ],
    )
    def test_validate_link_accepts_web_urls(self, link):
        service = CredibilityService(vote_repository=None, reference_link_repository=None)
        assert service.validate_link(link) == link

    @pytest.mark.parametrize("link", [None, "", "ftp://example.com", "example.com"])
    def test_validate_link_rejects_other_values(self, link):
        service = CredibilityService(vote_repository=None, reference_link_repository=None)
        with pytest.raises(ContentTooLongError, match="Link must be a valid URL."):
            service.validate_link(link)

    @pytest.mark.asyncio
    async def test_links_keep_insertion_order(self, unit_env):
        service = await unit_env.get(CredibilityService)
        freet_id, user_id = FreetId(uuid4()), UserId(uuid4())

        first = await service.add_link(freet_id, user_id, "https://first.org")
        second = await service.add_link(freet_id, user_id, "https://second.org")

        links = await service.list_links(freet_id)
        assert [link.id for link in links] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_delete_by_issuer_removes_votes_and_links(self, unit_env):
        service = await unit_env.get(CredibilityService)
        freet_id = FreetId(uuid4())
        leaver, stayer = UserId(uuid4()), UserId(uuid4())
        await service.add_vote(freet_id, leaver, credible=True)
        await service.add_vote(freet_id, stayer, credible=True)
        await service.add_link(freet_id, leaver, "https://leaver.org")

        await service.delete_by_issuer(leaver)

        credibility = (await service.get_credibility([freet_id]))[freet_id]
        assert credibility.upvotes == frozenset({stayer})
        assert credibility.links == []
