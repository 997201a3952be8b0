"""Unit tests for vote and reference link use cases."""

import pytest

from fritter.application.usecase.credibility import (
    AddLinkRequest,
    AddLinkUseCase,
    AddVoteRequest,
    AddVoteUseCase,
    RemoveLinkRequest,
    RemoveLinkUseCase,
)
from fritter.domain.error import (
    ContentTooLongError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from fritter.domain.service import FreetService, UserService
from tests.harness import create_env_fixture, make_user

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestAddVote:
    """Tests for AddVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_without_side_is_invalid(self, unit_env):
        user_service = await unit_env.get(UserService)
        freet_service = await unit_env.get(FreetService)
        use_case = await unit_env.get(AddVoteUseCase)
        alice = await make_user(user_service, "alice")
        freet = await freet_service.create_freet(alice.id, "hello")

        with pytest.raises(InvalidInputError, match="whether the freet is credible"):
            await use_case.execute(
                AddVoteRequest(user_id=str(alice.id), freet_id=str(freet.id))
            )

    @pytest.mark.asyncio
    async def test_author_may_vote_on_own_freet(self, unit_env):
        user_service = await unit_env.get(UserService)
        freet_service = await unit_env.get(FreetService)
        use_case = await unit_env.get(AddVoteUseCase)
        alice = await make_user(user_service, "alice")
        freet = await freet_service.create_freet(alice.id, "hello")

        response = await use_case.execute(
            AddVoteRequest(user_id=str(alice.id), freet_id=str(freet.id), credible=True)
        )

        assert response.vote.issuer == "alice"
        assert response.vote.credible is True


class TestLinks:
    """Tests for AddLinkUseCase and RemoveLinkUseCase."""

    @pytest.mark.asyncio
    async def test_invalid_link_is_too_long_error(self, unit_env):
        user_service = await unit_env.get(UserService)
        freet_service = await unit_env.get(FreetService)
        use_case = await unit_env.get(AddLinkUseCase)
        alice = await make_user(user_service, "alice")
        freet = await freet_service.create_freet(alice.id, "hello")

        with pytest.raises(ContentTooLongError, match="valid URL"):
            await use_case.execute(
                AddLinkRequest(user_id=str(alice.id), freet_id=str(freet.id), link="nope")
            )

    @pytest.mark.asyncio
    async def test_remove_link_checks(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        freet_service = await unit_env.get(FreetService)
        add_link = await unit_env.get(AddLinkUseCase)
        remove_link = await unit_env.get(RemoveLinkUseCase)
        alice = await make_user(user_service, "alice")
        bob = await make_user(user_service, "bob")
        freet = await freet_service.create_freet(alice.id, "hello")
        other = await freet_service.create_freet(alice.id, "other")
        added = await add_link.execute(
            AddLinkRequest(
                user_id=str(bob.id), freet_id=str(freet.id), link="https://bob.org"
            )
        )
        link_id = added.ref_link.id

        # Act / Assert
        with pytest.raises(NotFoundError, match="Reference link with ID"):
            await remove_link.execute(
                RemoveLinkRequest(user_id=str(bob.id), freet_id=str(other.id), link_id=link_id)
            )
        with pytest.raises(ForbiddenError, match="other users' reference links"):
            await remove_link.execute(
                RemoveLinkRequest(user_id=str(alice.id), freet_id=str(freet.id), link_id=link_id)
            )

        response = await remove_link.execute(
            RemoveLinkRequest(user_id=str(bob.id), freet_id=str(freet.id), link_id=link_id)
        )
        assert response.message == "Your reference link was deleted successfully."
        assert (await freet_service.get_freet(freet.id)).links == []
