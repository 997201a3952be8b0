"""Unit tests for filter use cases."""

import pytest

from fritter.application.usecase.filter import (
    CreateFilterRequest,
    CreateFilterUseCase,
    ListFiltersRequest,
    ListFiltersUseCase,
    UpdateFilterRequest,
    UpdateFilterUseCase,
)
from fritter.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from fritter.domain.repository import TagRepository
from fritter.domain.service import UserService
from tests.harness import create_env_fixture, make_user

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def create(unit_env, user, name, usernames=(), tags=()):
    use_case = await unit_env.get(CreateFilterUseCase)
    return await use_case.execute(
        CreateFilterRequest(
            user_id=str(user.id), name=name, usernames=list(usernames), tags=list(tags)
        )
    )


class TestCreateFilterValidationOrder:
    """Each check only fires when every earlier one passed."""

    @pytest.mark.asyncio
    async def test_bad_name_wins_over_unknown_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice")

        with pytest.raises(InvalidInputError, match="Filter name"):
            await create(unit_env, alice, "bad name", usernames=["ghost"])

    @pytest.mark.asyncio
    async def test_name_conflict_wins_over_unknown_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice")
        await create(unit_env, alice, "science")

        with pytest.raises(ConflictError):
            await create(unit_env, alice, "science", usernames=["ghost"])

    @pytest.mark.asyncio
    async def test_unknown_user_wins_over_bad_tag(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice")

        with pytest.raises(NotFoundError, match="existing users"):
            await create(unit_env, alice, "science", usernames=["ghost"], tags=["b a d"])

    @pytest.mark.asyncio
    async def test_bad_tag_creates_nothing(self, unit_env):
        user_service = await unit_env.get(UserService)
        tag_repo = await unit_env.get(TagRepository)
        alice = await make_user(user_service, "alice")

        with pytest.raises(InvalidInputError, match="Tag must be"):
            await create(unit_env, alice, "science", tags=["ok", ""])

        assert tag_repo.count() == 0


class TestCreateFilter:
    """Tests for the filter view."""

    @pytest.mark.asyncio
    async def test_view_uses_stored_usernames(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice")
        await make_user(user_service, "Bob")

        # Act
        response = await create(
            unit_env, alice, "friends", usernames=["bob"], tags=["news"]
        )

        # Assert
        assert response.message == "Filter was created successfully."
        assert response.filter.creator == "alice"
        assert response.filter.usernames == ["Bob"]
        assert response.filter.tags == ["news"]


class TestListFilters:
    """Tests for ListFiltersUseCase."""

    @pytest.mark.asyncio
    async def test_list_all_or_one(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(ListFiltersUseCase)
        alice = await make_user(user_service, "alice")
        await create(unit_env, alice, "zeta")
        await create(unit_env, alice, "alpha")

        everything = await use_case.execute(ListFiltersRequest(user_id=str(alice.id)))
        single = await use_case.execute(
            ListFiltersRequest(user_id=str(alice.id), name="zeta")
        )

        assert [f.name for f in everything] == ["alpha", "zeta"]
        assert single.name == "zeta"

    @pytest.mark.asyncio
    async def test_empty_and_unknown_names(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(ListFiltersUseCase)
        alice = await make_user(user_service, "alice")

        with pytest.raises(InvalidInputError, match="must be nonempty"):
            await use_case.execute(ListFiltersRequest(user_id=str(alice.id), name=""))
        with pytest.raises(NotFoundError, match="You do not have a filter with name x"):
            await use_case.execute(ListFiltersRequest(user_id=str(alice.id), name="x"))


class TestUpdateFilter:
    """Tests for UpdateFilterUseCase."""

    @pytest.mark.asyncio
    async def test_other_owner_forbidden_before_payload(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdateFilterUseCase)
        alice = await make_user(user_service, "alice")
        bob = await make_user(user_service, "bob")
        created = await create(unit_env, alice, "mine")

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateFilterRequest(
                    user_id=str(bob.id), filter_id=created.filter.id, name="bad name"
                )
            )

    @pytest.mark.asyncio
    async def test_replaces_contents(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdateFilterUseCase)
        alice = await make_user(user_service, "alice")
        await make_user(user_service, "bob")
        created = await create(unit_env, alice, "mine", tags=["old"])

        response = await use_case.execute(
            UpdateFilterRequest(
                user_id=str(alice.id),
                filter_id=created.filter.id,
                name="renamed",
                usernames=["bob"],
            )
        )

        assert response.filter.name == "renamed"
        assert response.filter.usernames == ["bob"]
        assert response.filter.tags == []
