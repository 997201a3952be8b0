"""Unit tests for UserService."""

import pytest

from fritter.domain.error import ConflictError
from fritter.domain.service import UserService
from fritter.domain.value import Username
from tests.harness import create_env_fixture, make_user

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestRegister:
    """Tests for account registration."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await make_user(user_service, "alice", "s3cret")

        # Assert
        assert user.username.root == "alice"
        assert user.password_hash != "s3cret"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("variant", ["alice", "ALICE", "Alice"])
    async def test_username_conflict_ignores_case(self, unit_env, variant):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice")

        with pytest.raises(ConflictError, match="already exists"):
            await make_user(user_service, variant)

    @pytest.mark.asyncio
    async def test_lookup_by_username_ignores_case(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service, "Alice")

        found = await user_service.get_user_by_username(Username("aLiCe"))

        assert found.id == user.id


class TestAuthenticate:
    """Tests for credential checks."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service, "alice", "s3cret")

        assert (await user_service.authenticate("alice", "s3cret")).id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password",
        [("alice", "wrong"), ("bob", "s3cret"), ("", "s3cret"), ("a b", "s3cret")],
    )
    async def test_bad_credentials_return_none(self, unit_env, username, password):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice", "s3cret")

        assert await user_service.authenticate(username, password) is None


class TestUpdateUser:
    """Tests for profile changes."""

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_conflicts(self, unit_env):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice")
        bob = await make_user(user_service, "bob")

        with pytest.raises(ConflictError):
            await user_service.update_user(bob, username=Username("ALICE"))

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service, "alice", "old")

        await user_service.update_user(user, password="new")

        assert await user_service.authenticate("alice", "old") is None
        assert await user_service.authenticate("alice", "new") is not None
