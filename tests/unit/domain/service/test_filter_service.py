"""Unit tests for FilterService."""

from uuid import uuid4

import pytest

from fritter.domain.error import ConflictError
from fritter.domain.service import FilterService
from fritter.domain.value import FilterName, TagId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateFilter:
    """Tests for filter creation and naming."""

    @pytest.mark.asyncio
    async def test_name_unique_per_owner(self, unit_env):
        """Two owners may share a name, one owner may not reuse it."""
        # Arrange
        service = await unit_env.get(FilterService)
        x, y = UserId(uuid4()), UserId(uuid4())
        await service.create_filter(x, FilterName("science"), [], [])

        # Act / Assert
        with pytest.raises(ConflictError, match="already in use"):
            await service.create_filter(x, FilterName("science"), [], [])

        other = await service.create_filter(y, FilterName("science"), [], [])
        assert other.owner_id == y

    @pytest.mark.asyncio
    async def test_list_filters_sorted_by_name(self, unit_env):
        service = await unit_env.get(FilterService)
        owner = UserId(uuid4())
        for name in ("zoo", "art", "mid"):
            await service.create_filter(owner, FilterName(name), [], [])

        filters = await service.list_filters(owner)

        assert [f.name.root for f in filters] == ["art", "mid", "zoo"]

    @pytest.mark.asyncio
    async def test_update_may_keep_its_own_name(self, unit_env):
        service = await unit_env.get(FilterService)
        owner, tag = UserId(uuid4()), TagId(uuid4())
        filter_ = await service.create_filter(owner, FilterName("news"), [], [])

        updated = await service.update_filter(filter_, FilterName("news"), [], [tag])

        assert updated.tag_ids == frozenset({tag})

    @pytest.mark.asyncio
    async def test_update_to_sibling_name_conflicts(self, unit_env):
        service = await unit_env.get(FilterService)
        owner = UserId(uuid4())
        await service.create_filter(owner, FilterName("news"), [], [])
        other = await service.create_filter(owner, FilterName("sports"), [], [])

        with pytest.raises(ConflictError):
            await service.update_filter(other, FilterName("news"), [], [])


class TestPurgeUser:
    """Tests for removing a user from all filters."""

    @pytest.mark.asyncio
    async def test_purge_drops_owned_filters_and_references(self, unit_env):
        # Arrange
        service = await unit_env.get(FilterService)
        leaver, stayer, friend = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        owned = await service.create_filter(leaver, FilterName("mine"), [stayer], [])
        shared = await service.create_filter(
            stayer, FilterName("friends"), [leaver, friend], []
        )

        # Act
        await service.purge_user(leaver)

        # Assert
        assert await service.get_filter(owned.id) is None
        remaining = await service.get_filter(shared.id)
        assert remaining.user_ids == frozenset({friend})
