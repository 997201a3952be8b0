"""Unit tests for the content query use case."""

import pytest
import pytest_asyncio

from fritter.application.usecase.content import QueryContentRequest, QueryContentUseCase
from fritter.domain.error import InvalidInputError, NotFoundError
from fritter.domain.model import TagTarget, UserTarget
from fritter.domain.service import (
    FilterService,
    FollowService,
    FreetService,
    TagService,
    UserService,
)
from fritter.domain.value import FilterName, TagName
from tests.harness import create_env_fixture, make_user

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def world(unit_env):
    """Three users with a handful of freets."""
    user_service = await unit_env.get(UserService)
    freet_service = await unit_env.get(FreetService)

    alice = await make_user(user_service, "alice")
    bob = await make_user(user_service, "bob")
    carol = await make_user(user_service, "carol")

    await freet_service.create_freet(bob.id, "bob plain")
    await freet_service.create_freet(carol.id, "carol science", [TagName("science")])
    await freet_service.create_freet(carol.id, "carol plain")
    return alice, bob, carol


async def query(unit_env, user, **params):
    use_case = await unit_env.get(QueryContentUseCase)
    views = await use_case.execute(QueryContentRequest(user_id=str(user.id), **params))
    return sorted(v.content for v in views)


class TestExplicitSources:
    """usernames + tags mode."""

    @pytest.mark.asyncio
    async def test_union_of_users_and_tags(self, unit_env, world):
        alice, _, _ = world

        contents = await query(unit_env, alice, usernames="bob", tags="science")

        assert contents == ["bob plain", "carol science"]

    @pytest.mark.asyncio
    async def test_empty_lists_match_nothing(self, unit_env, world):
        alice, _, _ = world
        assert await query(unit_env, alice, usernames="", tags="") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"usernames": "bob"}, {"tags": "science"}])
    async def test_both_parameters_required(self, unit_env, world, params):
        alice, _, _ = world
        with pytest.raises(InvalidInputError, match="must be nonempty"):
            await query(unit_env, alice, **params)

    @pytest.mark.asyncio
    async def test_unknown_username(self, unit_env, world):
        alice, _, _ = world
        with pytest.raises(NotFoundError):
            await query(unit_env, alice, usernames="bob,ghost", tags="")

    @pytest.mark.asyncio
    async def test_unknown_tag_is_registered(self, unit_env, world):
        alice, _, _ = world
        tag_service = await unit_env.get(TagService)

        assert await query(unit_env, alice, usernames="", tags="brandnew") == []
        assert await tag_service.get_tag_by_name(TagName("brandnew")) is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["nosuch", ""])
    async def test_filter_name_ignored_beside_sources(self, unit_env, world, name):
        """Explicit sources take precedence over a filter name, even a bad one."""
        alice, _, _ = world

        contents = await query(unit_env, alice, usernames="bob", tags="", name=name)

        assert contents == ["bob plain"]


class TestFilterMode:
    """Saved filter mode."""

    @pytest.mark.asyncio
    async def test_filter_sources(self, unit_env, world):
        alice, bob, _ = world
        filter_service = await unit_env.get(FilterService)
        tag_service = await unit_env.get(TagService)
        science = await tag_service.find_or_create(TagName("science"))
        await filter_service.create_filter(alice.id, FilterName("mine"), [bob.id], [science.id])

        contents = await query(unit_env, alice, name="mine")

        assert contents == ["bob plain", "carol science"]

    @pytest.mark.asyncio
    async def test_unknown_filter(self, unit_env, world):
        alice, _, _ = world
        with pytest.raises(NotFoundError, match="filter with name nope"):
            await query(unit_env, alice, name="nope")


class TestFollowingMode:
    """Default feed from the follow graph."""

    @pytest.mark.asyncio
    async def test_feed_from_follows(self, unit_env, world):
        alice, bob, _ = world
        follow_service = await unit_env.get(FollowService)
        tag_service = await unit_env.get(TagService)
        science = await tag_service.find_or_create(TagName("science"))
        await follow_service.follow(alice.id, UserTarget(user_id=bob.id))
        await follow_service.follow(alice.id, TagTarget(tag_id=science.id))

        assert await query(unit_env, alice) == ["bob plain", "carol science"]

    @pytest.mark.asyncio
    async def test_empty_feed_without_follows(self, unit_env, world):
        alice, _, _ = world
        assert await query(unit_env, alice) == []
