"""Unit tests for FreetService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from fritter.domain.error import ContentTooLongError, InvalidInputError
from fritter.domain.model import Freet
from fritter.domain.repository import FreetRepository
from fritter.domain.service import CredibilityService, FreetService, TagService
from fritter.domain.value import FreetId, TagName, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def save_freet(repo, author_id, content, tag_ids=(), minutes_ago=0) -> Freet:
    """Store a freet with a controlled modification date."""
    stamp = datetime.now() - timedelta(minutes=minutes_ago)
    freet = Freet(
        id=FreetId(uuid4()),
        author_id=author_id,
        content=content,
        date_created=stamp,
        date_modified=stamp,
        tag_ids=frozenset(tag_ids),
    )
    return await repo.save(freet)


class TestValidateContent:
    """Tests for validate_content."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_blank_content_is_invalid(self, unit_env, content):
        service = await unit_env.get(FreetService)
        with pytest.raises(InvalidInputError, match="at least one character"):
            service.validate_content(content)

    @pytest.mark.asyncio
    async def test_content_over_limit_is_too_long(self, unit_env):
        service = await unit_env.get(FreetService)
        with pytest.raises(ContentTooLongError, match="no more than 140 characters"):
            service.validate_content("x" * 141)

    @pytest.mark.asyncio
    async def test_content_at_limit_is_accepted(self, unit_env):
        service = await unit_env.get(FreetService)
        assert service.validate_content("x" * 140) == "x" * 140


class TestCreateAndUpdate:
    """Tests for create_freet and update_freet."""

    @pytest.mark.asyncio
    async def test_create_attaches_tags(self, unit_env):
        # Arrange
        service = await unit_env.get(FreetService)
        tag_service = await unit_env.get(TagService)
        author_id = UserId(uuid4())

        # Act
        freet = await service.create_freet(
            author_id, "Fusion breakthrough", [TagName("physics"), TagName("news")]
        )

        # Assert
        tags = await tag_service.get_tags_by_ids(list(freet.tag_ids))
        assert {t.name.root for t in tags.values()} == {"physics", "news"}
        assert freet.date_created == freet.date_modified

    @pytest.mark.asyncio
    async def test_update_replaces_tags_and_refreshes_date(self, unit_env):
        service = await unit_env.get(FreetService)
        tag_service = await unit_env.get(TagService)
        freet = await service.create_freet(UserId(uuid4()), "hello", [TagName("old")])

        updated = await service.update_freet(freet, tag_names=[TagName("new")])

        tags = await tag_service.get_tags_by_ids(list(updated.tag_ids))
        assert [t.name.root for t in tags.values()] == ["new"]
        assert updated.content == "hello"
        assert updated.date_modified >= freet.date_modified

    @pytest.mark.asyncio
    async def test_get_freet_is_hydrated(self, unit_env):
        service = await unit_env.get(FreetService)
        credibility = await unit_env.get(CredibilityService)
        freet = await service.create_freet(UserId(uuid4()), "hello")
        voter = UserId(uuid4())
        await credibility.add_vote(freet.id, voter, credible=True)
        await credibility.add_link(freet.id, voter, "https://source.org")

        loaded = await service.get_freet(freet.id)

        assert loaded.upvotes == frozenset({voter})
        assert [link.link for link in loaded.links] == ["https://source.org"]


class TestFilterByAuthorsOrTags:
    """Tests for the union query behind filters and the feed."""

    @pytest.mark.asyncio
    async def test_union_without_duplicates_newest_first(self, unit_env):
        # Arrange
        service = await unit_env.get(FreetService)
        tag_service = await unit_env.get(TagService)
        repo = await unit_env.get(FreetRepository)
        alice, bob, carol = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        news = await tag_service.find_or_create(TagName("news"))

        by_alice = await save_freet(repo, alice, "alice only", minutes_ago=30)
        tagged = await save_freet(repo, bob, "bob news", [news.id], minutes_ago=20)
        both = await save_freet(repo, alice, "alice news", [news.id], minutes_ago=10)
        await save_freet(repo, carol, "unrelated", minutes_ago=5)

        # Act
        freets = await service.filter_by_authors_or_tags([alice], [news.id])

        # Assert
        assert [f.id for f in freets] == [both.id, tagged.id, by_alice.id]

    @pytest.mark.asyncio
    async def test_no_sources_matches_nothing(self, unit_env):
        service = await unit_env.get(FreetService)
        repo = await unit_env.get(FreetRepository)
        await save_freet(repo, UserId(uuid4()), "anything")

        assert await service.filter_by_authors_or_tags([], []) == []


class TestDelete:
    """Tests for deletion cascades."""

    @pytest.mark.asyncio
    async def test_delete_freet_removes_votes_and_links(self, unit_env):
        service = await unit_env.get(FreetService)
        credibility = await unit_env.get(CredibilityService)
        freet = await service.create_freet(UserId(uuid4()), "doomed")
        voter = UserId(uuid4())
        await credibility.add_vote(freet.id, voter, credible=False)
        await credibility.add_link(freet.id, voter, "https://source.org")

        await service.delete_freet(freet.id)

        assert await service.get_freet(freet.id) is None
        assert await credibility.list_votes(freet.id) == []
        assert await credibility.list_links(freet.id) == []

    @pytest.mark.asyncio
    async def test_delete_by_author_keeps_other_authors(self, unit_env):
        service = await unit_env.get(FreetService)
        leaver, stayer = UserId(uuid4()), UserId(uuid4())
        await service.create_freet(leaver, "one")
        await service.create_freet(leaver, "two")
        kept = await service.create_freet(stayer, "three")

        await service.delete_freets_by_author(leaver)

        assert [f.id for f in await service.list_freets()] == [kept.id]
