"""Response views.

Views replace stored identifiers with usernames and tag names. Each builder
method resolves all references of a response with one batch lookup per
entity type. A reference whose target no longer exists is left out of the
view and logged.
"""

from datetime import datetime
from typing import Iterable, Sequence

import logfire
from pydantic import BaseModel

from fritter.domain.model import (
    Filter,
    Follow,
    Freet,
    ReferenceLink,
    Tag,
    TagTarget,
    User,
    UserTarget,
    Vote,
)
from fritter.domain.service import TagService, UserService
from fritter.domain.value import TagId, UserId


class UserView(BaseModel):
    """Public view of an account."""

    id: str
    username: str
    date_joined: datetime


class TagView(BaseModel):
    """Public view of a tag."""

    id: str
    name: str


class ReferenceLinkView(BaseModel):
    """Public view of a reference link."""

    id: str
    freet_id: str
    issuer: str
    link: str
    date_created: datetime


class VoteView(BaseModel):
    """Public view of a credibility vote."""

    id: str
    freet_id: str
    issuer: str
    credible: bool


class FreetView(BaseModel):
    """Public view of a freet."""

    id: str
    author: str
    content: str
    date_created: datetime
    date_modified: datetime
    tags: list[str]
    upvotes: list[str]
    downvotes: list[str]
    links: list[ReferenceLinkView]


class TaglistView(BaseModel):
    """Tags attached to one freet."""

    freet_id: str
    tags: list[str]


class FollowView(BaseModel):
    """Public view of a follow edge."""

    id: str
    follower: str
    following: str
    type: str


class FilterView(BaseModel):
    """Public view of a saved filter."""

    id: str
    creator: str
    name: str
    usernames: list[str]
    tags: list[str]


def user_view(user: User) -> UserView:
    return UserView(id=str(user.id), username=user.username.root, date_joined=user.date_joined)


def tag_view(tag: Tag) -> TagView:
    return TagView(id=str(tag.id), name=tag.name.root)


class ViewBuilder:
    """Builds response views with batched reference resolution."""

    def __init__(self, user_service: UserService, tag_service: TagService) -> None:
        self.user_service = user_service
        self.tag_service = tag_service

    async def _lookup(
        self, user_ids: Iterable[UserId] = (), tag_ids: Iterable[TagId] = ()
    ) -> tuple[dict[UserId, str], dict[TagId, str]]:
        users = await self.user_service.get_users_by_ids(list(set(user_ids)))
        tags = await self.tag_service.get_tags_by_ids(list(set(tag_ids)))
        return (
            {uid: user.username.root for uid, user in users.items()},
            {tid: tag.name.root for tid, tag in tags.items()},
        )

    @staticmethod
    def _names(ids: Iterable, names: dict, kind: str, owner: str) -> list[str]:
        resolved = []
        for ref in ids:
            if ref in names:
                resolved.append(names[ref])
            else:
                logfire.warn("Dangling reference", kind=kind, id=str(ref), owner=owner)
        return sorted(resolved)

    async def freets(self, freets: Sequence[Freet]) -> list[FreetView]:
        """Views of freets in the given order.

        Freets whose author no longer exists are left out.
        """
        user_ids: set[UserId] = set()
        tag_ids: set[TagId] = set()
        for freet in freets:
            user_ids.add(freet.author_id)
            user_ids |= freet.upvotes | freet.downvotes
            user_ids |= {link.issuer_id for link in freet.links}
            tag_ids |= freet.tag_ids
        usernames, tag_names = await self._lookup(user_ids, tag_ids)

        views = []
        for freet in freets:
            owner = str(freet.id)
            author = usernames.get(freet.author_id)
            if author is None:
                logfire.warn("Freet without author", freet_id=owner)
                continue
            views.append(
                FreetView(
                    id=owner,
                    author=author,
                    content=freet.content,
                    date_created=freet.date_created,
                    date_modified=freet.date_modified,
                    tags=self._names(freet.tag_ids, tag_names, "tag", owner),
                    upvotes=self._names(freet.upvotes, usernames, "user", owner),
                    downvotes=self._names(freet.downvotes, usernames, "user", owner),
                    links=self._links(freet.links, usernames),
                )
            )
        return views

    async def freet(self, freet: Freet) -> FreetView | None:
        """View of one freet, None if its author no longer exists."""
        views = await self.freets([freet])
        return views[0] if views else None

    async def taglist(self, freet: Freet) -> TaglistView:
        """Tags of one freet."""
        _, tag_names = await self._lookup(tag_ids=freet.tag_ids)
        return TaglistView(
            freet_id=str(freet.id),
            tags=self._names(freet.tag_ids, tag_names, "tag", str(freet.id)),
        )

    def _links(
        self, links: Sequence[ReferenceLink], usernames: dict[UserId, str]
    ) -> list[ReferenceLinkView]:
        views = []
        for link in links:
            issuer = usernames.get(link.issuer_id)
            if issuer is None:
                logfire.warn("Reference link without issuer", link_id=str(link.id))
                continue
            views.append(
                ReferenceLinkView(
                    id=str(link.id),
                    freet_id=str(link.freet_id),
                    issuer=issuer,
                    link=link.link,
                    date_created=link.date_created,
                )
            )
        return views

    async def links(self, links: Sequence[ReferenceLink]) -> list[ReferenceLinkView]:
        """Views of reference links."""
        usernames, _ = await self._lookup(user_ids=[link.issuer_id for link in links])
        return self._links(links, usernames)

    async def votes(self, votes: Sequence[Vote]) -> list[VoteView]:
        """Views of credibility votes."""
        usernames, _ = await self._lookup(user_ids=[vote.issuer_id for vote in votes])
        views = []
        for vote in votes:
            issuer = usernames.get(vote.issuer_id)
            if issuer is None:
                logfire.warn("Vote without issuer", vote_id=str(vote.id))
                continue
            views.append(
                VoteView(
                    id=str(vote.id),
                    freet_id=str(vote.freet_id),
                    issuer=issuer,
                    credible=vote.credible,
                )
            )
        return views

    async def follows(self, follows: Sequence[Follow]) -> list[FollowView]:
        """Views of follow edges."""
        user_ids: set[UserId] = set()
        tag_ids: set[TagId] = set()
        for follow in follows:
            user_ids.add(follow.follower_id)
            if isinstance(follow.target, UserTarget):
                user_ids.add(follow.target.user_id)
            elif isinstance(follow.target, TagTarget):
                tag_ids.add(follow.target.tag_id)
        usernames, tag_names = await self._lookup(user_ids, tag_ids)

        views = []
        for follow in follows:
            target = follow.target
            if isinstance(target, UserTarget):
                following = usernames.get(target.user_id)
            elif isinstance(target, TagTarget):
                following = tag_names.get(target.tag_id)
            else:
                raise TypeError(f"Unknown follow target: {target!r}")

            follower = usernames.get(follow.follower_id)
            if follower is None or following is None:
                logfire.warn("Dangling follow", follow_id=str(follow.id))
                continue
            views.append(
                FollowView(
                    id=str(follow.id),
                    follower=follower,
                    following=following,
                    type=target.kind,
                )
            )
        return views

    async def follow(self, follow: Follow) -> FollowView | None:
        views = await self.follows([follow])
        return views[0] if views else None

    async def filters(self, filters: Sequence[Filter]) -> list[FilterView]:
        """Views of saved filters."""
        user_ids: set[UserId] = set()
        tag_ids: set[TagId] = set()
        for filter_ in filters:
            user_ids.add(filter_.owner_id)
            user_ids |= filter_.user_ids
            tag_ids |= filter_.tag_ids
        usernames, tag_names = await self._lookup(user_ids, tag_ids)

        views = []
        for filter_ in filters:
            owner = str(filter_.id)
            creator = usernames.get(filter_.owner_id)
            if creator is None:
                logfire.warn("Filter without owner", filter_id=owner)
                continue
            views.append(
                FilterView(
                    id=owner,
                    creator=creator,
                    name=filter_.name.root,
                    usernames=self._names(filter_.user_ids, usernames, "user", owner),
                    tags=self._names(filter_.tag_ids, tag_names, "tag", owner),
                )
            )
        return views

    async def filter(self, filter_: Filter) -> FilterView | None:
        views = await self.filters([filter_])
        return views[0] if views else None
