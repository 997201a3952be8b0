"""Follow graph domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from fritter.domain.error import ConflictError
from fritter.domain.model.follow import Follow, FollowTarget, TagTarget, UserTarget
from fritter.domain.repository import FollowRepository
from fritter.domain.value import FollowId, TagId, UserId

from .base import Service

ALREADY_FOLLOWED = "You already followed this source."


class FollowService(Service):
    """Domain service for follow edges."""

    def __init__(self, follow_repository: FollowRepository) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
        """
        self.follow_repository = follow_repository

    async def follow(self, follower_id: UserId, target: FollowTarget) -> Follow:
        """Create an edge from a user to a user or tag.

        Args:
            follower_id: Following user
            target: Followed user or tag

        Returns:
            Created follow

        Raises:
            ConflictError: If the user targets themselves or already follows
                the target
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=str(follower_id),
            kind=target.kind,
            target_id=str(target.target_id),
        ):
            if isinstance(target, UserTarget) and target.user_id == follower_id:
                logfire.warn("Self follow attempt", user_id=str(follower_id))
                raise ConflictError("You cannot follow yourself.")

            if await self.follow_repository.find_by_follower_and_target(
                follower_id, target
            ):
                raise ConflictError(ALREADY_FOLLOWED)

            follow = Follow(
                id=FollowId(uuid4()),
                follower_id=follower_id,
                target=target,
                created_at=datetime.now(),
            )
            try:
                saved = await self.follow_repository.save(follow)
            except IntegrityError:
                logfire.warn("Concurrent duplicate follow", follower_id=str(follower_id))
                raise ConflictError(ALREADY_FOLLOWED)

            logfire.info("Follow created", follow_id=str(saved.id))
            return saved

    async def get_follow(self, follow_id: FollowId) -> Follow | None:
        """Get a follow by ID."""
        follow = await self.follow_repository.find_by_id(follow_id)
        if not follow:
            logfire.warn("Follow not found", follow_id=str(follow_id))
        return follow

    async def unfollow(self, follow_id: FollowId) -> None:
        """Delete a follow edge."""
        with logfire.span("follow_service.unfollow", follow_id=str(follow_id)):
            await self.follow_repository.delete(follow_id)
            logfire.info("Follow deleted", follow_id=str(follow_id))

    async def get_following(self, user_id: UserId) -> list[Follow]:
        """Edges leaving a user."""
        return await self.follow_repository.find_by_follower(user_id)

    async def get_followers(self, user_id: UserId) -> list[Follow]:
        """Edges pointing at a user."""
        return await self.follow_repository.find_by_target(UserTarget(user_id=user_id))

    async def get_followed_sources(
        self, user_id: UserId
    ) -> tuple[list[UserId], list[TagId]]:
        """Users and tags a user follows."""
        user_ids: list[UserId] = []
        tag_ids: list[TagId] = []
        for follow in await self.get_following(user_id):
            target = follow.target
            if isinstance(target, UserTarget):
                user_ids.append(target.user_id)
            elif isinstance(target, TagTarget):
                tag_ids.append(target.tag_id)
            else:
                raise TypeError(f"Unknown follow target: {target!r}")
        return user_ids, tag_ids

    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every edge the user takes part in as follower or target."""
        with logfire.span("follow_service.delete_by_user", user_id=str(user_id)):
            await self.follow_repository.delete_by_user(user_id)
