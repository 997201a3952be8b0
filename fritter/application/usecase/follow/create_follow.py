"""Create follow use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import body_text, require_user
from fritter.application.view import FollowView, ViewBuilder
from fritter.domain.error import NotFoundError
from fritter.domain.model import FollowTarget, TagTarget, UserTarget
from fritter.domain.service import FollowService, TagService, UserService
from fritter.domain.value import FollowTargetKind, TagName
from fritter.domain.value.types import is_word

from .list_follows import find_user


class CreateFollowRequest(BaseModel):
    """Create follow request."""

    user_id: str | None
    source: Any = None  # Username or tag name
    type: Any = None  # "User" or "Tag"


class CreateFollowResponse(BaseModel):
    """Create follow response."""

    message: str = "Your follow was created successfully."
    follow: FollowView


class CreateFollowUseCase:
    """Use case for following a user or a tag."""

    def __init__(
        self,
        user_service: UserService,
        tag_service: TagService,
        follow_service: FollowService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.tag_service = tag_service
        self.follow_service = follow_service
        self.view_builder = view_builder

    async def _resolve_target(self, kind: FollowTargetKind, source: str) -> FollowTarget:
        if kind is FollowTargetKind.USER:
            user = await find_user(self.user_service, source)
            return UserTarget(user_id=user.id)

        if not is_word(source):
            raise NotFoundError("Tag", source, "Tag must be a nonempty alphanumeric string.")
        tag = await self.tag_service.find_or_create(TagName(source))
        return TagTarget(tag_id=tag.id)

    async def execute(self, request: CreateFollowRequest) -> CreateFollowResponse:
        """Execute create follow flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the type is unknown or the source does not resolve
            ConflictError: If the caller targets themselves or already
                follows the source
        """
        user = await require_user(self.user_service, request.user_id)

        if request.type not in [kind.value for kind in FollowTargetKind]:
            raise NotFoundError(
                "FollowType", str(request.type), "Source type must be either User or Tag."
            )
        kind = FollowTargetKind(request.type)

        target = await self._resolve_target(
            kind, body_text(request.source, "source") or ""
        )
        follow = await self.follow_service.follow(user.id, target)

        view = await self.view_builder.follow(follow)
        return CreateFollowResponse(follow=view)
