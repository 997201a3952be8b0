"""Delete follow use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import parse_id, require_user
from fritter.domain.error import ForbiddenError, NotFoundError
from fritter.domain.service import FollowService, UserService
from fritter.domain.value import FollowId


class DeleteFollowRequest(BaseModel):
    """Delete follow request."""

    user_id: str | None
    follow_id: str


class DeleteFollowResponse(BaseModel):
    """Delete follow response."""

    message: str = "Your follow was deleted successfully."


class DeleteFollowUseCase:
    """Use case for unfollowing, allowed to the follower only."""

    def __init__(self, user_service: UserService, follow_service: FollowService) -> None:
        self.user_service = user_service
        self.follow_service = follow_service

    async def execute(self, request: DeleteFollowRequest) -> DeleteFollowResponse:
        """Execute delete follow flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If no follow has the ID
            ForbiddenError: If the caller is not the follower
        """
        user = await require_user(self.user_service, request.user_id)

        follow_id = parse_id(request.follow_id, FollowId)
        follow = await self.follow_service.get_follow(follow_id) if follow_id else None
        if not follow:
            raise NotFoundError(
                "Follow",
                request.follow_id,
                f"Follow with follow ID {request.follow_id} does not exist.",
            )

        if follow.follower_id != user.id:
            raise ForbiddenError("Cannot delete sources from other users' following list.")

        await self.follow_service.unfollow(follow.id)
        return DeleteFollowResponse()
