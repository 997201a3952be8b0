"""List follows use case."""

from pydantic import BaseModel

from fritter.application.view import FollowView, ViewBuilder
from fritter.domain.error import InvalidInputError, NotFoundError
from fritter.domain.model import User
from fritter.domain.service import FollowService, UserService
from fritter.domain.value import Username
from fritter.domain.value.types import is_word


class ListFollowsRequest(BaseModel):
    """List follows request.

    Exactly one of the two usernames must be given.
    """

    following_of: str | None = None
    followers_of: str | None = None


async def find_user(user_service: UserService, username: str) -> User:
    """Resolve a username named in a follow request.

    Raises:
        NotFoundError: If no user has the username
    """
    user = (
        await user_service.get_user_by_username(Username(username))
        if is_word(username)
        else None
    )
    if not user:
        raise NotFoundError("User", username, f"Given username {username} does not exist.")
    return user


class ListFollowsUseCase:
    """Use case for listing who a user follows, or who follows them."""

    def __init__(
        self,
        user_service: UserService,
        follow_service: FollowService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.follow_service = follow_service
        self.view_builder = view_builder

    async def execute(self, request: ListFollowsRequest) -> list[FollowView]:
        """Execute list follows flow.

        Raises:
            InvalidInputError: If neither or both usernames are given
            NotFoundError: If the username does not exist
        """
        if bool(request.following_of) == bool(request.followers_of):
            raise InvalidInputError("Either followingOf or followersOf should be provided!")

        if request.following_of:
            user = await find_user(self.user_service, request.following_of)
            follows = await self.follow_service.get_following(user.id)
        else:
            user = await find_user(self.user_service, request.followers_of)
            follows = await self.follow_service.get_followers(user.id)

        return await self.view_builder.follows(follows)
