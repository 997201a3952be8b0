"""Follow edge between a user and a source."""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import FollowId, TagId, UserId


class UserTarget(DomainModel):
    """Follow target that is another user."""

    kind: Literal["User"] = "User"
    user_id: UserId

    @property
    def target_id(self) -> UserId:
        return self.user_id


class TagTarget(DomainModel):
    """Follow target that is a tag."""

    kind: Literal["Tag"] = "Tag"
    tag_id: TagId

    @property
    def target_id(self) -> TagId:
        return self.tag_id


FollowTarget = Annotated[Union[UserTarget, TagTarget], Field(discriminator="kind")]


class Follow(DomainModel):
    """Directed subscription from a follower to a user or tag.

    Unique per (follower, target kind, target id). A user never follows
    themselves.
    """

    id: FollowId
    follower_id: UserId
    target: FollowTarget
    created_at: datetime = Field(default_factory=datetime.now)
