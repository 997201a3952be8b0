"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Usernames are unique under case-insensitive comparison. The password is
    only ever held as a hash.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    date_joined: datetime = Field(default_factory=datetime.now)
