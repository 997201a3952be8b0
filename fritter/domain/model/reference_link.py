"""Reference link entity."""

from datetime import datetime

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import FreetId, ReferenceLinkId, UserId


class ReferenceLink(DomainModel):
    """A citation URL attached to a freet by any signed-in user."""

    id: ReferenceLinkId
    freet_id: FreetId
    issuer_id: UserId
    link: str = Field(min_length=1)
    date_created: datetime = Field(default_factory=datetime.now)
