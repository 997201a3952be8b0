"""Tag entity for categorizing freets."""

from datetime import datetime

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created on first use and never deleted.
    """

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)
