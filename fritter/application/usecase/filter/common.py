"""Checks shared by the filter use cases."""

from fritter.domain.error import InvalidInputError, NotFoundError
from fritter.domain.model import Filter
from fritter.domain.service import FilterService
from fritter.domain.value import FilterName, UserId
from fritter.domain.value.types import is_word


def parse_filter_name(name: str | None) -> FilterName:
    """Validate the name of a filter being saved.

    Raises:
        InvalidInputError: If the name is not a nonempty run of word characters
    """
    if not is_word(name):
        raise InvalidInputError("Filter name must be a nonempty alphanumeric string.")
    return FilterName(name)


async def require_named_filter(
    filter_service: FilterService, owner_id: UserId, name: str
) -> Filter:
    """Resolve one of the caller's filters by name.

    Raises:
        InvalidInputError: If the name is empty
        NotFoundError: If the caller has no filter with the name
    """
    if not name:
        raise InvalidInputError("Provided filter name must be nonempty.")

    filter_ = (
        await filter_service.get_filter_by_name(owner_id, FilterName(name))
        if is_word(name)
        else None
    )
    if not filter_:
        raise NotFoundError("Filter", name, f"You do not have a filter with name {name}.")
    return filter_
