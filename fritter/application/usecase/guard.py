"""Checks shared by the use case validation chains.

Every mutating use case runs its checks in the same order: the caller is
signed in, referenced resources exist, the caller may act on them, and
finally the payload is well-formed.
"""

from typing import Any, Callable, Sequence, TypeVar
from uuid import UUID

from fritter.domain.error import InvalidInputError, NotFoundError, UnauthenticatedError
from fritter.domain.model import Freet, User
from fritter.domain.service import FreetService, UserService
from fritter.domain.value import FreetId, TagName, UserId, Username
from fritter.domain.value.types import is_word

T = TypeVar("T")


def parse_id(raw: str | None, factory: Callable[[UUID], T]) -> T | None:
    """Parse an identifier from a path or query, None when malformed."""
    if not raw:
        return None
    try:
        return factory(UUID(raw))
    except ValueError:
        return None


async def require_user(user_service: UserService, user_id: str | None) -> User:
    """Resolve the signed-in user.

    Raises:
        UnauthenticatedError: If there is no session or its user is gone
    """
    parsed = parse_id(user_id, UserId)
    user = await user_service.get_user_by_id(parsed) if parsed else None
    if not user:
        raise UnauthenticatedError()
    return user


async def require_freet(freet_service: FreetService, freet_id: str) -> Freet:
    """Resolve a freet from its raw ID.

    Raises:
        NotFoundError: If the ID is malformed or no freet has it
    """
    parsed = parse_id(freet_id, FreetId)
    freet = await freet_service.get_freet(parsed) if parsed else None
    if not freet:
        raise NotFoundError(
            "Freet", freet_id, f"Freet with freet ID {freet_id} does not exist."
        )
    return freet


def parse_tag_names(tags: Sequence[str] | None) -> list[TagName]:
    """Validate a list of tag names.

    Raises:
        InvalidInputError: If a tag is not a nonempty run of word characters
    """
    names = []
    for tag in tags or []:
        if not is_word(tag):
            raise InvalidInputError("Tag must be a nonempty alphanumeric string.")
        names.append(TagName(tag))
    return names


async def resolve_usernames(
    user_service: UserService, usernames: Sequence[str] | None
) -> list[User]:
    """Resolve usernames to users, all of which must exist.

    Raises:
        NotFoundError: If any username does not belong to a user
    """
    usernames = list(usernames or [])
    missing = NotFoundError(
        "User", ",".join(usernames), "Provided usernames must belong to existing users."
    )
    if not all(is_word(name) for name in usernames):
        raise missing

    users = await user_service.get_users_by_usernames([Username(n) for n in usernames])
    found = {user.username.casefold() for user in users}
    if any(name.lower() not in found for name in usernames):
        raise missing
    return users


def split_list(raw: str) -> list[str]:
    """Split a comma separated query value; the empty string is an empty list."""
    return [] if raw == "" else raw.split(",")


def body_text(value: Any, field: str) -> str | None:
    """A string field of a request body, None when absent.

    Bodies reach use cases untyped so that shape errors surface after the
    session, existence and ownership checks.

    Raises:
        InvalidInputError: If the field is present but not a string
    """
    if value is None or isinstance(value, str):
        return value
    raise InvalidInputError(f"{field} must be a string.")


def body_flag(value: Any, field: str) -> bool | None:
    """A boolean field of a request body, None when absent.

    Raises:
        InvalidInputError: If the field is present but not true or false
    """
    if value is None or isinstance(value, bool):
        return value
    raise InvalidInputError(f"{field} must be true or false.")


def body_strings(value: Any, field: str) -> list[str] | None:
    """A list-of-strings field of a request body, None when absent.

    Raises:
        InvalidInputError: If the field is present but not a list of strings
    """
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    raise InvalidInputError(f"{field} must be a list of strings.")
