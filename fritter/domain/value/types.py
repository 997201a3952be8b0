"""Domain value objects for Fritter.

Value objects are immutable and defined by their values, not identity.
They encapsulate the format rules shared by usernames, tags and filters.
"""

import re
from enum import Enum

from pydantic import field_validator

from fritter.domain.value.common import RootValueObject

WORD_PATTERN = re.compile(r"^\w+$")
PASSWORD_PATTERN = re.compile(r"^\S+$")
URL_PATTERN = re.compile(r"(http|https)://(www.)?[a-zA-Z0-9.\-/]{2,256}")


def is_word(value: str | None) -> bool:
    """Whether value is a nonempty run of word characters."""
    return bool(value) and WORD_PATTERN.match(value) is not None


class FollowTargetKind(str, Enum):
    """Kind of source a user can follow."""

    USER = "User"
    TAG = "Tag"


class Username(RootValueObject[str]):
    """Username of an account.

    Word characters only. Uniqueness is case-insensitive and is enforced
    by the user repository, not here.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not is_word(v):
            raise ValueError("Username must be a nonempty alphanumeric string.")
        return v

    def casefold(self) -> str:
        """Key used for case-insensitive comparison."""
        return self.root.lower()


class TagName(RootValueObject[str]):
    """Tag name, e.g. 'news' or 'mit_2024'."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not is_word(v):
            raise ValueError("Tag must be a nonempty alphanumeric string.")
        return v


class FilterName(RootValueObject[str]):
    """Name of a saved filter, unique per owner."""

    @field_validator("root")
    @classmethod
    def validate_filter_name(cls, v: str) -> str:
        """Validate filter name format."""
        if not is_word(v):
            raise ValueError("Filter name must be a nonempty alphanumeric string.")
        return v
