"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable

from fritter.domain.model import (
    Filter,
    Follow,
    FollowTarget,
    Freet,
    ReferenceLink,
    Tag,
    TagTarget,
    User,
    UserTarget,
    Vote,
)
from fritter.domain.value import (
    FilterId,
    FilterName,
    FollowId,
    FollowTargetKind,
    FreetId,
    ReferenceLinkId,
    TagId,
    TagName,
    UserId,
    Username,
    VoteId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        date_joined=row["date_joined"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return tag.model_dump()


def row_to_freet(row: Dict[str, Any], tag_ids: Iterable[TagId] = ()) -> Freet:
    """Convert database row to Freet domain model.

    Args:
        row: Database row as dict
        tag_ids: Tag IDs from the freet_tags junction table

    Returns:
        Freet domain model without votes or links
    """
    return Freet(
        id=FreetId(row["id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        date_created=row["date_created"],
        date_modified=row["date_modified"],
        tag_ids=frozenset(TagId(tag_id) for tag_id in tag_ids),
    )


def freet_to_dict(freet: Freet) -> Dict[str, Any]:
    """Convert Freet domain model to a freets row.

    Tags, votes and links live in their own tables and are excluded.
    """
    return freet.model_dump(exclude={"tag_ids", "upvotes", "downvotes", "links"})


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        freet_id=FreetId(row["freet_id"]),
        issuer_id=UserId(row["issuer_id"]),
        credible=row["credible"],
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_reference_link(row: Dict[str, Any]) -> ReferenceLink:
    """Convert database row to ReferenceLink domain model."""
    return ReferenceLink(
        id=ReferenceLinkId(row["id"]),
        freet_id=FreetId(row["freet_id"]),
        issuer_id=UserId(row["issuer_id"]),
        link=row["link"],
        date_created=row["date_created"],
    )


def reference_link_to_dict(link: ReferenceLink) -> Dict[str, Any]:
    """Convert ReferenceLink domain model to database dict."""
    return link.model_dump()


def target_to_columns(target: FollowTarget) -> Dict[str, Any]:
    """Flatten a follow target into its kind and id columns.

    Raises:
        TypeError: For an unknown target variant
    """
    if isinstance(target, UserTarget):
        return {"target_kind": FollowTargetKind.USER.value, "target_id": target.user_id}
    elif isinstance(target, TagTarget):
        return {"target_kind": FollowTargetKind.TAG.value, "target_id": target.tag_id}
    else:
        raise TypeError(f"Unknown follow target: {target!r}")


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model.

    Raises:
        ValueError: If the stored target kind is unknown
    """
    kind = FollowTargetKind(row["target_kind"])
    if kind is FollowTargetKind.USER:
        target: FollowTarget = UserTarget(user_id=UserId(row["target_id"]))
    else:
        target = TagTarget(tag_id=TagId(row["target_id"]))

    return Follow(
        id=FollowId(row["id"]),
        follower_id=UserId(row["follower_id"]),
        target=target,
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return {
        "id": follow.id,
        "follower_id": follow.follower_id,
        "created_at": follow.created_at,
        **target_to_columns(follow.target),
    }


def row_to_filter(
    row: Dict[str, Any],
    user_ids: Iterable[UserId] = (),
    tag_ids: Iterable[TagId] = (),
) -> Filter:
    """Convert database row and junction rows to Filter domain model."""
    return Filter(
        id=FilterId(row["id"]),
        owner_id=UserId(row["owner_id"]),
        name=FilterName(row["name"]),
        user_ids=frozenset(UserId(user_id) for user_id in user_ids),
        tag_ids=frozenset(TagId(tag_id) for tag_id in tag_ids),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def filter_to_dict(filter_: Filter) -> Dict[str, Any]:
    """Convert Filter domain model to a filters row."""
    return filter_.model_dump(exclude={"user_ids", "tag_ids"})
