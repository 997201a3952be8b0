"""Credibility use cases: votes and reference links."""

from .links import (
    AddLinkRequest,
    AddLinkResponse,
    AddLinkUseCase,
    ListLinksRequest,
    ListLinksUseCase,
    RemoveLinkRequest,
    RemoveLinkResponse,
    RemoveLinkUseCase,
)
from .votes import (
    AddVoteRequest,
    AddVoteResponse,
    AddVoteUseCase,
    ListVotesRequest,
    ListVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)

__all__ = [
    "AddLinkRequest",
    "AddLinkResponse",
    "AddLinkUseCase",
    "AddVoteRequest",
    "AddVoteResponse",
    "AddVoteUseCase",
    "ListLinksRequest",
    "ListLinksUseCase",
    "ListVotesRequest",
    "ListVotesUseCase",
    "RemoveLinkRequest",
    "RemoveLinkResponse",
    "RemoveLinkUseCase",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
]
