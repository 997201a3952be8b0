"""Domain layer DI providers."""

from dishka import Scope, provide

from fritter.config import AuthSettings, ContentSettings
from fritter.domain.repository import (
    FilterRepository,
    FollowRepository,
    FreetRepository,
    ReferenceLinkRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from fritter.domain.service import (
    ContentService,
    CredibilityService,
    FilterService,
    FollowService,
    FreetService,
    JWTService,
    PasswordService,
    TagService,
    UserService,
)
from fritter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_credibility_service(
        self,
        vote_repository: VoteRepository,
        reference_link_repository: ReferenceLinkRepository,
    ) -> CredibilityService:
        """Provide credibility domain service."""
        return CredibilityService(
            vote_repository=vote_repository,
            reference_link_repository=reference_link_repository,
        )

    @provide
    def get_freet_service(
        self,
        freet_repository: FreetRepository,
        tag_service: TagService,
        credibility_service: CredibilityService,
        content_settings: ContentSettings,
    ) -> FreetService:
        """Provide freet domain service."""
        return FreetService(
            freet_repository=freet_repository,
            tag_service=tag_service,
            credibility_service=credibility_service,
            content_settings=content_settings,
        )

    @provide
    def get_follow_service(self, follow_repository: FollowRepository) -> FollowService:
        """Provide follow domain service."""
        return FollowService(follow_repository=follow_repository)

    @provide
    def get_filter_service(self, filter_repository: FilterRepository) -> FilterService:
        """Provide filter domain service."""
        return FilterService(filter_repository=filter_repository)

    @provide
    def get_content_service(
        self, freet_service: FreetService, follow_service: FollowService
    ) -> ContentService:
        """Provide content query service."""
        return ContentService(freet_service=freet_service, follow_service=follow_service)
