"""Application layer DI providers."""

from dishka import Scope, provide

from fritter.application.usecase.content import QueryContentUseCase
from fritter.application.usecase.credibility import (
    AddLinkUseCase,
    AddVoteUseCase,
    ListLinksUseCase,
    ListVotesUseCase,
    RemoveLinkUseCase,
    RemoveVoteUseCase,
)
from fritter.application.usecase.filter import (
    CreateFilterUseCase,
    DeleteFilterUseCase,
    ListFiltersUseCase,
    UpdateFilterUseCase,
)
from fritter.application.usecase.follow import (
    CreateFollowUseCase,
    DeleteFollowUseCase,
    ListFollowsUseCase,
)
from fritter.application.usecase.freet import (
    CreateFreetUseCase,
    DeleteFreetUseCase,
    GetFreetUseCase,
    ListFreetsUseCase,
    UpdateFreetUseCase,
)
from fritter.application.usecase.tag import GetTaglistUseCase, ListTagsUseCase
from fritter.application.usecase.user import (
    DeleteUserUseCase,
    GetSessionUseCase,
    RegisterUserUseCase,
    SignInUseCase,
    UpdateUserUseCase,
)
from fritter.application.view import ViewBuilder
from fritter.domain.service import (
    ContentService,
    CredibilityService,
    FilterService,
    FollowService,
    FreetService,
    JWTService,
    TagService,
    UserService,
)
from fritter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_view_builder(
        self, user_service: UserService, tag_service: TagService
    ) -> ViewBuilder:
        """Provide response view builder."""
        return ViewBuilder(user_service=user_service, tag_service=tag_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignInUseCase:
        """Provide sign in use case."""
        return SignInUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_get_session_use_case(self, user_service: UserService) -> GetSessionUseCase:
        """Provide get session use case."""
        return GetSessionUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        follow_service: FollowService,
        filter_service: FilterService,
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(
            user_service=user_service,
            freet_service=freet_service,
            credibility_service=credibility_service,
            follow_service=follow_service,
            filter_service=filter_service,
        )

    # Freet use cases
    @provide(scope=Scope.REQUEST)
    def get_create_freet_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        view_builder: ViewBuilder,
    ) -> CreateFreetUseCase:
        """Provide create freet use case."""
        return CreateFreetUseCase(
            user_service=user_service,
            freet_service=freet_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_freet_use_case(
        self, freet_service: FreetService, view_builder: ViewBuilder
    ) -> GetFreetUseCase:
        """Provide get freet use case."""
        return GetFreetUseCase(freet_service=freet_service, view_builder=view_builder)

    @provide(scope=Scope.REQUEST)
    def get_list_freets_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        view_builder: ViewBuilder,
    ) -> ListFreetsUseCase:
        """Provide list freets use case."""
        return ListFreetsUseCase(
            user_service=user_service,
            freet_service=freet_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_freet_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        view_builder: ViewBuilder,
    ) -> UpdateFreetUseCase:
        """Provide update freet use case."""
        return UpdateFreetUseCase(
            user_service=user_service,
            freet_service=freet_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_freet_use_case(
        self, user_service: UserService, freet_service: FreetService
    ) -> DeleteFreetUseCase:
        """Provide delete freet use case."""
        return DeleteFreetUseCase(user_service=user_service, freet_service=freet_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_taglist_use_case(
        self, freet_service: FreetService, view_builder: ViewBuilder
    ) -> GetTaglistUseCase:
        """Provide get taglist use case."""
        return GetTaglistUseCase(freet_service=freet_service, view_builder=view_builder)

    # Credibility use cases
    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(
        self,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(
            freet_service=freet_service,
            credibility_service=credibility_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_add_vote_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> AddVoteUseCase:
        """Provide add vote use case."""
        return AddVoteUseCase(
            user_service=user_service,
            freet_service=freet_service,
            credibility_service=credibility_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(
            user_service=user_service,
            freet_service=freet_service,
            credibility_service=credibility_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_links_use_case(
        self,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> ListLinksUseCase:
        """Provide list links use case."""
        return ListLinksUseCase(
            freet_service=freet_service,
            credibility_service=credibility_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_add_link_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> AddLinkUseCase:
        """Provide add link use case."""
        return AddLinkUseCase(
            user_service=user_service,
            freet_service=freet_service,
            credibility_service=credibility_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_link_use_case(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
    ) -> RemoveLinkUseCase:
        """Provide remove link use case."""
        return RemoveLinkUseCase(
            user_service=user_service,
            freet_service=freet_service,
            credibility_service=credibility_service,
        )

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_list_follows_use_case(
        self,
        user_service: UserService,
        follow_service: FollowService,
        view_builder: ViewBuilder,
    ) -> ListFollowsUseCase:
        """Provide list follows use case."""
        return ListFollowsUseCase(
            user_service=user_service,
            follow_service=follow_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_follow_use_case(
        self,
        user_service: UserService,
        tag_service: TagService,
        follow_service: FollowService,
        view_builder: ViewBuilder,
    ) -> CreateFollowUseCase:
        """Provide create follow use case."""
        return CreateFollowUseCase(
            user_service=user_service,
            tag_service=tag_service,
            follow_service=follow_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_follow_use_case(
        self, user_service: UserService, follow_service: FollowService
    ) -> DeleteFollowUseCase:
        """Provide delete follow use case."""
        return DeleteFollowUseCase(
            user_service=user_service, follow_service=follow_service
        )

    # Filter use cases
    @provide(scope=Scope.REQUEST)
    def get_list_filters_use_case(
        self,
        user_service: UserService,
        filter_service: FilterService,
        view_builder: ViewBuilder,
    ) -> ListFiltersUseCase:
        """Provide list filters use case."""
        return ListFiltersUseCase(
            user_service=user_service,
            filter_service=filter_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_filter_use_case(
        self,
        user_service: UserService,
        tag_service: TagService,
        filter_service: FilterService,
        view_builder: ViewBuilder,
    ) -> CreateFilterUseCase:
        """Provide create filter use case."""
        return CreateFilterUseCase(
            user_service=user_service,
            tag_service=tag_service,
            filter_service=filter_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_filter_use_case(
        self,
        user_service: UserService,
        tag_service: TagService,
        filter_service: FilterService,
        view_builder: ViewBuilder,
    ) -> UpdateFilterUseCase:
        """Provide update filter use case."""
        return UpdateFilterUseCase(
            user_service=user_service,
            tag_service=tag_service,
            filter_service=filter_service,
            view_builder=view_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_filter_use_case(
        self, user_service: UserService, filter_service: FilterService
    ) -> DeleteFilterUseCase:
        """Provide delete filter use case."""
        return DeleteFilterUseCase(
            user_service=user_service, filter_service=filter_service
        )

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_query_content_use_case(
        self,
        user_service: UserService,
        tag_service: TagService,
        filter_service: FilterService,
        content_service: ContentService,
        view_builder: ViewBuilder,
    ) -> QueryContentUseCase:
        """Provide content query use case."""
        return QueryContentUseCase(
            user_service=user_service,
            tag_service=tag_service,
            filter_service=filter_service,
            content_service=content_service,
            view_builder=view_builder,
        )
