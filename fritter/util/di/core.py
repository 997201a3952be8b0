"""Settings providers."""

from dishka import Scope, provide

from fritter.config import AuthSettings, ContentSettings, Settings
from fritter.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads ``Settings`` once per process and hands out its sections."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        return settings.content
