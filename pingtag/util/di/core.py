"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from pingtag.config import BotSettings, Settings, TagLimitSettings
from pingtag.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_limit_settings(self, settings: Settings) -> TagLimitSettings:
        """Provide tag limit settings."""
        return settings.limits

    @provide(scope=Scope.APP)
    def provide_bot_settings(self, settings: Settings) -> BotSettings:
        """Provide chat reply settings."""
        return settings.bot
