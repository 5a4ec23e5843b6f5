"""Persistence infrastructure providers."""

from pathlib import Path

from dishka import Scope, provide

from pingtag.config import Settings
from pingtag.domain.repository import TagRepository
from pingtag.persistence.repository import JsonFileTagRepository
from pingtag.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using a JSON document on disk."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_tag_repository(self, settings: Settings) -> TagRepository:
        """Provide Tag repository."""
        return JsonFileTagRepository(Path(settings.storage.path))
