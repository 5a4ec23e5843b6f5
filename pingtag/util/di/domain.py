"""Domain layer DI providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from pingtag.config import TagLimitSettings
from pingtag.domain.repository import TagRepository
from pingtag.domain.service import TagService
from pingtag.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    TagService is APP-scoped: it owns the in-memory registry for the whole
    process lifetime, loaded once and flushed when the container closes.
    """

    scope = Scope.APP

    @provide
    async def get_tag_service(
        self, tag_repository: TagRepository, limits: TagLimitSettings
    ) -> AsyncIterator[TagService]:
        """Provide tag domain service, loading the persisted registry."""
        service = await TagService.open(tag_repository=tag_repository, limits=limits)
        yield service
        await service.flush()
        logfire.info("Tag registry flushed on shutdown")
