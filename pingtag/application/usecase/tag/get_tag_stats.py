"""Tag statistics use case."""

import logfire
from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase


class TagStatItem(BaseModel):
    """Subscriber count for one tag."""

    name: str
    subscriber_count: int


class GetTagStatsResponse(BaseModel):
    """Tag statistics response."""

    tags: list[TagStatItem]


class GetTagStatsUseCase(BaseUseCase):
    """Use case for reporting subscriber counts."""

    async def execute(self) -> GetTagStatsResponse:
        """Prune reclaimable tags and report counts for the rest."""
        with logfire.span("get_tag_stats.execute"):
            stats = await self.tag_service.stats()
            return GetTagStatsResponse(
                tags=[
                    TagStatItem(name=s.name, subscriber_count=s.subscriber_count)
                    for s in stats
                ]
            )
