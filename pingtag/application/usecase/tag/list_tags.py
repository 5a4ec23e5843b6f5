"""List tags use case."""

import logfire
from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase


class TagListItem(BaseModel):
    """Tag item in response."""

    name: str
    subscriber_count: int
    description: str


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagListItem]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing active tags."""

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Tags without subscribers are pruned before listing.

        Returns:
            Remaining tags in storage order
        """
        with logfire.span("list_tags.execute"):
            summaries = await self.tag_service.list_tags()

            tag_items = [
                TagListItem(
                    name=summary.name,
                    subscriber_count=summary.subscriber_count,
                    description=summary.description,
                )
                for summary in summaries
            ]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
