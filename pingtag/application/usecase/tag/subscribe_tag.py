"""Subscribe to tag use case."""

import logfire
from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase
from pingtag.domain.value import UserId


class SubscribeTagRequest(BaseModel):
    """Subscribe request."""

    name: str
    subscriber_id: int
    subscriber_name: str = ""  # Empty when the user has no public name


class SubscribeTagResponse(BaseModel):
    """Subscribe response."""

    name: str
    subscriber_count: int


class SubscribeTagUseCase(BaseUseCase):
    """Use case for subscribing a user to a tag."""

    async def execute(self, request: SubscribeTagRequest) -> SubscribeTagResponse:
        """Execute subscribe flow.

        Raises:
            TagNotFoundError, AlreadySubscribedError, StorageError
        """
        with logfire.span(
            "subscribe_tag.execute",
            tag_name=request.name,
            subscriber_id=request.subscriber_id,
        ):
            tag = await self.tag_service.subscribe(
                name=request.name,
                subscriber_id=UserId(request.subscriber_id),
                subscriber_name=request.subscriber_name,
            )
            return SubscribeTagResponse(
                name=tag.name, subscriber_count=tag.subscriber_count
            )
