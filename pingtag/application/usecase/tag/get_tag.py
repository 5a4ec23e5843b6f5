"""Get tag use case."""

from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase

from .common import TagItem


class GetTagRequest(BaseModel):
    """Get tag request."""

    name: str


class GetTagResponse(BaseModel):
    """Get tag response."""

    tag: TagItem


class GetTagUseCase(BaseUseCase):
    """Use case for looking up a single tag."""

    async def execute(self, request: GetTagRequest) -> GetTagResponse:
        """Find a tag by case-insensitive name.

        Raises:
            TagNotFoundError: If no tag matches
        """
        tag = await self.tag_service.find(request.name)
        return GetTagResponse(tag=TagItem.from_tag(tag))
