"""Create tag use case."""

import logfire
from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase
from pingtag.domain.value import UserId

from .common import TagItem


class CreateTagRequest(BaseModel):
    """Create tag request.

    Bounds are enforced by the domain so that violations surface as domain
    errors rather than request validation failures.
    """

    name: str
    creator_id: int
    creator_name: str = ""
    description: str = ""


class CreateTagResponse(BaseModel):
    """Create tag response."""

    tag: TagItem


class CreateTagUseCase(BaseUseCase):
    """Use case for creating a tag."""

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Raises:
            InvalidTagNameError, DuplicateTagError, DescriptionTooLongError,
            QuotaExceededError, StorageError
        """
        with logfire.span("create_tag.execute", tag_name=request.name):
            tag = await self.tag_service.create(
                name=request.name,
                creator_id=UserId(request.creator_id),
                creator_name=request.creator_name,
                description=request.description,
            )
            return CreateTagResponse(tag=TagItem.from_tag(tag))
