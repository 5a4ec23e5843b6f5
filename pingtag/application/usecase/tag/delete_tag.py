"""Delete tag use case."""

import logfire
from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase
from pingtag.domain.value import UserId


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    name: str
    requester_id: int
    # Resolved by the chat transport (e.g. chat administrators)
    requester_is_privileged: bool = False


class DeleteTagResponse(BaseModel):
    """Delete tag response."""

    name: str


class DeleteTagUseCase(BaseUseCase):
    """Use case for deleting a tag."""

    async def execute(self, request: DeleteTagRequest) -> DeleteTagResponse:
        """Execute delete flow.

        Raises:
            TagNotFoundError, ForbiddenError, StorageError
        """
        with logfire.span(
            "delete_tag.execute",
            tag_name=request.name,
            requester_id=request.requester_id,
        ):
            tag = await self.tag_service.delete(
                name=request.name,
                requester_id=UserId(request.requester_id),
                requester_is_privileged=request.requester_is_privileged,
            )
            return DeleteTagResponse(name=tag.name)
