"""Get user tags use case."""

from pydantic import BaseModel

from pingtag.application.usecase.base import BaseUseCase
from pingtag.domain.value import UserId


class GetUserTagsRequest(BaseModel):
    """Get user tags request."""

    user_id: int


class UserTagItem(BaseModel):
    """Tag the user is subscribed to."""

    name: str
    description: str


class GetUserTagsResponse(BaseModel):
    """Get user tags response."""

    tags: list[UserTagItem]


class GetUserTagsUseCase(BaseUseCase):
    """Use case for listing a user's subscriptions."""

    async def execute(self, request: GetUserTagsRequest) -> GetUserTagsResponse:
        memberships = await self.tag_service.my_tags(UserId(request.user_id))
        return GetUserTagsResponse(
            tags=[
                UserTagItem(name=m.name, description=m.description)
                for m in memberships
            ]
        )
