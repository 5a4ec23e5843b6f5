"""User routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from pingtag.application.usecase.tag import (
    GetUserTagsRequest,
    GetUserTagsResponse,
    GetUserTagsUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/tags", response_model=GetUserTagsResponse)
async def get_user_tags(
    user_id: int,
    use_case: FromDishka[GetUserTagsUseCase],
) -> GetUserTagsResponse:
    """List the tags a user is subscribed to."""
    with logfire.span("api.get_user_tags", user_id=user_id):
        return await use_case.execute(GetUserTagsRequest(user_id=user_id))
