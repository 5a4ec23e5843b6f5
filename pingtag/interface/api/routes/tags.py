"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from pingtag.application.usecase.tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagResponse,
    DeleteTagUseCase,
    GetTagRequest,
    GetTagResponse,
    GetTagStatsResponse,
    GetTagStatsUseCase,
    GetTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
    SubscribeTagRequest,
    SubscribeTagResponse,
    SubscribeTagUseCase,
)
from pingtag.domain.error import DomainError
from pingtag.interface.error import to_http_exception

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


class SubscribeBody(BaseModel):
    """Subscribe request body."""

    subscriber_id: int
    subscriber_name: str = ""


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
    description="Prune tags without subscribers, then list the rest.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all active tags.

    Args:
        use_case: List tags use case (injected)

    Returns:
        Tags in storage order
    """
    with logfire.span("api.list_tags"):
        try:
            return await use_case.execute()
        except DomainError as e:
            raise to_http_exception(e)


@router.post(
    "",
    response_model=CreateTagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tag",
)
async def create_tag(
    request: CreateTagRequest,
    use_case: FromDishka[CreateTagUseCase],
) -> CreateTagResponse:
    """Create a new tag with no subscribers.

    Raises:
        HTTPException: 422 on invalid name/description, 409 on duplicate or quota
    """
    with logfire.span("api.create_tag", tag_name=request.name):
        try:
            return await use_case.execute(request)
        except DomainError as e:
            raise to_http_exception(e)


@router.get("/stats", response_model=GetTagStatsResponse, summary="Tag statistics")
async def tag_stats(use_case: FromDishka[GetTagStatsUseCase]) -> GetTagStatsResponse:
    """Subscriber counts per tag (prunes tags without subscribers first)."""
    with logfire.span("api.tag_stats"):
        try:
            return await use_case.execute()
        except DomainError as e:
            raise to_http_exception(e)


@router.get("/{name}", response_model=GetTagResponse, summary="Get a tag")
async def get_tag(name: str, use_case: FromDishka[GetTagUseCase]) -> GetTagResponse:
    """Get a tag by case-insensitive name."""
    with logfire.span("api.get_tag", tag_name=name):
        try:
            return await use_case.execute(GetTagRequest(name=name))
        except DomainError as e:
            raise to_http_exception(e)


@router.post(
    "/{name}/subscribers",
    response_model=SubscribeTagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Subscribe to a tag",
)
async def subscribe(
    name: str,
    body: SubscribeBody,
    use_case: FromDishka[SubscribeTagUseCase],
) -> SubscribeTagResponse:
    """Subscribe a user to a tag.

    Raises:
        HTTPException: 404 if the tag doesn't exist, 409 if already subscribed
    """
    with logfire.span("api.subscribe", tag_name=name):
        try:
            return await use_case.execute(
                SubscribeTagRequest(
                    name=name,
                    subscriber_id=body.subscriber_id,
                    subscriber_name=body.subscriber_name,
                )
            )
        except DomainError as e:
            raise to_http_exception(e)


@router.delete("/{name}", response_model=DeleteTagResponse, summary="Delete a tag")
async def delete_tag(
    name: str,
    requester_id: int,
    use_case: FromDishka[DeleteTagUseCase],
    privileged: bool = False,
) -> DeleteTagResponse:
    """Delete a tag.

    Args:
        name: Tag name (any casing)
        requester_id: Identity of the user asking for deletion
        use_case: Delete tag use case (injected)
        privileged: Whether the requester has elevated rights (e.g. chat admin)

    Example:
        DELETE /tags/lunch?requester_id=42
    """
    with logfire.span("api.delete_tag", tag_name=name, requester_id=requester_id):
        try:
            return await use_case.execute(
                DeleteTagRequest(
                    name=name,
                    requester_id=requester_id,
                    requester_is_privileged=privileged,
                )
            )
        except DomainError as e:
            raise to_http_exception(e)
