"""Mention routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from pingtag.application.usecase.tag import (
    ResolveMentionsRequest,
    ResolveMentionsResponse,
    ResolveMentionsUseCase,
)

router = APIRouter(tags=["mentions"], route_class=DishkaRoute)


@router.post("/mentions", response_model=ResolveMentionsResponse)
async def resolve_mentions(
    request: ResolveMentionsRequest,
    use_case: FromDishka[ResolveMentionsUseCase],
) -> ResolveMentionsResponse:
    """Resolve ``#tag`` mentions in free text to subscriber usernames.

    Example:
        POST /mentions {"text": "lunch? #lunch"}
    """
    with logfire.span("api.resolve_mentions"):
        return await use_case.execute(request)
