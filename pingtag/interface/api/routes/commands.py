"""Chat command webhook.

The chat transport forwards every message here and relays the reply.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from pingtag.domain.error import DomainError
from pingtag.interface.command import ChatCommand, CommandDispatcher, CommandReply
from pingtag.interface.error import to_http_exception

router = APIRouter(tags=["commands"], route_class=DishkaRoute)


@router.post(
    "/commands",
    response_model=CommandReply,
    responses={204: {"description": "Nothing to reply"}},
)
async def handle_command(
    command: ChatCommand,
    dispatcher: FromDishka[CommandDispatcher],
) -> CommandReply | Response:
    """Dispatch one chat message.

    Returns:
        Reply text and parse mode, or 204 when no reply should be sent
    """
    with logfire.span("api.handle_command", sender_id=command.sender_id):
        try:
            reply = await dispatcher.dispatch(command)
        except DomainError as e:
            raise to_http_exception(e)

        if reply is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return reply
