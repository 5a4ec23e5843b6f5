"""Chat command dispatcher.

Turns chat messages forwarded by the transport into use case calls and
renders the results as reply text. Sender identity, display name and the
privileged flag for deletion are resolved by the transport.
"""

import random
from typing import Literal, Optional

import logfire
from pydantic import BaseModel

from pingtag.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    GetUserTagsRequest,
    GetUserTagsUseCase,
    GetTagStatsUseCase,
    ListTagsUseCase,
    ResolveMentionsRequest,
    ResolveMentionsUseCase,
    SubscribeTagRequest,
    SubscribeTagUseCase,
)
from pingtag.config import BotSettings
from pingtag.domain.error import (
    AlreadySubscribedError,
    DescriptionTooLongError,
    DomainError,
    DuplicateTagError,
    ForbiddenError,
    InvalidTagNameError,
    QuotaExceededError,
    StorageError,
    TagNotFoundError,
)
from pingtag.domain.value import placeholder_name

from . import messages


class ChatCommand(BaseModel):
    """Inbound chat message."""

    text: str
    sender_id: int
    sender_name: str = ""
    # Only consulted for deletion
    is_privileged: bool = False


class CommandReply(BaseModel):
    """Reply to send back to the chat."""

    text: str
    parse_mode: Optional[Literal["Markdown"]] = None


def parse_command(text: str) -> tuple[str | None, list[str]]:
    """Split a message into a command name and argument tokens.

    ``"/ct@pingbot lunch daily"`` becomes ``("/ct", ["lunch", "daily"])``.
    Messages that are not commands return ``(None, [])``.
    """
    tokens = text.split()
    if not tokens or not tokens[0].startswith("/"):
        return None, []
    command = tokens[0].split("@", 1)[0].lower()
    return command, tokens[1:]


def _tag_argument(token: str) -> str:
    return token[1:] if token.startswith("#") and len(token) > 1 else token


class CommandDispatcher:
    """Dispatches chat commands to tag use cases."""

    def __init__(
        self,
        create_tag: CreateTagUseCase,
        subscribe_tag: SubscribeTagUseCase,
        delete_tag: DeleteTagUseCase,
        list_tags: ListTagsUseCase,
        get_user_tags: GetUserTagsUseCase,
        get_tag_stats: GetTagStatsUseCase,
        resolve_mentions: ResolveMentionsUseCase,
        bot_settings: BotSettings,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            rng: Random source for summon phrases (seedable for tests)
        """
        self.create_tag = create_tag
        self.subscribe_tag = subscribe_tag
        self.delete_tag = delete_tag
        self.list_tags = list_tags
        self.get_user_tags = get_user_tags
        self.get_tag_stats = get_tag_stats
        self.resolve_mentions = resolve_mentions
        self.bot_settings = bot_settings
        self.rng = rng or random.Random()

        self._handlers = {
            "/start": self._start,
            "/ct": self._create,
            "/st": self._subscribe,
            "/dt": self._delete,
            "/lt": self._list,
            "/mt": self._my_tags,
            "/stats": self._stats,
        }

    async def dispatch(self, command: ChatCommand) -> CommandReply | None:
        """Handle one chat message.

        Returns:
            Reply to send, or None when the message needs no answer

        Raises:
            DomainError: For error kinds without a chat reply (CorruptStateError)
        """
        name, args = parse_command(command.text)
        handler = self._handlers.get(name) if name else None
        if handler is None:
            return await self._mentions(command)

        with logfire.span(
            "command.dispatch", command=name, sender_id=command.sender_id
        ):
            try:
                return await handler(command, args)
            except DomainError as e:
                logfire.info("Command rejected", command=name, error=type(e).__name__)
                return self._render_error(e)

    async def _start(self, command: ChatCommand, args: list[str]) -> CommandReply:
        return CommandReply(text=messages.HELP)

    async def _create(self, command: ChatCommand, args: list[str]) -> CommandReply:
        if not args:
            return CommandReply(text=messages.CREATE_USAGE)
        response = await self.create_tag.execute(
            CreateTagRequest(
                name=_tag_argument(args[0]),
                creator_id=command.sender_id,
                creator_name=command.sender_name,
                description=" ".join(args[1:]),
            )
        )
        creator = command.sender_name or placeholder_name(command.sender_id)
        return CommandReply(
            text=messages.tag_created(
                creator, response.tag.name, response.tag.description
            ),
            parse_mode="Markdown",
        )

    async def _subscribe(self, command: ChatCommand, args: list[str]) -> CommandReply:
        if not args:
            return CommandReply(text=messages.SUBSCRIBE_USAGE)
        response = await self.subscribe_tag.execute(
            SubscribeTagRequest(
                name=_tag_argument(args[0]),
                subscriber_id=command.sender_id,
                subscriber_name=command.sender_name,
            )
        )
        return CommandReply(
            text=messages.subscribed(response.name), parse_mode="Markdown"
        )

    async def _delete(self, command: ChatCommand, args: list[str]) -> CommandReply:
        if not args:
            return CommandReply(text=messages.DELETE_USAGE)
        response = await self.delete_tag.execute(
            DeleteTagRequest(
                name=_tag_argument(args[0]),
                requester_id=command.sender_id,
                requester_is_privileged=command.is_privileged,
            )
        )
        return CommandReply(
            text=messages.deleted(response.name), parse_mode="Markdown"
        )

    async def _list(self, command: ChatCommand, args: list[str]) -> CommandReply:
        response = await self.list_tags.execute()
        if not response.tags:
            return CommandReply(text=messages.NO_TAGS)
        return CommandReply(
            text=messages.tag_list(response.tags), parse_mode="Markdown"
        )

    async def _my_tags(self, command: ChatCommand, args: list[str]) -> CommandReply:
        response = await self.get_user_tags.execute(
            GetUserTagsRequest(user_id=command.sender_id)
        )
        return CommandReply(
            text=messages.user_tags(response.tags), parse_mode="Markdown"
        )

    async def _stats(self, command: ChatCommand, args: list[str]) -> CommandReply:
        response = await self.get_tag_stats.execute()
        return CommandReply(text=messages.stats(response.tags), parse_mode="Markdown")

    async def _mentions(self, command: ChatCommand) -> CommandReply | None:
        response = await self.resolve_mentions.execute(
            ResolveMentionsRequest(text=command.text)
        )
        if not response.mentions:
            return None

        phrases = self.bot_settings.summon_phrases
        blocks = [
            messages.summon(mention, self.rng.choice(phrases))
            for mention in response.mentions
        ]
        return CommandReply(text="\n\n".join(blocks))

    def _render_error(self, error: DomainError) -> CommandReply:
        if isinstance(error, InvalidTagNameError):
            text = messages.invalid_name(error.max_length)
        elif isinstance(error, DescriptionTooLongError):
            text = messages.description_too_long(error.max_length)
        elif isinstance(error, DuplicateTagError):
            text = messages.TAG_EXISTS
        elif isinstance(error, QuotaExceededError):
            text = messages.quota_exceeded(error.limit)
        elif isinstance(error, TagNotFoundError):
            text = messages.TAG_NOT_FOUND
        elif isinstance(error, AlreadySubscribedError):
            text = messages.ALREADY_SUBSCRIBED
        elif isinstance(error, ForbiddenError):
            text = messages.DELETE_FORBIDDEN
        elif isinstance(error, StorageError):
            text = messages.SAVE_FAILED
        else:
            raise error
        return CommandReply(text=text)
