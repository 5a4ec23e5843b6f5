"""Resolve mentions use case."""

import logfire
from pydantic import BaseModel

from pingtag.application.mentions import extract_tag_names
from pingtag.application.usecase.base import BaseUseCase


class ResolveMentionsRequest(BaseModel):
    """Free text that may contain ``#tag`` mentions."""

    text: str


class MentionItem(BaseModel):
    """Subscribers to summon for one mentioned tag."""

    tag_name: str
    usernames: list[str]


class ResolveMentionsResponse(BaseModel):
    """Resolved mentions, one item per matched ``#tag`` occurrence."""

    mentions: list[MentionItem]


class ResolveMentionsUseCase(BaseUseCase):
    """Use case for turning ``#tag`` mentions into subscriber names."""

    async def execute(
        self, request: ResolveMentionsRequest
    ) -> ResolveMentionsResponse:
        """Scan the text for mentions and resolve each one.

        Returns:
            Mentions in order of appearance; repeated tags repeat
        """
        candidates = extract_tag_names(request.text)
        if not candidates:
            return ResolveMentionsResponse(mentions=[])

        with logfire.span("resolve_mentions.execute", candidates=len(candidates)):
            mentions = await self.tag_service.resolve_mentions(candidates)
            return ResolveMentionsResponse(
                mentions=[
                    MentionItem(tag_name=m.tag_name, usernames=list(m.display_names))
                    for m in mentions
                ]
            )
