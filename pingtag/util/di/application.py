"""Application layer DI providers."""

from dishka import Scope, provide

from pingtag.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagStatsUseCase,
    GetTagUseCase,
    GetUserTagsUseCase,
    ListTagsUseCase,
    ResolveMentionsUseCase,
    SubscribeTagUseCase,
)
from pingtag.config import BotSettings
from pingtag.domain.service import TagService
from pingtag.interface.command import CommandDispatcher
from pingtag.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide
    def get_subscribe_tag_use_case(
        self, tag_service: TagService
    ) -> SubscribeTagUseCase:
        """Provide subscribe use case."""
        return SubscribeTagUseCase(tag_service=tag_service)

    @provide
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)

    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_user_tags_use_case(self, tag_service: TagService) -> GetUserTagsUseCase:
        """Provide user subscriptions use case."""
        return GetUserTagsUseCase(tag_service=tag_service)

    @provide
    def get_tag_stats_use_case(self, tag_service: TagService) -> GetTagStatsUseCase:
        """Provide tag statistics use case."""
        return GetTagStatsUseCase(tag_service=tag_service)

    @provide
    def get_resolve_mentions_use_case(
        self, tag_service: TagService
    ) -> ResolveMentionsUseCase:
        """Provide resolve mentions use case."""
        return ResolveMentionsUseCase(tag_service=tag_service)

    @provide
    def get_command_dispatcher(
        self,
        create_tag: CreateTagUseCase,
        subscribe_tag: SubscribeTagUseCase,
        delete_tag: DeleteTagUseCase,
        list_tags: ListTagsUseCase,
        get_user_tags: GetUserTagsUseCase,
        get_tag_stats: GetTagStatsUseCase,
        resolve_mentions: ResolveMentionsUseCase,
        bot_settings: BotSettings,
    ) -> CommandDispatcher:
        """Provide chat command dispatcher."""
        return CommandDispatcher(
            create_tag=create_tag,
            subscribe_tag=subscribe_tag,
            delete_tag=delete_tag,
            list_tags=list_tags,
            get_user_tags=get_user_tags,
            get_tag_stats=get_tag_stats,
            resolve_mentions=resolve_mentions,
            bot_settings=bot_settings,
        )
