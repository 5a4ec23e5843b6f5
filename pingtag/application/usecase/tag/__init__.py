"""Tag use cases."""

from .common import SubscriberItem, TagItem
from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagResponse, DeleteTagUseCase
from .get_tag import GetTagRequest, GetTagResponse, GetTagUseCase
from .get_tag_stats import GetTagStatsResponse, GetTagStatsUseCase, TagStatItem
from .get_user_tags import (
    GetUserTagsRequest,
    GetUserTagsResponse,
    GetUserTagsUseCase,
    UserTagItem,
)
from .list_tags import ListTagsResponse, ListTagsUseCase, TagListItem
from .resolve_mentions import (
    MentionItem,
    ResolveMentionsRequest,
    ResolveMentionsResponse,
    ResolveMentionsUseCase,
)
from .subscribe_tag import (
    SubscribeTagRequest,
    SubscribeTagResponse,
    SubscribeTagUseCase,
)

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagResponse",
    "DeleteTagUseCase",
    "GetTagRequest",
    "GetTagResponse",
    "GetTagUseCase",
    "GetTagStatsResponse",
    "GetTagStatsUseCase",
    "GetUserTagsRequest",
    "GetUserTagsResponse",
    "GetUserTagsUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "MentionItem",
    "ResolveMentionsRequest",
    "ResolveMentionsResponse",
    "ResolveMentionsUseCase",
    "SubscribeTagRequest",
    "SubscribeTagResponse",
    "SubscribeTagUseCase",
    "SubscriberItem",
    "TagItem",
    "TagListItem",
    "TagStatItem",
    "UserTagItem",
]
