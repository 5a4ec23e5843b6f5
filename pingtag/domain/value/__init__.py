"""Domain value objects for pingtag."""

from pingtag.domain.value.identifiers import UserId
from pingtag.domain.value.types import (
    PLACEHOLDER_PREFIX,
    TagMembership,
    TagMention,
    TagStat,
    TagSummary,
    placeholder_name,
    tag_key,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "TagSummary",
    "TagMembership",
    "TagStat",
    "TagMention",
    # Helpers
    "PLACEHOLDER_PREFIX",
    "placeholder_name",
    "tag_key",
]
