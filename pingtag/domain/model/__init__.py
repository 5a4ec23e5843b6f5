"""Domain model entities for pingtag."""

from pingtag.domain.model.registry import TagRegistry
from pingtag.domain.model.tag import Subscriber, Tag

__all__ = [
    "Subscriber",
    "Tag",
    "TagRegistry",
]
