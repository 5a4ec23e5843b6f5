"""Tag repository implementations."""

from pingtag.persistence.repository.tag import JsonFileTagRepository

__all__ = [
    "JsonFileTagRepository",
]
