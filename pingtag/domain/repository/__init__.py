"""Repository interfaces for the pingtag domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from pingtag.domain.repository.tag import TagRepository

__all__ = [
    "TagRepository",
]
