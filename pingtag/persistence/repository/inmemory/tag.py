"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from pingtag.domain.model.registry import TagRegistry
from pingtag.domain.repository.tag import TagRepository


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, registry: Optional[TagRegistry] = None) -> None:
        """Initialize repository, optionally pre-seeded with a registry."""
        self._registry = registry
        self.save_count = 0

    @property
    def stored(self) -> Optional[TagRegistry]:
        """Last saved registry (None if nothing was ever stored)."""
        return self._registry

    async def load(self) -> TagRegistry:
        """Load the stored registry, creating an empty one if needed."""
        if self._registry is None:
            await self.save(TagRegistry())
        return self._registry

    async def save(self, registry: TagRegistry) -> None:
        """Store the registry (registries are immutable, no copy needed)."""
        self._registry = registry
        self.save_count += 1
