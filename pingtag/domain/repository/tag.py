"""Tag repository interface."""

from abc import ABC, abstractmethod

from pingtag.domain.model.registry import TagRegistry


class TagRepository(ABC):
    """Repository interface for the TagRegistry aggregate.

    The registry is always read and written as one unit.
    """

    @abstractmethod
    async def load(self) -> TagRegistry:
        """Load the persisted registry.

        Creates an empty persisted registry when none exists yet. Documents in
        the legacy format are migrated and written back in the current format.

        Returns:
            Loaded registry

        Raises:
            CorruptStateError: If the stored document matches no known schema
            StorageError: If the store cannot be read or written
        """
        pass

    @abstractmethod
    async def save(self, registry: TagRegistry) -> None:
        """Replace the persisted registry with ``registry``.

        Args:
            registry: Registry to persist

        Raises:
            StorageError: If the write fails
        """
        pass
