"""In-memory repository implementations for testing."""

from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryTagRepository",
]
