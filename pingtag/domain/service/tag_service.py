"""Tag domain service."""

import asyncio
from collections.abc import Iterable
from datetime import datetime, timezone

import logfire

from pingtag.config import TagLimitSettings
from pingtag.domain.error import (
    AlreadySubscribedError,
    DescriptionTooLongError,
    DuplicateTagError,
    ForbiddenError,
    InvalidTagNameError,
    QuotaExceededError,
    StorageError,
    TagNotFoundError,
)
from pingtag.domain.model.registry import TagRegistry
from pingtag.domain.model.tag import Subscriber, Tag
from pingtag.domain.repository.tag import TagRepository
from pingtag.domain.value import (
    TagMembership,
    TagMention,
    TagStat,
    TagSummary,
    UserId,
)


class TagService:
    """Domain service owning the in-memory tag registry.

    Every operation runs under a single lock, validates before touching
    state, swaps in the new registry and then persists it. A failed save is
    reported as StorageError; the in-memory change is kept.
    """

    def __init__(
        self,
        tag_repository: TagRepository,
        limits: TagLimitSettings,
        registry: TagRegistry | None = None,
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository used to persist every mutation
            limits: Tag creation bounds
            registry: Initial registry (empty if not given)
        """
        self.tag_repository = tag_repository
        self.limits = limits
        self._registry = registry if registry is not None else TagRegistry()
        self._lock = asyncio.Lock()

    @classmethod
    async def open(
        cls, tag_repository: TagRepository, limits: TagLimitSettings
    ) -> "TagService":
        """Load the persisted registry and build a service around it.

        Raises:
            CorruptStateError: If the stored document is unreadable
            StorageError: If the store cannot be accessed
        """
        with logfire.span("tag_service.open"):
            registry = await tag_repository.load()
            logfire.info("Tag registry loaded", tag_count=len(registry.tags))
            return cls(tag_repository=tag_repository, limits=limits, registry=registry)

    @property
    def registry(self) -> TagRegistry:
        """Current registry snapshot."""
        return self._registry

    async def create(
        self,
        name: str,
        creator_id: UserId,
        creator_name: str,
        description: str = "",
    ) -> Tag:
        """Create a new tag with no subscribers.

        Args:
            name: Tag name, stored with the given casing
            creator_id: Creator identity
            creator_name: Creator display name
            description: Free-form description

        Returns:
            Created tag

        Raises:
            InvalidTagNameError: If name is empty or too long
            DuplicateTagError: If a tag with the same name exists (any casing)
            DescriptionTooLongError: If description exceeds the limit
            QuotaExceededError: If the creator owns too many tags
            StorageError: If the registry could not be saved
        """
        with logfire.span("tag_service.create", tag_name=name, creator_id=creator_id):
            async with self._lock:
                if not name.strip() or len(name) > self.limits.max_name_length:
                    logfire.warn("Invalid tag name", tag_name=name)
                    raise InvalidTagNameError(name, self.limits.max_name_length)

                if self._registry.find(name) is not None:
                    logfire.warn("Duplicate tag", tag_name=name)
                    raise DuplicateTagError(name)

                if len(description) > self.limits.max_description_length:
                    logfire.warn(
                        "Tag description too long",
                        tag_name=name,
                        length=len(description),
                    )
                    raise DescriptionTooLongError(
                        len(description), self.limits.max_description_length
                    )

                owned = self._registry.count_created_by(creator_id)
                if owned >= self.limits.max_tags_per_creator:
                    logfire.warn(
                        "Tag quota exceeded", creator_id=creator_id, owned=owned
                    )
                    raise QuotaExceededError(
                        creator_id, self.limits.max_tags_per_creator
                    )

                tag = Tag(
                    name=name,
                    creator_id=creator_id,
                    creator_name=creator_name,
                    description=description,
                    subscribers=(),
                    created_at=datetime.now(timezone.utc),
                )
                await self._commit(self._registry.with_tag(tag))
                logfire.info("Tag created", tag_name=name, creator_id=creator_id)
                return tag

    async def find(self, name: str) -> Tag:
        """Find a tag by case-insensitive name.

        Raises:
            TagNotFoundError: If no tag matches
        """
        with logfire.span("tag_service.find", tag_name=name):
            async with self._lock:
                return self._require(name)

    async def subscribe(
        self, name: str, subscriber_id: UserId, subscriber_name: str | None
    ) -> Tag:
        """Subscribe a user to a tag.

        Args:
            name: Tag name (any casing)
            subscriber_id: Subscriber identity
            subscriber_name: Display name; empty means unknown

        Returns:
            Updated tag

        Raises:
            TagNotFoundError: If no tag matches
            AlreadySubscribedError: If the user is already subscribed
            StorageError: If the registry could not be saved
        """
        with logfire.span(
            "tag_service.subscribe", tag_name=name, subscriber_id=subscriber_id
        ):
            async with self._lock:
                tag = self._require(name)
                if tag.has_subscriber(subscriber_id):
                    logfire.info(
                        "Already subscribed",
                        tag_name=tag.name,
                        subscriber_id=subscriber_id,
                    )
                    raise AlreadySubscribedError(tag.name, subscriber_id)

                updated = tag.with_subscriber(
                    Subscriber.from_name(subscriber_id, subscriber_name)
                )
                await self._commit(self._registry.with_replaced(updated))
                logfire.info(
                    "Subscribed to tag",
                    tag_name=tag.name,
                    subscriber_id=subscriber_id,
                    subscriber_count=updated.subscriber_count,
                )
                return updated

    async def delete(
        self, name: str, requester_id: UserId, requester_is_privileged: bool = False
    ) -> Tag:
        """Delete a tag.

        Only the creator or a privileged requester (decided by the caller,
        e.g. a chat administrator) may delete.

        Returns:
            The removed tag

        Raises:
            TagNotFoundError: If no tag matches
            ForbiddenError: If the requester may not delete the tag
            StorageError: If the registry could not be saved
        """
        with logfire.span(
            "tag_service.delete",
            tag_name=name,
            requester_id=requester_id,
            privileged=requester_is_privileged,
        ):
            async with self._lock:
                tag = self._require(name)
                if tag.creator_id != requester_id and not requester_is_privileged:
                    logfire.warn(
                        "Tag deletion forbidden",
                        tag_name=tag.name,
                        requester_id=requester_id,
                    )
                    raise ForbiddenError(tag.name, requester_id)

                await self._commit(self._registry.without(tag.name))
                logfire.info("Tag deleted", tag_name=tag.name)
                return tag

    async def list_tags(self) -> list[TagSummary]:
        """Prune reclaimable tags, then list the rest in storage order."""
        with logfire.span("tag_service.list_tags"):
            async with self._lock:
                await self._prune()
                return [
                    TagSummary(
                        name=tag.name,
                        subscriber_count=tag.subscriber_count,
                        description=tag.description,
                    )
                    for tag in self._registry.tags
                ]

    async def my_tags(self, requester_id: UserId) -> list[TagMembership]:
        """List the tags a user is subscribed to, in storage order."""
        with logfire.span("tag_service.my_tags", requester_id=requester_id):
            async with self._lock:
                return [
                    TagMembership(name=tag.name, description=tag.description)
                    for tag in self._registry.subscribed_by(requester_id)
                ]

    async def stats(self) -> list[TagStat]:
        """Prune reclaimable tags, then report subscriber counts."""
        with logfire.span("tag_service.stats"):
            async with self._lock:
                await self._prune()
                return [
                    TagStat(name=tag.name, subscriber_count=tag.subscriber_count)
                    for tag in self._registry.tags
                ]

    async def prune(self) -> int:
        """Remove every tag without subscribers.

        Returns:
            Number of tags removed
        """
        with logfire.span("tag_service.prune"):
            async with self._lock:
                return await self._prune()

    async def resolve_mentions(
        self, candidate_names: Iterable[str]
    ) -> list[TagMention]:
        """Resolve ``#tag`` candidates to mentionable subscriber names.

        Candidates are processed in order and independently, so a tag named
        twice yields two entries. Unknown tags and tags with no mentionable
        subscriber are skipped.
        """
        candidates = list(candidate_names)
        with logfire.span("tag_service.resolve_mentions", candidates=candidates):
            async with self._lock:
                mentions = []
                for candidate in candidates:
                    tag = self._registry.find(candidate)
                    if tag is None:
                        continue
                    names = tag.mentionable_names()
                    if names:
                        mentions.append(
                            TagMention(tag_name=tag.name, display_names=tuple(names))
                        )
                logfire.info("Mentions resolved", count=len(mentions))
                return mentions

    async def flush(self) -> None:
        """Persist the current registry."""
        with logfire.span("tag_service.flush"):
            async with self._lock:
                await self.tag_repository.save(self._registry)

    def _require(self, name: str) -> Tag:
        tag = self._registry.find(name)
        if tag is None:
            logfire.warn("Tag not found", tag_name=name)
            raise TagNotFoundError(name)
        return tag

    async def _prune(self) -> int:
        registry, removed = self._registry.pruned()
        if removed:
            await self._commit(registry)
            logfire.info("Reclaimable tags pruned", removed=removed)
        return removed

    async def _commit(self, registry: TagRegistry) -> None:
        # Memory moves first; a failed save leaves disk behind memory.
        self._registry = registry
        try:
            await self.tag_repository.save(registry)
        except StorageError as e:
            logfire.error("Tag registry save failed", error=str(e))
            raise
