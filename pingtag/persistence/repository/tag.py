"""JSON file implementation of Tag repository."""

import asyncio
import os
import tempfile
from pathlib import Path

import logfire

from pingtag.domain.error import CorruptStateError, StorageError
from pingtag.domain.model.registry import TagRegistry
from pingtag.domain.repository.tag import TagRepository
from pingtag.persistence.mappers import document_to_registry, registry_to_document
from pingtag.persistence.migration import DecodeOutcome, decode_document
from pingtag.persistence.schema import encode_document


class JsonFileTagRepository(TagRepository):
    """TagRepository storing the whole registry in one JSON document."""

    def __init__(self, path: Path | str) -> None:
        """Initialize repository with the document path.

        Args:
            path: Location of the JSON document
        """
        self.path = Path(path)

    async def load(self) -> TagRegistry:
        """Load the registry, creating or migrating the document as needed."""
        with logfire.span("json_tag_repository.load", path=str(self.path)):
            if not self.path.exists():
                registry = TagRegistry()
                await self.save(registry)
                logfire.info("Created empty tag document", path=str(self.path))
                return registry

            try:
                raw = await asyncio.to_thread(self.path.read_bytes)
            except OSError as e:
                raise StorageError(str(self.path), str(e)) from e

            result = decode_document(raw)
            if result.outcome is DecodeOutcome.CORRUPT or result.document is None:
                logfire.error(
                    "Tag document is corrupt", path=str(self.path), error=result.error
                )
                raise CorruptStateError(str(self.path), result.error or "unreadable")

            registry = document_to_registry(result.document)
            if result.outcome is DecodeOutcome.MIGRATED:
                # Write back immediately so migration runs only once
                await self.save(registry)
                logfire.warn(
                    "Tag document rewritten in current schema",
                    path=str(self.path),
                    tag_count=len(registry.tags),
                )
            return registry

    async def save(self, registry: TagRegistry) -> None:
        """Atomically replace the document with ``registry``.

        A cancelled caller still waits for the write thread to finish, so the
        service lock is never released while a write is in flight.
        """
        payload = encode_document(registry_to_document(registry))
        write = asyncio.ensure_future(asyncio.to_thread(self._write_atomic, payload))
        try:
            await asyncio.shield(write)
        except asyncio.CancelledError:
            await _settle(write)
            raise
        except OSError as e:
            raise StorageError(str(self.path), str(e)) from e
        logfire.debug(
            "Tag document saved", path=str(self.path), tag_count=len(registry.tags)
        )

    def _write_atomic(self, payload: bytes) -> None:
        """Write via a uniquely named sibling file and rename over the target."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
            tmp.replace(self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise


async def _settle(write: asyncio.Future) -> None:
    """Wait out an in-flight write after cancellation, keeping its outcome."""
    try:
        await asyncio.shield(write)
    except asyncio.CancelledError:
        # Cancelled again while waiting; the write still has to finish
        await _settle(write)
    except OSError as e:
        logfire.error("Tag document write failed after cancellation", error=str(e))
