"""Integration tests for JsonFileTagRepository against the real filesystem."""

import asyncio
import json
import time

import pytest

from pingtag.config import TagLimitSettings
from pingtag.domain.error import CorruptStateError, StorageError
from pingtag.domain.model import TagRegistry
from pingtag.domain.service import TagService
from pingtag.domain.value import UserId
from pingtag.persistence.repository import JsonFileTagRepository
from tests.conftest import make_tag


class SlowJsonFileTagRepository(JsonFileTagRepository):
    """Repository whose writes take a while once ``slow`` is set."""

    slow = False

    def _write_atomic(self, payload: bytes) -> None:
        if self.slow:
            time.sleep(0.3)
        super()._write_atomic(payload)


@pytest.fixture
def tags_path(tmp_path):
    return tmp_path / "tags.json"


class TestLoad:
    @pytest.mark.asyncio
    async def test_missing_file_creates_empty_document(self, tags_path):
        repo = JsonFileTagRepository(tags_path)

        registry = await repo.load()

        assert registry == TagRegistry()
        assert json.loads(tags_path.read_text(encoding="utf-8")) == {"tags": []}

    @pytest.mark.asyncio
    async def test_missing_parent_directory_is_created(self, tmp_path):
        path = tmp_path / "state" / "nested" / "tags.json"

        await JsonFileTagRepository(path).load()

        assert path.exists()

    @pytest.mark.asyncio
    async def test_save_then_load_in_new_instance(self, tags_path, sample_registry):
        await JsonFileTagRepository(tags_path).save(sample_registry)

        loaded = await JsonFileTagRepository(tags_path).load()

        assert loaded == sample_registry

    @pytest.mark.asyncio
    async def test_legacy_document_is_rewritten_on_load(self, tags_path):
        tags_path.write_text(
            json.dumps(
                {"tags": [{"name": "x", "creator_id": 1, "subscribers": [5, 6]}]}
            ),
            encoding="utf-8",
        )

        registry = await JsonFileTagRepository(tags_path).load()

        tag = registry.find("x")
        assert [s.username for s in tag.subscribers] == ["User5", "User6"]
        assert tag.mentionable_names() == []

        on_disk = json.loads(tags_path.read_text(encoding="utf-8"))
        assert on_disk["tags"][0]["subscribers"] == [
            {"id": 5, "username": "User5"},
            {"id": 6, "username": "User6"},
        ]

    @pytest.mark.asyncio
    async def test_migration_runs_once(self, tags_path):
        tags_path.write_text(
            '{"tags": [{"name": "x", "creator_id": 1, "subscribers": [5]}]}',
            encoding="utf-8",
        )
        await JsonFileTagRepository(tags_path).load()
        rewritten = tags_path.read_bytes()

        await JsonFileTagRepository(tags_path).load()

        assert tags_path.read_bytes() == rewritten

    @pytest.mark.asyncio
    async def test_corrupt_document_raises_and_is_left_alone(self, tags_path):
        tags_path.write_text("{definitely not json", encoding="utf-8")

        with pytest.raises(CorruptStateError) as exc_info:
            await JsonFileTagRepository(tags_path).load()

        assert exc_info.value.location == str(tags_path)
        assert tags_path.read_text(encoding="utf-8") == "{definitely not json"

    @pytest.mark.asyncio
    async def test_unreadable_path_raises_storage_error(self, tmp_path):
        # A directory where the document should be
        path = tmp_path / "tags.json"
        path.mkdir()

        with pytest.raises(StorageError):
            await JsonFileTagRepository(path).load()


class TestSave:
    @pytest.mark.asyncio
    async def test_save_leaves_no_temporary_files(self, tags_path, sample_registry):
        await JsonFileTagRepository(tags_path).save(sample_registry)

        assert [p.name for p in tags_path.parent.iterdir()] == ["tags.json"]

    @pytest.mark.asyncio
    async def test_save_replaces_previous_document(self, tags_path, sample_registry):
        repo = JsonFileTagRepository(tags_path)
        await repo.save(sample_registry)

        await repo.save(TagRegistry(tags=(make_tag("only"),)))

        on_disk = json.loads(tags_path.read_text(encoding="utf-8"))
        assert [t["name"] for t in on_disk["tags"]] == ["only"]

    @pytest.mark.asyncio
    async def test_save_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        repo = JsonFileTagRepository(blocker / "tags.json")

        with pytest.raises(StorageError):
            await repo.save(TagRegistry())


class TestTagServiceOnDisk:
    """TagService backed by the JSON document survives a restart."""

    @pytest.mark.asyncio
    async def test_state_survives_restart(self, tags_path):
        service = await TagService.open(
            JsonFileTagRepository(tags_path), TagLimitSettings()
        )
        await service.create("Lunch", UserId(42), "alice", "noon")
        await service.subscribe("lunch", UserId(7), "bob")
        await service.subscribe("lunch", UserId(8), "")

        restarted = await TagService.open(
            JsonFileTagRepository(tags_path), TagLimitSettings()
        )

        tag = await restarted.find("LUNCH")
        assert tag.name == "Lunch"
        assert tag.description == "noon"
        assert tag.creator_name == "alice"
        assert [(s.id, s.display_name) for s in tag.subscribers] == [
            (7, "bob"),
            (8, None),
        ]

    @pytest.mark.asyncio
    async def test_prune_is_persisted(self, tags_path, sample_registry):
        await JsonFileTagRepository(tags_path).save(sample_registry)
        service = await TagService.open(
            JsonFileTagRepository(tags_path), TagLimitSettings()
        )

        await service.list_tags()

        on_disk = json.loads(tags_path.read_text(encoding="utf-8"))
        assert [t["name"] for t in on_disk["tags"]] == ["lunch", "ghosts"]


class TestCancelledSave:
    """A caller cancelled mid-save does not disturb the next save."""

    @pytest.mark.asyncio
    async def test_save_after_cancelled_save_succeeds(self, tags_path):
        repo = SlowJsonFileTagRepository(tags_path)
        service = await TagService.open(repo, TagLimitSettings())
        repo.slow = True

        first = asyncio.create_task(service.create("a", UserId(1), "alice"))
        await asyncio.sleep(0.05)
        first.cancel()

        # Runs while the cancelled write is still in flight
        await service.create("b", UserId(1), "alice")

        with pytest.raises(asyncio.CancelledError):
            await first

        on_disk = json.loads(tags_path.read_text(encoding="utf-8"))
        assert [t["name"] for t in on_disk["tags"]] == ["a", "b"]
        assert [p.name for p in tags_path.parent.iterdir()] == ["tags.json"]

    @pytest.mark.asyncio
    async def test_cancelled_save_finishes_before_returning(self, tags_path):
        repo = SlowJsonFileTagRepository(tags_path)
        repo.slow = True

        save = asyncio.create_task(repo.save(TagRegistry(tags=(make_tag("a"),))))
        await asyncio.sleep(0.05)
        save.cancel()

        with pytest.raises(asyncio.CancelledError):
            await save

        on_disk = json.loads(tags_path.read_text(encoding="utf-8"))
        assert [t["name"] for t in on_disk["tags"]] == ["a"]


class TestLegacyMentions:
    """Subscribers migrated from the legacy document are never summoned."""

    @pytest.mark.asyncio
    async def test_resolve_mentions_on_migrated_document_is_empty(self, tags_path):
        tags_path.write_text(
            json.dumps(
                {"tags": [{"name": "x", "creator_id": 1, "subscribers": [5, 6]}]}
            ),
            encoding="utf-8",
        )
        service = await TagService.open(
            JsonFileTagRepository(tags_path), TagLimitSettings()
        )

        assert await service.resolve_mentions(["x"]) == []
        assert (await service.find("x")).subscriber_count == 2
