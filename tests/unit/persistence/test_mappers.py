"""Unit tests for record/domain mappers and document encoding."""

import json

from pingtag.domain.model import Subscriber, TagRegistry
from pingtag.domain.value import UserId
from pingtag.persistence.mappers import (
    document_to_registry,
    record_to_subscriber,
    record_to_tag,
    registry_to_document,
    subscriber_to_record,
)
from pingtag.persistence.schema import (
    SubscriberRecord,
    TagDocument,
    TagRecord,
    encode_document,
)
from tests.conftest import make_tag


class TestSubscriberMapping:
    def test_named_subscriber(self):
        sub = record_to_subscriber(SubscriberRecord(id=7, username="bob"))

        assert sub == Subscriber(id=UserId(7), display_name="bob")

    def test_placeholder_and_empty_names_become_unknown(self):
        for username in ("User5", ""):
            sub = record_to_subscriber(SubscriberRecord(id=5, username=username))
            assert sub.display_name is None

    def test_placeholder_of_other_user_is_a_real_name(self):
        """``User6`` is only a placeholder for user 6."""
        sub = record_to_subscriber(SubscriberRecord(id=5, username="User6"))

        assert sub.display_name == "User6"

    def test_unknown_name_is_written_as_placeholder(self):
        record = subscriber_to_record(Subscriber(id=UserId(5), display_name=None))

        assert record.username == "User5"


class TestTagMapping:
    def test_duplicate_subscriber_ids_keep_first(self):
        record = TagRecord(
            name="lunch",
            creator_id=42,
            subscribers=[
                SubscriberRecord(id=7, username="bob"),
                SubscriberRecord(id=8, username="carol"),
                SubscriberRecord(id=7, username="robert"),
            ],
        )

        tag = record_to_tag(record)

        assert [(s.id, s.display_name) for s in tag.subscribers] == [
            (7, "bob"),
            (8, "carol"),
        ]

    def test_registry_document_round_trip_keeps_order(self, sample_registry):
        document = registry_to_document(sample_registry)

        assert [t.name for t in document.tags] == ["lunch", "Empty", "ghosts"]
        assert document_to_registry(document) == sample_registry


class TestEncodeDocument:
    def test_encoding_is_indented_utf8_with_trailing_newline(self):
        registry = TagRegistry(
            tags=(
                make_tag("Спорт", subscribers=[(7, "Борис")], description="зал"),
            )
        )

        payload = encode_document(registry_to_document(registry))

        text = payload.decode("utf-8")
        assert text.endswith("\n")
        assert "Спорт" in text
        assert '\n  "tags": [' in text
        assert json.loads(text)["tags"][0]["subscribers"] == [
            {"id": 7, "username": "Борис"}
        ]

    def test_unknown_subscriber_encoded_with_placeholder(self, sample_registry):
        payload = json.loads(encode_document(registry_to_document(sample_registry)))

        ghosts = payload["tags"][2]
        assert ghosts["subscribers"] == [{"id": 5, "username": "User5"}]

    def test_empty_document(self):
        assert json.loads(encode_document(TagDocument())) == {"tags": []}
