"""End-to-end tests for the tag HTTP API."""

import pytest
from fastapi.testclient import TestClient

from pingtag.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def create_tag(client, name="lunch", creator_id=42, **extra):
    return client.post(
        "/tags",
        json={"name": name, "creator_id": creator_id, "creator_name": "alice", **extra},
    )


def subscribe(client, name, subscriber_id, subscriber_name=""):
    return client.post(
        f"/tags/{name}/subscribers",
        json={"subscriber_id": subscriber_id, "subscriber_name": subscriber_name},
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestTagLifecycle:
    """The create, subscribe and delete walk-through over HTTP."""

    def test_lunch_walkthrough(self, client):
        # Create
        response = create_tag(client, description="")
        assert response.status_code == 201
        tag = response.json()["tag"]
        assert (tag["name"], tag["subscriber_count"], tag["creator_id"]) == (
            "lunch",
            0,
            42,
        )

        # Subscribe, then subscribe again
        response = subscribe(client, "lunch", 7, "bob")
        assert response.status_code == 201
        assert response.json() == {"name": "lunch", "subscriber_count": 1}
        assert subscribe(client, "lunch", 7, "bob").status_code == 409

        # Non-creator cannot delete
        response = client.delete("/tags/lunch", params={"requester_id": 7})
        assert response.status_code == 403

        # Creator can
        response = client.delete("/tags/lunch", params={"requester_id": 42})
        assert response.status_code == 200
        assert response.json() == {"name": "lunch"}

        assert client.get("/tags/LUNCH").status_code == 404

    def test_get_tag_is_case_insensitive(self, client):
        create_tag(client, name="LunchTime")
        subscribe(client, "lunchtime", 7, "bob")
        subscribe(client, "LUNCHTIME", 8)

        response = client.get("/tags/LUNCHTIME")

        assert response.status_code == 200
        data = response.json()["tag"]
        assert data["name"] == "LunchTime"
        assert data["subscribers"] == [
            {"id": 7, "username": "bob", "mentionable": True},
            {"id": 8, "username": "User8", "mentionable": False},
        ]

    def test_privileged_delete(self, client):
        create_tag(client)

        response = client.delete(
            "/tags/lunch", params={"requester_id": 7, "privileged": "true"}
        )

        assert response.status_code == 200


class TestCreateValidation:
    def test_duplicate_in_other_case(self, client):
        create_tag(client)

        assert create_tag(client, name="LUNCH", creator_id=7).status_code == 409

    def test_name_too_long(self, client):
        assert create_tag(client, name="x" * 51).status_code == 422

    def test_description_too_long(self, client):
        assert create_tag(client, description="d" * 101).status_code == 422

    def test_quota(self, client):
        for i in range(10):
            assert create_tag(client, name=f"tag{i}").status_code == 201

        response = create_tag(client, name="tag10")

        assert response.status_code == 409

    def test_subscribe_unknown_tag(self, client):
        assert subscribe(client, "nope", 7).status_code == 404


class TestListings:
    def test_list_prunes_unsubscribed_tags(self, client):
        create_tag(client, name="lunch")
        create_tag(client, name="empty")
        subscribe(client, "lunch", 7, "bob")

        response = client.get("/tags")

        assert response.status_code == 200
        assert response.json() == {
            "tags": [{"name": "lunch", "subscriber_count": 1, "description": ""}]
        }
        assert client.get("/tags/empty").status_code == 404

    def test_stats(self, client):
        create_tag(client, name="lunch")
        create_tag(client, name="games")
        subscribe(client, "games", 7, "bob")
        subscribe(client, "games", 8, "carol")

        response = client.get("/tags/stats")

        assert response.json() == {"tags": [{"name": "games", "subscriber_count": 2}]}

    def test_user_tags(self, client):
        create_tag(client, name="lunch", description="noon")
        create_tag(client, name="games")
        subscribe(client, "lunch", 7, "bob")

        response = client.get("/users/7/tags")

        assert response.json() == {"tags": [{"name": "lunch", "description": "noon"}]}


class TestMentions:
    def test_resolve_mentions(self, client):
        create_tag(client, name="lunch")
        subscribe(client, "lunch", 7, "bob")
        subscribe(client, "lunch", 8)

        response = client.post("/mentions", json={"text": "#lunch? #Lunch! #none"})

        assert response.status_code == 200
        assert response.json() == {
            "mentions": [
                {"tag_name": "lunch", "usernames": ["bob"]},
                {"tag_name": "lunch", "usernames": ["bob"]},
            ]
        }


class TestTracing:
    """Every tag route opens its own span."""

    @pytest.mark.parametrize(
        "method, path, span_name",
        [
            ("get", "/tags/stats", "api.tag_stats"),
            ("get", "/tags/lunch", "api.get_tag"),
            ("get", "/users/7/tags", "api.get_user_tags"),
        ],
    )
    def test_route_span(self, capfire, client, method, path, span_name):
        getattr(client, method)(path)

        names = {s["name"] for s in capfire.exporter.exported_spans_as_dict()}
        assert span_name in names

    def test_mentions_span(self, capfire, client):
        client.post("/mentions", json={"text": "#lunch"})

        names = {s["name"] for s in capfire.exporter.exported_spans_as_dict()}
        assert "api.resolve_mentions" in names
