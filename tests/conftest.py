"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from pingtag.domain.model import Subscriber, Tag, TagRegistry
from pingtag.domain.value import UserId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_tag(
    name: str,
    creator_id: int = 1,
    subscribers: list[tuple[int, str | None]] | None = None,
    description: str = "",
) -> Tag:
    """Helper to build a tag with (id, display name) subscriber pairs."""
    return Tag(
        name=name,
        creator_id=UserId(creator_id),
        creator_name=f"creator{creator_id}",
        description=description,
        subscribers=tuple(
            Subscriber(id=UserId(sid), display_name=display_name)
            for sid, display_name in subscribers or []
        ),
        created_at=datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_registry() -> TagRegistry:
    """Registry with an active, a reclaimable and an unnamed-subscriber tag."""
    return TagRegistry(
        tags=(
            make_tag("lunch", creator_id=42, subscribers=[(7, "bob"), (8, "carol")]),
            make_tag("Empty", creator_id=42),
            make_tag("ghosts", creator_id=1, subscribers=[(5, None)]),
        )
    )
