"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from pingtag.util.di import PROVIDERS, Component, component_names, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where components are mocked unless unmocked.

    Args:
        unmock: Components to run with their production implementation

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # In-memory tag repository
        container = build_test_container()

        # JSON document at STORAGE__PATH
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - component_names()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container back a FastAPI test app
    return make_async_container(*providers, FastapiProvider())
