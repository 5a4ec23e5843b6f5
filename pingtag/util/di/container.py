"""Production DI container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from pingtag.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production implementation.

    Nothing is resolved here; Settings are read from the environment the
    first time something asks for them.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to the app for ``FromDishka`` injection."""
    setup_dishka(container, app)
