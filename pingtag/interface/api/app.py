"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI

from pingtag.domain.service import TagService
from pingtag.interface.api.routes import commands, health, mentions, tags, users
from pingtag.util.di.container import create_container, setup_di
from pingtag.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the tag registry before serving and flush it on shutdown.

    A corrupt tag document aborts startup.
    """
    container: AsyncContainer = app.state.dishka_container
    service = await container.get(TagService)
    logfire.info("Tag registry ready", tag_count=len(service.registry.tags))
    yield
    # Closing the container flushes the registry
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container (production container if not given)
    """
    app_instance = FastAPI(
        title="pingtag",
        description="Subscribable #tags for group chats",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(users.router)
    app_instance.include_router(mentions.router)
    app_instance.include_router(commands.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
