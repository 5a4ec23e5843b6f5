"""Logfire configuration.

Services emit spans and events straight through the ``logfire`` module:

    with logfire.span("tag_service.subscribe", tag_name=name):
        logfire.info("Subscribed to tag", tag_name=name)
"""

import logfire
from fastapi import FastAPI

from pingtag.config import ObservabilitySettings, Settings


def _should_send(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry, or force the choice
    with OBSERVABILITY__SEND_TO_LOGFIRE.
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name="pingtag",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        storage_path=settings.storage.path,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``."""
    logfire.instrument_fastapi(app)
