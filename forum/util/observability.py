"""Observability configuration using Logfire.

Spans are opened by the repositories and the JWT service; request spans come
from the FastAPI instrumentation. Use cases and entities stay silent and let
their errors propagate to the interface layer.

Usage:
    import logfire

    with logfire.span("comment_repository.add_comment", thread_id=thread_id):
        ...
        logfire.info("Comment added", comment_id=comment_id)
"""

from typing import Any

import logfire
from fastapi import FastAPI

from forum.config import Settings

# Route parameters copied onto request spans
TRACED_PATH_PARAMS = ("thread_id", "comment_id", "reply_id")


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Telemetry is sent to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    The console exporter is off in the test environment.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "test":
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=observability.service_name,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        service_name=observability.service_name,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Add method, path and the forum resource IDs to a request span."""
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    path_params = getattr(request, "path_params", None) or {}
    for name in TRACED_PATH_PARAMS:
        if name in path_params:
            result[name] = path_params[name]
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Headers are not captured so bearer tokens never reach the exporter.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented", title=app.title)
