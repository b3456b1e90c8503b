"""Logfire setup and instrumentation.

Domain code logs through logfire directly:

    logfire.info("Project liked", project_id=str(project.id))

    with logfire.span("project_service.like", project_id=str(project_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from projectlink.config import Settings

SERVICE_NAME = "projectlink-api"
SERVICE_VERSION = "0.1.0"

# Attribute names whose values logfire must redact
_SCRUBBED = ["jwt_secret", "viewer_key", "x-forwarded-for"]


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running process.

    Data is sent to Logfire cloud only when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    says so or, if unset, when a token is configured. The console always
    gets output.
    """
    send = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_SCRUBBED),
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
        debug=settings.debug,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Called for every request span; keep it to cheap lookups
    extra = {"method": request.method, "path": request.url.path}
    if request.client:
        extra["client_host"] = request.client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request of ``app``.

    Headers are not captured since they carry bearer tokens.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement executed through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
