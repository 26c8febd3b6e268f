"""Observability configuration using Logfire.

Services log and trace with logfire directly:

    import logfire

    with logfire.span("question_service.create_question", user_id=str(user_id)):
        ...
        logfire.info("Question created", question_id=str(saved.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from stackit.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Telemetry is only sent to Logfire cloud when a token is configured or
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so; otherwise output stays on
    the console.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "stackit-api",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the application.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization headers carry bearer tokens
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
