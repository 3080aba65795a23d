"""Observability configuration using Logfire.

Logfire provides structured logging with OpenTelemetry, distributed tracing
and integrations for FastAPI, SQLAlchemy and httpx.

Usage:
    import logfire

    logfire.info("Profile saved", account_id=account_id)

    with logfire.span("account_linking_service.link_password", email=email):
        ...

Never log passwords or full tokens; use ``SetupToken.redacted()``.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from uniflow.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN environment variable to enable cloud sending
    - If token is present, logs will be sent to Logfire cloud by default
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

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
        "service_name": "uniflow-api",
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
        identity_provider=settings.firebase.is_configured,
        database=settings.database.is_configured,
        email_delivery=settings.email.is_configured,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Request headers are not captured; they carry bearer tokens.

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
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument outbound httpx calls (Firebase, Google OAuth, SendGrid)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
