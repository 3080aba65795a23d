"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uniflow.config import Settings
from uniflow.interface.api.errors import register_error_handlers
from uniflow.interface.api.routes import email, health, password, users
from uniflow.util.di.container import create_container, setup_di
from uniflow.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Closes APP-scoped resources (database engine)
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="UniFlow API",
        description="Backend API for UniFlow - verification emails, password setup and user profiles",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(email.router)
    app_instance.include_router(password.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
