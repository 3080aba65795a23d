"""Production container for the UniFlow API."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from uniflow.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the real Firebase, SendGrid and Postgres providers.

    Settings come from the environment. A provider whose settings are
    missing still builds and reports itself unconfigured, so requests that
    need it fail with 503 instead of the app refusing to start.

    Returns:
        Container backing the FastAPI app
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # Supplies Request to request-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes resolve ``FromDishka`` parameters."""
    setup_dishka(container, app)
