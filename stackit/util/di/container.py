"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from stackit.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to providers
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a DI container to the FastAPI application.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
