"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from deliberate.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation, so
    persistence talks to PostgreSQL. Settings come from the environment.

    Returns:
        Configured DI container
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app so routes can use ``FromDishka``.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)


async def close_di(app: FastAPI) -> None:
    """Close the app's container, disposing the database engine."""
    await app.state.dishka_container.close()
