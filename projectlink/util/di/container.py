"""Container construction and FastAPI hookup."""

from typing import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from projectlink.util.di import Component, build_providers


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the DI container.

    Settings come from the environment when first requested.

    Args:
        mocked: Components to replace with their test implementations.
            Empty for production.
    """
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so ``FromDishka`` parameters resolve."""
    setup_dishka(container, app)
