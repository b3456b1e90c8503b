"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from projectlink.config import DEFAULT_JWT_SECRET, Settings
from projectlink.interface.api.routes import admin, comments, health, projects, users
from projectlink.interface.error import register_error_handlers
from projectlink.persistence.database import connect_with_retry
from projectlink.util.di.container import create_container, setup_di
from projectlink.util.error import ConfigurationError
from projectlink.util.observability import SERVICE_VERSION, instrument_fastapi


def check_settings(settings: Settings) -> None:
    """Refuse to run production with the default signing secret.

    Raises:
        ConfigurationError: If the JWT secret was not overridden in production
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError(
            "AUTH__JWT_SECRET must be set when ENVIRONMENT=production"
        )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use. Defaults to the production container,
            in which case startup waits for the database to accept connections.

    Raises:
        ConfigurationError: If the settings are unsafe for the environment
    """
    settings = Settings()
    check_settings(settings)

    use_database = container is None
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app_instance: FastAPI):
        if use_database:
            engine = await container.get(AsyncEngine)
            await connect_with_retry(
                engine,
                retries=settings.database.connect_retries,
                backoff_seconds=settings.database.connect_backoff_seconds,
            )
        yield
        await container.close()

    app_instance = FastAPI(
        title="ProjectLink API",
        description="Backend API for ProjectLink - a showcase for student projects with likes, comments, follows and activity feeds",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)

    register_error_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(projects.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(users.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
