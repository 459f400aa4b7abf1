"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deliberate.config import Settings
from deliberate.interface.api.routes import health, questions, solutions, votes
from deliberate.interface.error import register_error_handlers
from deliberate.util.di.container import close_di, create_container, setup_di
from deliberate.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_di(app)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one with mocked persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Deliberate API",
        description=(
            "Backend API for Deliberate - invite-only questions where experts "
            "propose solutions and vote on their pros and cons"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The session cookie must be sent cross-origin by the frontend
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Domain errors become {"error": kind, "detail": message}
    register_error_handlers(app_instance)

    # Setup dependency injection
    # The production container loads settings from the environment
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(solutions.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
