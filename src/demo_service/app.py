"""FastAPI application factory with async lifespan for the demo service."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version

from fastapi import FastAPI

from demo_service import __version__
from demo_service.api.root import router as root_router
from demo_service.config import Settings, get_settings

logger = logging.getLogger(__name__)


def dependency_version(distribution: str = "pydash") -> str:
    """Return the installed version of ``distribution``."""
    return version(distribution)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Read the pydash version once and announce the listening address.

    The version is kept on ``app.state.library_version`` so every request
    reports the same value for the lifetime of the process. The address comes
    from ``app.state.settings``, which the server entry point sets to the
    socket it actually bound.
    """
    settings: Settings = app.state.settings

    app.state.library_version = dependency_version()
    logger.info("Demo app listening at http://localhost:%d", settings.port)

    yield

    logger.info("Demo app shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``settings`` defaults to the environment (``DEMO_*``). Uvicorn can call
    the factory directly; keep ``DEMO_PORT`` in step with ``--port`` so the
    startup line names the right address:
        DEMO_PORT=8080 uvicorn demo_service.app:create_app --factory --port 8080
    """
    app = FastAPI(
        title="Demo Service",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings or get_settings()

    app.include_router(root_router)

    return app
