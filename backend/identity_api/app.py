"""Application factory for the Waypoint identity API."""
import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..resolver.settings import ResolverSettings
from .routers import health, identify, metadata, similarity
from .settings import ApiSettings
from .state import AppState


def create_app(
    settings: ApiSettings | None = None,
    resolver_settings: ResolverSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    ``transport`` replaces the network transport of the catalog client,
    which lets tests serve catalog responses in-process.
    """

    app_state = AppState(
        settings=settings or ApiSettings(),
        resolver_settings=resolver_settings or ResolverSettings(),
        transport=transport,
    )

    app = FastAPI(title="Waypoint Identity API", version="0.1.0")
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    # the browser extension calls the service from its own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        health.router,
        identify.router,
        similarity.router,
        metadata.router,
    ):
        app.include_router(router)

    return app
