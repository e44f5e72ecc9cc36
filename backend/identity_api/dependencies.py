"""FastAPI dependencies for the identity API."""
from fastapi import Depends, Request

from ..resolver.settings import ResolverSettings
from .services import IdentityService
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_identity_service(app_state: AppState = Depends(get_app_state)) -> IdentityService:
    """Return the metadata lookup service."""
    return app_state.identity_service


def get_resolver_settings(app_state: AppState = Depends(get_app_state)) -> ResolverSettings:
    return app_state.resolver_settings
