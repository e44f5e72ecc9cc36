"""Shared state container for the identity API."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..resolver.settings import ResolverSettings
from .services import IdentityService
from .settings import ApiSettings


@dataclass(slots=True)
class AppState:
    """Encapsulates the settings and services shared across routers."""

    settings: ApiSettings
    resolver_settings: ResolverSettings
    identity_service: IdentityService

    def __init__(
        self,
        settings: ApiSettings,
        resolver_settings: ResolverSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.resolver_settings = resolver_settings
        self.identity_service = IdentityService(
            resolver_settings,
            resolve_timeout=settings.resolve_timeout,
            transport=transport,
        )
