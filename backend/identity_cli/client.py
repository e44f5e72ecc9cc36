"""HTTP client helpers for the identity CLI."""
from __future__ import annotations

import httpx

# Must outlast the server's cascade bound (ApiSettings.resolve_timeout, 30s
# by default) so a slow lookup is reported as a null match, not a CLI timeout.
DEFAULT_TIMEOUT = 60.0


def create_client(
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Instantiate an HTTPX client pointed at the identity API."""

    return httpx.Client(base_url=base_url, timeout=timeout, transport=transport)
