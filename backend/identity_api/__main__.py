"""CLI entry point for launching the identity API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import ApiSettings


def main() -> None:
    """Start a development server for the identity API."""
    settings = ApiSettings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
