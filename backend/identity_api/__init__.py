"""HTTP service exposing the identity resolution engine."""

from .app import create_app

__all__ = ["create_app"]
