"""Service layer helpers for external integrations."""

from .identity_service import IdentityService

__all__ = ["IdentityService"]
