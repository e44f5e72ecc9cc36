"""Router exports for the identity API."""
from . import health, identify, metadata, similarity

__all__ = ["health", "identify", "metadata", "similarity"]
