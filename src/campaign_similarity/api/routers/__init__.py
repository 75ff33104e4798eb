"""API routers module."""

from . import campaigns, similarity

__all__ = ["campaigns", "similarity"]
