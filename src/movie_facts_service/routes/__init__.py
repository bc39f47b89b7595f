"""API route modules."""

from . import health, skill

__all__ = ["health", "skill"]
