"""API v1 endpoints package."""

from . import clusters, health, rbac, roles

__all__ = ["clusters", "health", "rbac", "roles"]
