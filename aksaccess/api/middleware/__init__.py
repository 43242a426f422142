"""HTTP middleware package."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
