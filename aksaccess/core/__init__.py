"""Core utilities package."""

from .exceptions import (AKSSupportError, APIError, ClientConstructionError,
                         ConfigMissingError, CredentialError,
                         NoBindingsFoundError, NotFoundError, PageFetchError,
                         RoleDefinitionLookupError)
from .logging import (LoggerAdapter, get_logger, get_logger_with_context,
                      log_event, setup_logging)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "LoggerAdapter",
    "get_logger_with_context",
    "log_event",
    # Errors
    "AKSSupportError",
    "APIError",
    "ClientConstructionError",
    "ConfigMissingError",
    "CredentialError",
    "NoBindingsFoundError",
    "NotFoundError",
    "PageFetchError",
    "RoleDefinitionLookupError",
]
