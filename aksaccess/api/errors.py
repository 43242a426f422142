"""Translate lookup errors into HTTP responses."""

from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from aksaccess.core.exceptions import (AKSSupportError, APIError,
                                       ClientConstructionError,
                                       ConfigMissingError, CredentialError,
                                       NoBindingsFoundError, NotFoundError,
                                       PageFetchError,
                                       RoleDefinitionLookupError)
from aksaccess.core.logging import get_logger

logger = get_logger(__name__)

ERROR_STATUS: Dict[Type[AKSSupportError], int] = {
    ConfigMissingError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    CredentialError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ClientConstructionError: status.HTTP_503_SERVICE_UNAVAILABLE,
    PageFetchError: status.HTTP_502_BAD_GATEWAY,
    RoleDefinitionLookupError: status.HTTP_502_BAD_GATEWAY,
    NoBindingsFoundError: status.HTTP_502_BAD_GATEWAY,
    APIError: status.HTTP_502_BAD_GATEWAY,
}


def status_for(error: AKSSupportError) -> int:
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS:
            return ERROR_STATUS[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def aks_support_error_handler(
    request: Request, exc: AKSSupportError
) -> JSONResponse:
    status_code = status_for(exc)
    logger.warning(
        f"{request.method} {request.url.path} failed with {type(exc).__name__}: {exc}"
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AKSSupportError, aks_support_error_handler)
