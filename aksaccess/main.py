"""AKS access posture API."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aksaccess.api.errors import register_exception_handlers
from aksaccess.api.middleware.logging import LoggingMiddleware
from aksaccess.api.v1.endpoints import health
from aksaccess.api.v1.router import api_router
from aksaccess.core.config import settings
from aksaccess.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version}",
        extra={"environment": settings.environment.value},
    )

    yield

    logger.info("Shutting down")


app = FastAPI(
    title=f"{settings.app_name} API",
    version=settings.app_version,
    description="Identity and access-control facts for AKS clusters",
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

if settings.allowed_origin_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origin_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(api_router, prefix=settings.api_prefix)


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(
        "aksaccess.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.value.lower(),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    run()
