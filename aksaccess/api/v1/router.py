"""API v1 router assembly."""

from fastapi import APIRouter

from aksaccess.api.v1.endpoints import clusters, rbac, roles

api_router = APIRouter()

# Cluster metadata
api_router.include_router(clusters.router, tags=["clusters"])

# Azure role assignments and definitions
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])

# Kubernetes RBAC group subjects
api_router.include_router(rbac.router, prefix="/rbac", tags=["rbac"])
