"""FastAPI dependencies providing the lookup services."""

from functools import lru_cache

from kubernetes import client

from aksaccess.services.aks import AKSSupport, create_aks_support
from aksaccess.services.clients import load_rbac_api


@lru_cache(maxsize=1)
def get_aks_support() -> AKSSupport:
    """AKSSupport holds no state between calls, so one instance is shared."""
    return create_aks_support()


def get_rbac_api() -> client.RbacAuthorizationV1Api:
    """Kubernetes RBAC API for the current request."""
    return load_rbac_api()
