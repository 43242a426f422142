"""Business logic services package."""

from .aks import AKSSupport, create_aks_support
from .clients import (AzureClientFactory, ClientFactory, ManagedClusterGetter,
                      RoleAssignmentLister, RoleDefinitionGetter,
                      load_rbac_api)
from .rbac import get_group_ids_role_bindings

__all__ = [
    # Azure
    "AKSSupport",
    "create_aks_support",
    "AzureClientFactory",
    "ClientFactory",
    "ManagedClusterGetter",
    "RoleAssignmentLister",
    "RoleDefinitionGetter",
    # Kubernetes
    "get_group_ids_role_bindings",
    "load_rbac_api",
]
