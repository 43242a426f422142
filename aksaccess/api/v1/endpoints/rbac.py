"""Kubernetes RBAC group subject endpoint."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from kubernetes import client

from aksaccess.api.dependencies import get_rbac_api
from aksaccess.core.logging import get_logger
from aksaccess.models.roles import BindingScope
from aksaccess.services.rbac import get_group_ids_role_bindings

logger = get_logger(__name__)

router = APIRouter()


@router.get("/groups", response_model=Dict[str, Any])
def list_group_ids(
    namespace: Optional[str] = Query(
        None, description="Namespace to read RoleBindings from; omit for cluster-wide"
    ),
    rbac_api: client.RbacAuthorizationV1Api = Depends(get_rbac_api),
) -> Dict[str, Any]:
    """Group subjects bound through ClusterRoleBindings and RoleBindings."""
    scope = BindingScope.from_namespace(namespace)
    groups = get_group_ids_role_bindings(rbac_api, scope)

    logger.info(f"Found {len(groups)} group subjects ({scope})")
    return {
        "scope": scope.kind.value,
        "namespace": scope.namespace,
        "groups": groups,
    }
