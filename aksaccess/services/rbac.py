"""Group subjects referenced by Kubernetes RoleBindings and ClusterRoleBindings."""

from typing import Any, Iterable, List

from kubernetes import client

from aksaccess.core.exceptions import NoBindingsFoundError
from aksaccess.core.logging import get_logger_with_context
from aksaccess.models.roles import BindingScope

GROUP_KIND = "Group"

CLUSTER_TIER = "cluster"
NAMESPACE_TIER = "namespace"


def _group_names(bindings: Iterable[Any]) -> List[str]:
    """Names of Group subjects, in binding order then subject order."""
    names = []
    for binding in bindings:
        for subject in binding.subjects or []:
            if subject.kind == GROUP_KIND:
                names.append(subject.name)
    return names


def get_group_ids_role_bindings(
    rbac_api: client.RbacAuthorizationV1Api, scope: BindingScope
) -> List[str]:
    """
    Collect the group ids bound through RBAC at the given scope.

    Cluster-wide scope lists ClusterRoleBindings first, then RoleBindings
    across all namespaces. Namespace scope lists only that namespace's
    RoleBindings. Groups bound more than once are repeated.
    """
    log = get_logger_with_context(__name__, namespace=scope.namespace)
    group_ids: List[str] = []

    if scope.is_cluster_wide:
        try:
            cluster_role_bindings = rbac_api.list_cluster_role_binding()
        except Exception as e:
            log.error(f"Failed to list ClusterRoleBindings: {e}")
            raise NoBindingsFoundError(
                f"no clusterrolebindings are found inside the cluster: {e}",
                CLUSTER_TIER,
            ) from e
        group_ids.extend(_group_names(cluster_role_bindings.items))

    try:
        if scope.is_cluster_wide:
            role_bindings = rbac_api.list_role_binding_for_all_namespaces()
        else:
            role_bindings = rbac_api.list_namespaced_role_binding(scope.namespace)
    except Exception as e:
        where = "any" if scope.is_cluster_wide else f"the {scope.namespace}"
        log.error(f"Failed to list RoleBindings ({scope}): {e}")
        raise NoBindingsFoundError(
            f"no rolebindings are found in {where} namespace: {e}", NAMESPACE_TIER
        ) from e
    group_ids.extend(_group_names(role_bindings.items))

    log.debug(f"Collected {len(group_ids)} group subjects ({scope})")
    return group_ids
