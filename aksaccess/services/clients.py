"""Client construction for Azure management APIs and the Kubernetes RBAC API.

The services only talk to the narrow protocols below, so tests can swap in
fakes without a credentialed backend.
"""

from typing import Any, Iterable, Iterator, Optional, Protocol

from azure.identity import DefaultAzureCredential
from azure.mgmt.authorization import AuthorizationManagementClient
from azure.mgmt.containerservice import ContainerServiceClient
from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from aksaccess.core.exceptions import ClientConstructionError
from aksaccess.core.logging import get_logger

logger = get_logger(__name__)


class RoleAssignmentLister(Protocol):
    """Pages through the role assignments bound to a scope."""

    def list_for_scope_pages(self, scope: str) -> Iterator[Iterable[Any]]:
        ...


class RoleDefinitionGetter(Protocol):
    """Resolves a role definition from its fully qualified id."""

    def get_by_id(self, role_definition_id: str) -> Any:
        ...


class ManagedClusterGetter(Protocol):
    """Fetches one managed cluster record."""

    def get(self, resource_group: str, cluster_name: str) -> Any:
        ...


class ClientFactory(Protocol):
    """Builds credentials and the clients the services depend on."""

    def credential(self) -> Any:
        ...

    def role_assignment_lister(
        self, subscription_id: str, credential: Any
    ) -> RoleAssignmentLister:
        ...

    def role_definition_getter(
        self, subscription_id: str, credential: Any
    ) -> RoleDefinitionGetter:
        ...

    def managed_cluster_getter(
        self, subscription_id: str, credential: Any
    ) -> ManagedClusterGetter:
        ...


class AzureRoleAssignmentLister:
    """RoleAssignmentLister backed by AuthorizationManagementClient."""

    def __init__(self, authorization_client: AuthorizationManagementClient):
        self._client = authorization_client

    def list_for_scope_pages(self, scope: str) -> Iterator[Iterable[Any]]:
        pager = self._client.role_assignments.list_for_scope(
            scope, filter=None, tenant_id=None, skip_token=None
        )
        return pager.by_page()


class AzureRoleDefinitionGetter:
    """RoleDefinitionGetter backed by AuthorizationManagementClient."""

    def __init__(self, authorization_client: AuthorizationManagementClient):
        self._client = authorization_client

    def get_by_id(self, role_definition_id: str) -> Any:
        return self._client.role_definitions.get_by_id(role_definition_id)


class AzureManagedClusterGetter:
    """ManagedClusterGetter backed by ContainerServiceClient."""

    def __init__(self, container_client: ContainerServiceClient):
        self._client = container_client

    def get(self, resource_group: str, cluster_name: str) -> Any:
        return self._client.managed_clusters.get(resource_group, cluster_name)


class AzureClientFactory:
    """Default factory using DefaultAzureCredential and the ARM SDK clients."""

    def credential(self) -> DefaultAzureCredential:
        return DefaultAzureCredential()

    def role_assignment_lister(
        self, subscription_id: str, credential: Any
    ) -> AzureRoleAssignmentLister:
        return AzureRoleAssignmentLister(
            AuthorizationManagementClient(credential, subscription_id)
        )

    def role_definition_getter(
        self, subscription_id: str, credential: Any
    ) -> AzureRoleDefinitionGetter:
        return AzureRoleDefinitionGetter(
            AuthorizationManagementClient(credential, subscription_id)
        )

    def managed_cluster_getter(
        self, subscription_id: str, credential: Any
    ) -> AzureManagedClusterGetter:
        return AzureManagedClusterGetter(
            ContainerServiceClient(credential, subscription_id)
        )


def load_rbac_api(kubeconfig: Optional[str] = None) -> client.RbacAuthorizationV1Api:
    """Build an RBAC API client from in-cluster config, falling back to kubeconfig."""
    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except ConfigException:
        try:
            config.load_kube_config(config_file=kubeconfig)
            logger.info("Loaded local Kubernetes config")
        except (ConfigException, OSError) as e:
            raise ClientConstructionError(
                f"failed to load Kubernetes configuration: {e}"
            ) from e

    return client.RbacAuthorizationV1Api()
