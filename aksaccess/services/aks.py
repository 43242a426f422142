"""Azure-side access posture lookups for an AKS cluster."""

import os
from typing import Any, Callable, List, Mapping, Optional

from azure.core.exceptions import (AzureError, ClientAuthenticationError,
                                   ResourceNotFoundError)

from aksaccess.core.config import DEFAULT_AZURE_ENV_VARS, AzureEnvVars
from aksaccess.core.exceptions import (APIError, ClientConstructionError,
                                       ConfigMissingError, CredentialError,
                                       NotFoundError, PageFetchError,
                                       RoleDefinitionLookupError)
from aksaccess.core.logging import get_logger, log_event
from aksaccess.models.roles import RoleAssignmentList, RoleDefinitionList
from aksaccess.services.clients import AzureClientFactory, ClientFactory

logger = get_logger(__name__)


class AKSSupport:
    """Gathers cluster metadata and Azure role facts for an AKS cluster.

    Every call builds its own credential and clients, so one instance can be
    shared between callers without locking. Nothing is cached.
    """

    def __init__(
        self,
        clients: Optional[ClientFactory] = None,
        env_vars: AzureEnvVars = DEFAULT_AZURE_ENV_VARS,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.clients = clients if clients is not None else AzureClientFactory()
        self.env_vars = env_vars
        self._environ = environ

    # ------------------------------------------------------------------
    # Cluster metadata
    # ------------------------------------------------------------------

    def get_cluster_describe(
        self, subscription_id: str, cluster_name: str, resource_group: str
    ) -> Any:
        """Fetch the ManagedCluster record for one AKS cluster."""
        credential = self._credential()
        getter = self._build(
            "managed clusters", self.clients.managed_cluster_getter,
            subscription_id, credential,
        )

        try:
            cluster = getter.get(resource_group, cluster_name)
        except ClientAuthenticationError as e:
            raise CredentialError(
                f"failed to authenticate fetching cluster {cluster_name}: {e}"
            ) from e
        except ResourceNotFoundError as e:
            raise NotFoundError(
                f"cluster {cluster_name} not found in resource group "
                f"{resource_group}: {e}"
            ) from e
        except AzureError as e:
            logger.error(f"Failed to fetch cluster {cluster_name}: {e}")
            raise APIError(f"failed to get cluster {cluster_name}: {e}") from e

        logger.debug(
            f"Fetched cluster {cluster_name}",
            extra={"cluster_name": cluster_name, "subscription_id": subscription_id},
        )
        return cluster

    @staticmethod
    def get_context_name(managed_cluster: Any) -> str:
        """Return the cluster's name, or "" when the record or name is missing."""
        if managed_cluster is not None:
            name = getattr(managed_cluster, "name", None)
            if name is not None:
                return name
        return ""

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    def get_subscription_id(self) -> str:
        return self._lookup_env(self.env_vars.subscription_id, "subscription id")

    def get_resource_group(self) -> str:
        return self._lookup_env(self.env_vars.resource_group, "resource group")

    def _lookup_env(self, variable: str, what: str) -> str:
        environ = os.environ if self._environ is None else self._environ
        if variable in environ:
            return environ[variable]
        raise ConfigMissingError(variable, what)

    # ------------------------------------------------------------------
    # Role assignments and definitions
    # ------------------------------------------------------------------

    def list_all_roles_for_scope(
        self, subscription_id: str, scope: str
    ) -> RoleAssignmentList:
        """
        List all role assignments that apply to a scope.

        Valid scopes are a subscription (``/subscriptions/{id}``), a resource
        group (``/subscriptions/{id}/resourceGroups/{rg}``) or a resource id.
        The scope is passed through unchecked.
        """
        credential = self._credential()
        lister = self._build(
            "role assignments", self.clients.role_assignment_lister,
            subscription_id, credential,
        )

        role_assignments: List[Any] = []
        try:
            for page in lister.list_for_scope_pages(scope):
                role_assignments.extend(page)
        except ClientAuthenticationError as e:
            raise CredentialError(
                f"failed to authenticate paging role assignments for scope "
                f"{scope}: {e}"
            ) from e
        except Exception as e:
            logger.error(f"Paging role assignments for {scope} failed: {e}")
            raise PageFetchError(
                f"failed to advance page for scope {scope}: {e}"
            ) from e

        log_event(
            logger, "info", "role_assignments_listed",
            scope=scope, count=len(role_assignments),
        )
        return RoleAssignmentList(role_assignments=role_assignments)

    def list_all_role_definitions(
        self, subscription_id: str, scope: str
    ) -> RoleDefinitionList:
        """Resolve the role definition of every assignment on a scope.

        One lookup is made per assignment, so definitions shared by several
        assignments appear once per assignment. The first failing stage
        aborts the whole call.
        """
        credential = self._credential()

        try:
            assignments = self.list_all_roles_for_scope(subscription_id, scope)
        except (CredentialError, ClientConstructionError, PageFetchError) as e:
            raise type(e)(
                f"failed to list role assignments for scope {scope}: {e}"
            ) from e

        getter = self._build(
            "role definitions", self.clients.role_definition_getter,
            subscription_id, credential,
        )

        role_definitions: List[Any] = []
        for assignment in assignments.role_assignments:
            role_definition_id = getattr(assignment, "role_definition_id", None)
            if not role_definition_id:
                raise RoleDefinitionLookupError(
                    f"failed to get role definition: assignment "
                    f"{getattr(assignment, 'name', None)} has no role definition id"
                )
            try:
                role_definitions.append(getter.get_by_id(role_definition_id))
            except ClientAuthenticationError as e:
                raise CredentialError(
                    f"failed to authenticate getting role definition "
                    f"{role_definition_id}: {e}"
                ) from e
            except Exception as e:
                logger.error(f"Role definition lookup {role_definition_id} failed: {e}")
                raise RoleDefinitionLookupError(
                    f"failed to get role definition {role_definition_id}: {e}"
                ) from e

        log_event(
            logger, "info", "role_definitions_resolved",
            scope=scope, count=len(role_definitions),
        )
        return RoleDefinitionList(role_definitions=role_definitions)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _credential(self) -> Any:
        try:
            return self.clients.credential()
        except Exception as e:
            logger.error(f"Credential acquisition failed: {e}")
            raise CredentialError(f"failed to obtain a credential: {e}") from e

    def _build(
        self,
        what: str,
        factory: Callable[[str, Any], Any],
        subscription_id: str,
        credential: Any,
    ) -> Any:
        try:
            return factory(subscription_id, credential)
        except Exception as e:
            logger.error(f"Could not create {what} client: {e}")
            raise ClientConstructionError(
                f"failed to create {what} client for subscription "
                f"{subscription_id}: {e}"
            ) from e


def create_aks_support(
    clients: Optional[ClientFactory] = None,
    env_vars: AzureEnvVars = DEFAULT_AZURE_ENV_VARS,
) -> AKSSupport:
    """Create an AKSSupport instance."""
    return AKSSupport(clients=clients, env_vars=env_vars)
