"""Unit tests for the Azure client adapters and the Kubernetes config loader."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from kubernetes.config.config_exception import ConfigException

from aksaccess.core.exceptions import ClientConstructionError
from aksaccess.services import clients
from aksaccess.services.clients import (AzureManagedClusterGetter,
                                        AzureRoleAssignmentLister,
                                        AzureRoleDefinitionGetter,
                                        load_rbac_api)


@pytest.mark.unit
class TestAzureAdapters:
    def test_lister_leaves_filters_unset(self):
        sdk = MagicMock()
        sdk.role_assignments.list_for_scope.return_value.by_page.return_value = iter(
            [["a"], ["b"]]
        )

        pages = AzureRoleAssignmentLister(sdk).list_for_scope_pages("/subscriptions/s")

        assert list(pages) == [["a"], ["b"]]
        sdk.role_assignments.list_for_scope.assert_called_once_with(
            "/subscriptions/s", filter=None, tenant_id=None, skip_token=None
        )

    def test_definition_getter_uses_get_by_id(self):
        sdk = MagicMock()
        sdk.role_definitions.get_by_id.return_value = SimpleNamespace(role_name="Reader")

        definition = AzureRoleDefinitionGetter(sdk).get_by_id("/rd/1")

        assert definition.role_name == "Reader"
        sdk.role_definitions.get_by_id.assert_called_once_with("/rd/1")

    def test_cluster_getter_argument_order(self):
        sdk = MagicMock()

        AzureManagedClusterGetter(sdk).get("rg-1", "aks-1")

        sdk.managed_clusters.get.assert_called_once_with("rg-1", "aks-1")


@pytest.mark.unit
class TestLoadRbacApi:
    def test_prefers_in_cluster_config(self, monkeypatch):
        load_kube_config = MagicMock()
        monkeypatch.setattr(clients.config, "load_incluster_config", MagicMock())
        monkeypatch.setattr(clients.config, "load_kube_config", load_kube_config)

        api = load_rbac_api()

        assert isinstance(api, clients.client.RbacAuthorizationV1Api)
        load_kube_config.assert_not_called()

    def test_falls_back_to_kubeconfig(self, monkeypatch):
        load_kube_config = MagicMock()
        monkeypatch.setattr(
            clients.config,
            "load_incluster_config",
            MagicMock(side_effect=ConfigException("not in cluster")),
        )
        monkeypatch.setattr(clients.config, "load_kube_config", load_kube_config)

        load_rbac_api("/tmp/kubeconfig")

        load_kube_config.assert_called_once_with(config_file="/tmp/kubeconfig")

    def test_no_configuration_at_all(self, monkeypatch):
        monkeypatch.setattr(
            clients.config,
            "load_incluster_config",
            MagicMock(side_effect=ConfigException("not in cluster")),
        )
        monkeypatch.setattr(
            clients.config,
            "load_kube_config",
            MagicMock(side_effect=ConfigException("no kubeconfig")),
        )

        with pytest.raises(ClientConstructionError, match="no kubeconfig"):
            load_rbac_api()
