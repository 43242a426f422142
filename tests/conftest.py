"""Pytest configuration and shared fixtures for aksaccess tests."""

import pytest
from fastapi.testclient import TestClient

from aksaccess.api.dependencies import get_aks_support, get_rbac_api
from aksaccess.main import app as application
from aksaccess.services.aks import AKSSupport
from tests.fakes import (CONTRIBUTOR_ID, READER_ID, RESOURCE_GROUP,
                         SUBSCRIPTION_ID, FakeClientFactory,
                         FakeManagedClusterGetter, FakeRbacApi,
                         FakeRoleAssignmentLister, FakeRoleDefinitionGetter,
                         SdkRecord, cluster_role_binding, group,
                         make_assignment, role_binding, service_account,
                         user)

# ============================================================================
# Azure Fixtures
# ============================================================================


@pytest.fixture
def azure_env():
    """Environment with both Azure target variables set."""
    return {
        "AZURE_SUBSCRIPTION_ID": SUBSCRIPTION_ID,
        "AZURE_RESOURCE_GROUP": RESOURCE_GROUP,
    }


@pytest.fixture
def assignment_pages():
    """Three assignments over two pages, two sharing the Reader definition."""
    return [
        [make_assignment("ra-1", READER_ID), make_assignment("ra-2", CONTRIBUTOR_ID)],
        [make_assignment("ra-3", READER_ID)],
    ]


@pytest.fixture
def definitions():
    return {
        READER_ID: SdkRecord(id=READER_ID, role_name="Reader"),
        CONTRIBUTOR_ID: SdkRecord(id=CONTRIBUTOR_ID, role_name="Contributor"),
    }


@pytest.fixture
def fake_clients(assignment_pages, definitions):
    return FakeClientFactory(
        lister=FakeRoleAssignmentLister(assignment_pages),
        getter=FakeRoleDefinitionGetter(definitions),
        cluster_getter=FakeManagedClusterGetter(
            SdkRecord(name="aks-prod", location="westeurope")
        ),
    )


@pytest.fixture
def aks(fake_clients, azure_env):
    """AKSSupport wired to fake clients and a fixed environment."""
    return AKSSupport(clients=fake_clients, environ=azure_env)


# ============================================================================
# Kubernetes Fixtures
# ============================================================================


@pytest.fixture
def rbac_api():
    """Cluster with one ClusterRoleBinding and RoleBindings in two namespaces."""
    return FakeRbacApi(
        cluster_role_bindings=[
            cluster_role_binding("platform-view", [group("g1"), user("u1")]),
        ],
        role_bindings={
            "team-a": [role_binding("team-a-edit", "team-a", [group("g2")])],
            "team-b": [
                role_binding(
                    "team-b-edit",
                    "team-b",
                    [service_account("deployer", "team-b"), group("g1")],
                ),
            ],
        },
    )


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def app(aks, rbac_api):
    """Application with lookup services replaced by fakes."""
    application.dependency_overrides[get_aks_support] = lambda: aks
    application.dependency_overrides[get_rbac_api] = lambda: rbac_api
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def api_client(app):
    return TestClient(app)
