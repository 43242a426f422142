"""Unit tests for result models."""

from types import SimpleNamespace

import pytest

from aksaccess.models.roles import (BindingScope, RoleAssignmentList,
                                    RoleDefinitionList, ScopeKind)


class _SdkModel:
    """Mimics the as_dict() serialization of Azure SDK models."""

    def __init__(self, **fields):
        self.fields = fields

    def as_dict(self):
        return dict(self.fields)


@pytest.mark.unit
class TestRoleLists:
    def test_assignment_list_json_shape(self):
        result = RoleAssignmentList(
            role_assignments=[_SdkModel(name="ra-1", role_definition_id="rd-1")]
        )

        assert result.to_dict() == {
            "roleAssignments": [{"name": "ra-1", "role_definition_id": "rd-1"}]
        }

    def test_definition_list_json_shape(self):
        result = RoleDefinitionList(
            role_definitions=[_SdkModel(role_name="Reader"), {"role_name": "Owner"}]
        )

        assert result.to_dict() == {
            "roleDefinitions": [{"role_name": "Reader"}, {"role_name": "Owner"}]
        }

    def test_empty_lists(self):
        assert RoleAssignmentList().to_dict() == {"roleAssignments": []}
        assert len(RoleDefinitionList()) == 0

    def test_lists_are_immutable(self):
        result = RoleAssignmentList(role_assignments=[SimpleNamespace()])

        with pytest.raises(AttributeError):
            result.role_assignments = []


@pytest.mark.unit
class TestBindingScope:
    def test_cluster_wide(self):
        scope = BindingScope.cluster_wide()

        assert scope.is_cluster_wide
        assert scope.kind == ScopeKind.CLUSTER_WIDE
        assert scope.namespace is None
        assert str(scope) == "cluster-wide"

    def test_namespace(self):
        scope = BindingScope.for_namespace("team-a")

        assert not scope.is_cluster_wide
        assert scope.namespace == "team-a"
        assert str(scope) == "namespace/team-a"

    @pytest.mark.parametrize("namespace", [None, ""])
    def test_missing_namespace_maps_to_cluster_wide(self, namespace):
        assert BindingScope.from_namespace(namespace) == BindingScope.cluster_wide()

    def test_from_namespace_name(self):
        assert BindingScope.from_namespace("kube-system") == BindingScope.for_namespace(
            "kube-system"
        )

    def test_namespace_scope_requires_a_name(self):
        with pytest.raises(ValueError):
            BindingScope.for_namespace("")

    def test_cluster_wide_rejects_a_name(self):
        with pytest.raises(ValueError):
            BindingScope(ScopeKind.CLUSTER_WIDE, "team-a")
