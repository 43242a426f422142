"""Result models for role assignment and RBAC binding lookups."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


def _to_json(item: Any) -> Any:
    """Serialize an Azure SDK model, passing plain values through."""
    if hasattr(item, "as_dict"):
        return item.as_dict()
    return item


@dataclass(frozen=True)
class RoleAssignmentList:
    """Role assignments for a scope, in page arrival order."""

    role_assignments: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.role_assignments)

    def to_dict(self) -> Dict[str, Any]:
        return {"roleAssignments": [_to_json(a) for a in self.role_assignments]}


@dataclass(frozen=True)
class RoleDefinitionList:
    """Role definitions, one per assignment, in assignment order."""

    role_definitions: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.role_definitions)

    def to_dict(self) -> Dict[str, Any]:
        return {"roleDefinitions": [_to_json(d) for d in self.role_definitions]}


class ScopeKind(str, Enum):
    """Where role bindings are collected from."""

    CLUSTER_WIDE = "cluster"
    NAMESPACE = "namespace"


@dataclass(frozen=True)
class BindingScope:
    """Either the whole cluster or a single namespace.

    Cluster-wide collection reads ClusterRoleBindings and the RoleBindings of
    every namespace. Namespace collection reads only that namespace's
    RoleBindings.
    """

    kind: ScopeKind
    namespace: Optional[str] = None

    def __post_init__(self):
        if self.kind == ScopeKind.NAMESPACE and not self.namespace:
            raise ValueError("namespace scope requires a namespace name")
        if self.kind == ScopeKind.CLUSTER_WIDE and self.namespace is not None:
            raise ValueError("cluster-wide scope does not take a namespace")

    @classmethod
    def cluster_wide(cls) -> "BindingScope":
        return cls(ScopeKind.CLUSTER_WIDE)

    @classmethod
    def for_namespace(cls, name: str) -> "BindingScope":
        return cls(ScopeKind.NAMESPACE, name)

    @classmethod
    def from_namespace(cls, namespace: Optional[str]) -> "BindingScope":
        """Map an optional namespace name, treating None or "" as cluster-wide."""
        if namespace:
            return cls.for_namespace(namespace)
        return cls.cluster_wide()

    @property
    def is_cluster_wide(self) -> bool:
        return self.kind == ScopeKind.CLUSTER_WIDE

    def __str__(self) -> str:
        if self.is_cluster_wide:
            return "cluster-wide"
        return f"namespace/{self.namespace}"
