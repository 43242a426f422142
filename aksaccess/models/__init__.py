"""Result models package."""

from .roles import BindingScope, RoleAssignmentList, RoleDefinitionList, ScopeKind

__all__ = [
    "BindingScope",
    "RoleAssignmentList",
    "RoleDefinitionList",
    "ScopeKind",
]
