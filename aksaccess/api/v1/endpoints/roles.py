"""Azure role assignment and role definition endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from aksaccess.api.dependencies import get_aks_support
from aksaccess.core.logging import get_logger
from aksaccess.services.aks import AKSSupport

logger = get_logger(__name__)

router = APIRouter()

SCOPE_DESCRIPTION = (
    "Subscription, resource group or resource id, "
    "e.g. /subscriptions/{id}/resourceGroups/{rg}"
)


@router.get("/assignments", response_model=Dict[str, Any])
def list_role_assignments(
    scope: str = Query(..., min_length=1, description=SCOPE_DESCRIPTION),
    subscription_id: Optional[str] = Query(None),
    aks: AKSSupport = Depends(get_aks_support),
) -> Dict[str, Any]:
    """All role assignments bound to a scope, in page order."""
    subscription_id = subscription_id or aks.get_subscription_id()
    return aks.list_all_roles_for_scope(subscription_id, scope).to_dict()


@router.get("/definitions", response_model=Dict[str, Any])
def list_role_definitions(
    scope: str = Query(..., min_length=1, description=SCOPE_DESCRIPTION),
    subscription_id: Optional[str] = Query(None),
    aks: AKSSupport = Depends(get_aks_support),
) -> Dict[str, Any]:
    """The role definition of every assignment on a scope, in assignment order."""
    subscription_id = subscription_id or aks.get_subscription_id()
    return aks.list_all_role_definitions(subscription_id, scope).to_dict()
