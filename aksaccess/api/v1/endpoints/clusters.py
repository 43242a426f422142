"""Cluster metadata endpoint."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from aksaccess.api.dependencies import get_aks_support
from aksaccess.core.logging import get_logger
from aksaccess.services.aks import AKSSupport

logger = get_logger(__name__)

router = APIRouter()


@router.get("/cluster", response_model=Dict[str, Any])
def describe_cluster(
    cluster_name: str = Query(..., min_length=1, description="AKS cluster name"),
    resource_group: Optional[str] = Query(
        None, description="Resource group (defaults to AZURE_RESOURCE_GROUP)"
    ),
    subscription_id: Optional[str] = Query(
        None, description="Subscription (defaults to AZURE_SUBSCRIPTION_ID)"
    ),
    aks: AKSSupport = Depends(get_aks_support),
) -> Dict[str, Any]:
    """
    Describe one AKS cluster.

    Returns:
    - name: the requested cluster name
    - contextName: the name on the returned record ("" when absent)
    - cluster: the full ManagedCluster record
    """
    subscription_id = subscription_id or aks.get_subscription_id()
    resource_group = resource_group or aks.get_resource_group()

    cluster = aks.get_cluster_describe(subscription_id, cluster_name, resource_group)

    logger.info(f"Described cluster {cluster_name} in {resource_group}")
    return {
        "name": cluster_name,
        "contextName": aks.get_context_name(cluster),
        "cluster": cluster.as_dict() if hasattr(cluster, "as_dict") else cluster,
    }
