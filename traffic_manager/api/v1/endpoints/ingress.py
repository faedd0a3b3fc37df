"""Ingress detection endpoints"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from ....models.service import IngressInfo, ResolveIngressRequest, ServiceType
from ....services.ingress_resolver import detect_ingress_behavior, find_services_by_type, resolve_ingress
from ....services.service_lister import KubectlServiceLister, ServiceListerError, get_service_lister

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ingress", tags=["ingress"])


@router.post("/resolve", response_model=List[IngressInfo], status_code=status.HTTP_200_OK)
async def resolve(request: ResolveIngressRequest) -> List[IngressInfo]:
    """
    Resolve ingress for a supplied list of services.
    
    Only services of type LoadBalancer are considered. Services without
    a TCP port are left out of the result.
    """
    load_balancers = find_services_by_type(request.services, ServiceType.LOAD_BALANCER)
    return resolve_ingress(load_balancers)


@router.get("", response_model=List[IngressInfo], status_code=status.HTTP_200_OK)
def detect(lister: KubectlServiceLister = Depends(get_service_lister)) -> List[IngressInfo]:
    """
    Detect ingress for the load balancers of the connected cluster.
    
    **Errors:**
    - 502: Services could not be listed from the cluster
    """
    try:
        return detect_ingress_behavior(lister)
    except ServiceListerError as e:
        logger.error(f"Ingress detection failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not list cluster services: {str(e)}"
        )
