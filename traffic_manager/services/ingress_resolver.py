"""Ingress detection for load-balancer services"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple
from ..models.service import IngressInfo, Service, ServicePort, ServiceType

logger = logging.getLogger(__name__)

PortFilter = Callable[[ServicePort], bool]

# Filters in priority order. Each one is tried against every port before the next.
PORT_FILTERS: Tuple[Tuple[str, PortFilter], ...] = (
    ("https-name", lambda p: p.name == "https"),
    ("https-port", lambda p: p.port == 443),
    ("http-name", lambda p: p.name == "http"),
    ("http-port", lambda p: p.port == 80),
    ("any-tcp", lambda p: True),
)


def is_tcp_port(port: ServicePort) -> bool:
    """An unset protocol defaults to TCP"""
    return port.protocol in ("", "TCP")


def _find_tcp_port(ports: Sequence[ServicePort], port_filter: PortFilter) -> Optional[ServicePort]:
    for port in ports:
        if is_tcp_port(port) and port_filter(port):
            return port
    return None


def select_ingress_port(ports: Sequence[ServicePort]) -> Optional[ServicePort]:
    """
    Pick the port most likely to be the public entrypoint of a service.
    
    Returns:
        The selected port, or None if the service exposes no TCP port
    """
    for filter_name, port_filter in PORT_FILTERS:
        port = _find_tcp_port(ports, port_filter)
        if port is not None:
            logger.debug(f"  Port {port.name or '<unnamed>'}:{port.port} matched filter '{filter_name}'")
            return port
    return None


def resolve_ingress(services: Sequence[Service]) -> List[IngressInfo]:
    """
    Build ingress info for load-balancer services.
    
    Services without a TCP port are skipped. TLS is inferred from the
    port number only, so an "https" port on 8443 is reported without TLS.
    
    Args:
        services: Services already filtered to type LoadBalancer
    
    Returns:
        One IngressInfo per service that has a usable port, in input order
    """
    ingress_infos = []
    for service in services:
        port = select_ingress_port(service.ports)
        if port is None:
            logger.debug(f"Skipping service {service.name}.{service.namespace}: no TCP port")
            continue
        ingress_infos.append(IngressInfo(
            host=f"{service.name}.{service.namespace}",
            use_tls=port.port == 443,
            port=port.port
        ))
    return ingress_infos


def find_services_by_type(services: Sequence[Service], service_type: str) -> List[Service]:
    """Filter services to the given Kubernetes service type"""
    if isinstance(service_type, ServiceType):
        service_type = service_type.value
    return [s for s in services if s.type == service_type]


def detect_ingress_behavior(lister) -> List[IngressInfo]:
    """
    List all cluster services and infer ingress for the load balancers.
    
    Args:
        lister: Anything with a list_services() method returning Service objects
    
    Raises:
        ServiceListerError: If the services could not be listed
    """
    load_balancers = find_services_by_type(lister.list_services(), ServiceType.LOAD_BALANCER)
    ingress_infos = resolve_ingress(load_balancers)
    logger.info(f"Detected {len(ingress_infos)} ingress endpoint(s) from {len(load_balancers)} load balancer(s)")
    return ingress_infos
