"""Kubernetes service listing via kubectl"""

import json
import logging
import subprocess
from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from ..models.service import Service, ServicePort
from ..core.config import settings

logger = logging.getLogger(__name__)


class ServiceListerError(Exception):
    """Raised when services cannot be listed from the cluster"""


class KubectlServiceLister:
    """
    Lists cluster services by shelling out to kubectl.
    
    Requires kubectl in PATH (or at kubectl_path) and RBAC permission to
    list services in all namespaces.
    """
    
    def __init__(
        self,
        kubectl_path: str = "kubectl",
        context: Optional[str] = None,
        timeout: int = 10
    ):
        self.kubectl_path = kubectl_path
        self.context = context
        self.timeout = timeout
    
    def _command(self) -> List[str]:
        cmd = [self.kubectl_path]
        if self.context:
            cmd += ["--context", self.context]
        cmd += ["get", "services", "--all-namespaces", "-o", "json"]
        return cmd
    
    def list_services(self) -> List[Service]:
        """
        Get every service in the cluster.
        
        Returns:
            Services in the order kubectl reports them
        
        Raises:
            ServiceListerError: If kubectl fails or its output cannot be parsed
        """
        cmd = self._command()
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False, timeout=self.timeout)
        except FileNotFoundError:
            raise ServiceListerError(f"kubectl not found at '{self.kubectl_path}'")
        except subprocess.TimeoutExpired:
            raise ServiceListerError(f"Timed out after {self.timeout}s listing services")
        
        if result.returncode != 0:
            raise ServiceListerError(f"kubectl exited with {result.returncode}: {result.stderr.strip()}")
        
        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ServiceListerError(f"Invalid JSON from kubectl at line {e.lineno}, col {e.colno}: {e.msg}")
        
        services = parse_service_list(payload)
        logger.info(f"Listed {len(services)} service(s) from cluster")
        return services


def parse_service_list(payload: Dict[str, Any]) -> List[Service]:
    """Convert a kubectl ServiceList document into Service models"""
    services = []
    try:
        for item in payload.get("items") or []:
            metadata = item.get("metadata") or {}
            spec = item.get("spec") or {}
            ports = [
                ServicePort(
                    name=p.get("name") or "",
                    port=p["port"],
                    protocol=p.get("protocol") or ""
                )
                for p in spec.get("ports") or []
            ]
            services.append(Service(
                name=metadata["name"],
                namespace=metadata.get("namespace") or "default",
                type=spec.get("type") or "ClusterIP",
                ports=ports
            ))
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise ServiceListerError(f"Malformed service list: {e}")
    return services


# Singleton instance
_service_lister = KubectlServiceLister(
    kubectl_path=settings.kubectl_path,
    context=settings.kubectl_context,
    timeout=settings.kubectl_timeout_seconds
)


def get_service_lister() -> KubectlServiceLister:
    """Get the service lister instance"""
    return _service_lister
