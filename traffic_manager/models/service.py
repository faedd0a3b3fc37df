"""Kubernetes service and ingress models"""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum


class ServiceType(str, Enum):
    """Kubernetes service types"""
    CLUSTER_IP = "ClusterIP"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"
    EXTERNAL_NAME = "ExternalName"


class ServicePort(BaseModel):
    """One port exposed by a service"""
    name: str = ""
    port: int = Field(..., ge=1, le=65535)
    protocol: str = Field("", description="Transport protocol, empty means TCP")


class Service(BaseModel):
    """Read-only view of a Kubernetes service"""
    name: str
    namespace: str
    type: str = ServiceType.CLUSTER_IP.value
    ports: List[ServicePort] = Field(default_factory=list)
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "ambassador",
                "namespace": "ambassador",
                "type": "LoadBalancer",
                "ports": [
                    {"name": "http", "port": 80, "protocol": "TCP"},
                    {"name": "https", "port": 443, "protocol": "TCP"}
                ]
            }
        }


class IngressInfo(BaseModel):
    """Externally reachable endpoint inferred for a service"""
    host: str
    use_tls: bool
    port: int


class ResolveIngressRequest(BaseModel):
    """Services to resolve ingress for"""
    services: List[Service] = Field(default_factory=list)
