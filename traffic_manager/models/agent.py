"""Agent data models"""

from pydantic import BaseModel, Field
from typing import List, Optional


class Mechanism(BaseModel):
    """Intercept mechanism advertised by an agent"""
    name: str = Field(..., min_length=1, description="Mechanism name, e.g. 'tcp' or 'http'")
    product: Optional[str] = Field(None, description="Product providing the mechanism")
    version: Optional[str] = Field(None, description="Product version")
    
    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "http",
                "product": "plus",
                "version": "0.2"
            }
        }


class AgentInfo(BaseModel):
    """A running sidecar agent as reported by the agent registry"""
    name: str = Field(..., description="Name of the workload the agent belongs to")
    namespace: Optional[str] = None
    pod_name: Optional[str] = None
    pod_ip: Optional[str] = None
    product: Optional[str] = None
    version: Optional[str] = None
    mechanisms: List[Mechanism] = Field(default_factory=list)
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "hello",
                "namespace": "default",
                "pod_name": "hello-6d4f7c9b8-x2kq1",
                "pod_ip": "10.1.0.12",
                "product": "oss",
                "version": "1.0.0",
                "mechanisms": [{"name": "tcp", "product": "oss", "version": "1.0.0"}]
            }
        }


class AgentCompatibilityRequest(BaseModel):
    """Agents believed to back the same workload"""
    agents: List[AgentInfo] = Field(default_factory=list)


class AgentCompatibilityResponse(BaseModel):
    """Result of an agent compatibility check"""
    compatible: bool
    agent_count: int
    mismatched_agents: List[str] = Field(default_factory=list)
