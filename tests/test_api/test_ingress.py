"""Tests for ingress endpoints"""

import pytest
from fastapi.testclient import TestClient
from traffic_manager.main import app
from traffic_manager.models.service import Service, ServicePort
from traffic_manager.services.service_lister import ServiceListerError, get_service_lister

client = TestClient(app)


class StubLister:
    """Lister returning a fixed snapshot or raising"""
    
    def __init__(self, services=None, error=None):
        self.services = services or []
        self.error = error
    
    def list_services(self):
        if self.error:
            raise self.error
        return self.services


@pytest.fixture(autouse=True)
def clear_overrides():
    """Reset dependency overrides after each test"""
    yield
    app.dependency_overrides.clear()


class TestResolveIngress:
    """Tests for POST /v1/ingress/resolve"""
    
    def test_resolve(self):
        """Test resolving a mix of services"""
        response = client.post("/v1/ingress/resolve", json={
            "services": [
                {"name": "edge", "namespace": "ambassador", "type": "LoadBalancer",
                 "ports": [{"name": "https", "port": 8443, "protocol": "TCP"}]},
                {"name": "internal", "namespace": "default", "type": "ClusterIP",
                 "ports": [{"name": "http", "port": 80}]},
                {"name": "dns", "namespace": "kube-system", "type": "LoadBalancer",
                 "ports": [{"name": "dns", "port": 53, "protocol": "UDP"}]}
            ]
        })
        
        assert response.status_code == 200
        assert response.json() == [{"host": "edge.ambassador", "use_tls": False, "port": 8443}]
    
    def test_resolve_empty(self):
        """Test no services"""
        response = client.post("/v1/ingress/resolve", json={"services": []})
        assert response.status_code == 200
        assert response.json() == []
    
    def test_invalid_port(self):
        """Test that out-of-range ports are rejected"""
        response = client.post("/v1/ingress/resolve", json={
            "services": [{"name": "x", "namespace": "y", "type": "LoadBalancer", "ports": [{"port": 70000}]}]
        })
        assert response.status_code == 422


class TestDetectIngress:
    """Tests for GET /v1/ingress"""
    
    def test_detect(self):
        """Test detection from the cluster lister"""
        app.dependency_overrides[get_service_lister] = lambda: StubLister([
            Service(name="web", namespace="shop", type="LoadBalancer",
                    ports=[ServicePort(name="web", port=443, protocol="TCP")])
        ])
        
        response = client.get("/v1/ingress")
        
        assert response.status_code == 200
        assert response.json() == [{"host": "web.shop", "use_tls": True, "port": 443}]
    
    def test_lister_failure(self):
        """Test that lister errors become 502"""
        app.dependency_overrides[get_service_lister] = lambda: StubLister(
            error=ServiceListerError("kubectl not found at 'kubectl'")
        )
        
        response = client.get("/v1/ingress")
        
        assert response.status_code == 502
        assert "kubectl not found" in response.json()["detail"]
