"""Pytest configuration and fixtures"""

import pytest
from typing import Dict
from traffic_manager.models.agent import AgentInfo, Mechanism


@pytest.fixture
def test_mechanisms() -> Dict[str, Mechanism]:
    """Mechanisms advertised by the test agents"""
    return {
        "tcp": Mechanism(name="tcp", product="oss", version="1.0.0"),
        "http": Mechanism(name="http", product="plus", version="1.0.0"),
        "httpv2": Mechanism(name="httpv2", product="plus", version="2.0.0"),
        "grpc": Mechanism(name="grpc", product="plus", version="1.0.0"),
    }


@pytest.fixture
def test_agents(test_mechanisms) -> Dict[str, AgentInfo]:
    """Agents keyed by a short label"""
    m = test_mechanisms
    return {
        "hello": AgentInfo(
            name="hello",
            namespace="default",
            pod_name="hello-6d4f7c9b8-x2kq1",
            pod_ip="10.1.0.12",
            product="oss",
            version="1.0.0",
            mechanisms=[m["tcp"]]
        ),
        "helloPro": AgentInfo(
            name="hello",
            namespace="default",
            pod_name="hello-6d4f7c9b8-p7wz3",
            pod_ip="10.1.0.13",
            product="plus",
            version="1.0.0",
            mechanisms=[m["tcp"], m["http"], m["grpc"]]
        ),
        "demo1": AgentInfo(
            name="demo",
            namespace="default",
            pod_name="demo-5f9c8d7b6-abcde",
            pod_ip="10.1.0.20",
            product="plus",
            version="1.0.0",
            mechanisms=[m["tcp"], m["http"], m["grpc"]]
        ),
        "demo2": AgentInfo(
            name="demo",
            namespace="default",
            pod_name="demo-5f9c8d7b6-fghij",
            pod_ip="10.1.0.21",
            product="plus",
            version="1.0.0",
            mechanisms=[m["grpc"], m["tcp"], m["http"]]
        ),
    }
