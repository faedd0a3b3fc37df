"""Agent compatibility checks"""

import logging
from typing import Sequence
from ..models.agent import AgentInfo, AgentCompatibilityResponse
from .mechanism_matcher import mechanisms_are_equivalent

logger = logging.getLogger(__name__)


def agents_are_compatible(agents: Sequence[AgentInfo]) -> bool:
    """
    Check whether a group of agents can be intercepted as one unit.
    
    An empty group is not compatible. A single agent is always compatible.
    Otherwise every agent must advertise mechanisms equivalent to the first one.
    """
    if not agents:
        return False
    first = agents[0]
    return all(mechanisms_are_equivalent(first.mechanisms, agent.mechanisms) for agent in agents[1:])


def check_agents(agents: Sequence[AgentInfo]) -> AgentCompatibilityResponse:
    """Run the compatibility gate and report which agents disagree with the first one"""
    compatible = agents_are_compatible(agents)
    mismatched = []
    if not compatible and len(agents) > 1:
        first = agents[0]
        mismatched = [
            agent.pod_name or agent.name
            for agent in agents[1:]
            if not mechanisms_are_equivalent(first.mechanisms, agent.mechanisms)
        ]
        logger.warning(
            f"Agents for '{first.name}' are incompatible: {len(mismatched)} of {len(agents)} "
            f"differ from {first.pod_name or first.name}"
        )
    return AgentCompatibilityResponse(
        compatible=compatible,
        agent_count=len(agents),
        mismatched_agents=mismatched
    )
