"""Agent compatibility endpoints"""

from fastapi import APIRouter, status
from ....models.agent import AgentCompatibilityRequest, AgentCompatibilityResponse
from ....services.agent_compat import check_agents

router = APIRouter(prefix="/agents", tags=["agents"])


@router.post(
    "/compatibility",
    response_model=AgentCompatibilityResponse,
    status_code=status.HTTP_200_OK
)
async def check_compatibility(request: AgentCompatibilityRequest) -> AgentCompatibilityResponse:
    """
    Check whether a group of agents can share an intercept.
    
    **Request Body:**
    - `agents`: Agents believed to back the same workload
    
    **Returns:**
    - `compatible`: False for an empty group or when mechanisms differ
    - `agent_count`: Number of agents checked
    - `mismatched_agents`: Agents whose mechanisms differ from the first agent's
    """
    return check_agents(request.agents)
