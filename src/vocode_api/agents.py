"""
Agents REST API.
"""

from typing import Any, Optional

from vocode_api.codec import decode_model, dumps, encode_model
from vocode_api.models.agent import Agent, AgentRequest
from vocode_api.models.paging import Page, PageParams
from vocode_api.resource import ResourceAPI


class AgentsAPI(ResourceAPI[Agent]):
    path = "/agents"

    def _decode(self, raw: Any) -> Agent:
        return decode_model(Agent, raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Agent]:
        """List agents."""
        return await self._list(paging)

    async def get(self, agent_id: str) -> Agent:
        """Get an agent by id, with embedded resources as returned by the API."""
        return await self._get(agent_id)

    async def create(self, request: AgentRequest) -> Agent:
        """Create an agent."""
        return await self._post("create", dumps(encode_model(request)))

    async def update(self, agent_id: str, request: AgentRequest) -> Agent:
        """Update an agent."""
        return await self._post("update", dumps(encode_model(request)), agent_id)
