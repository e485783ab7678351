"""
Actions REST API.
"""

from typing import Any, Optional

from vocode_api.models.action import Action, ActionRequest, action_codec, action_request_codec
from vocode_api.models.paging import Page, PageParams
from vocode_api.resource import ResourceAPI


class ActionsAPI(ResourceAPI[Action]):
    path = "/actions"

    def _decode(self, raw: Any) -> Action:
        return action_codec.decode(raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Action]:
        return await self._list(paging)

    async def get(self, action_id: str) -> Action:
        return await self._get(action_id)

    async def create(self, request: ActionRequest) -> Action:
        return await self._post("create", action_request_codec.encode_json(request))

    async def update(self, action_id: str, request: ActionRequest) -> Action:
        return await self._post("update", action_request_codec.encode_json(request), action_id)
