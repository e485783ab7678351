"""
Calls REST API.
"""

from typing import Any, Optional

from vocode_api.codec import decode_model, dumps, encode_model
from vocode_api.models.call import Call, CallRequest
from vocode_api.models.paging import Page, PageParams
from vocode_api.resource import ResourceAPI


class CallsAPI(ResourceAPI[Call]):
    path = "/calls"

    def _decode(self, raw: Any) -> Call:
        return decode_model(Call, raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Call]:
        """List calls."""
        return await self._list(paging)

    async def get(self, call_id: str) -> Call:
        """Get a call by id."""
        return await self._get(call_id)

    async def create(self, request: CallRequest) -> Call:
        """Place an outbound call."""
        return await self._post("create", dumps(encode_model(request)))

    async def end(self, call_id: str) -> Call:
        """Hang up an in-progress call."""
        return await self._post("end", key=call_id)

    async def recording(self, call_id: str) -> bytes:
        """Download the call recording as raw audio bytes."""
        return await self._http.get_bytes(f"{self.path}/recording", params={"id": call_id})
