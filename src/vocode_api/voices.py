"""
Voices REST API.
"""

from typing import Any, Optional

from vocode_api.models.paging import Page, PageParams
from vocode_api.models.voice import Voice, VoiceRequest, voice_codec, voice_request_codec
from vocode_api.resource import ResourceAPI


class VoicesAPI(ResourceAPI[Voice]):
    path = "/voices"

    def _decode(self, raw: Any) -> Voice:
        return voice_codec.decode(raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Voice]:
        """List voices."""
        return await self._list(paging)

    async def get(self, voice_id: str) -> Voice:
        """Get a voice by id."""
        return await self._get(voice_id)

    async def create(self, request: VoiceRequest) -> Voice:
        """Create a voice. Raises EncodeError if the payload does not match ``request.type``."""
        return await self._post("create", voice_request_codec.encode_json(request))

    async def update(self, voice_id: str, request: VoiceRequest) -> Voice:
        """Replace a voice's settings."""
        return await self._post("update", voice_request_codec.encode_json(request), voice_id)
