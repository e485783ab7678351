"""
Prompts REST API.
"""

from typing import Any, Optional

from vocode_api.codec import decode_model, dumps, encode_model
from vocode_api.models.paging import Page, PageParams
from vocode_api.models.prompt import Prompt, PromptRequest
from vocode_api.resource import ResourceAPI


class PromptsAPI(ResourceAPI[Prompt]):
    path = "/prompts"

    def _decode(self, raw: Any) -> Prompt:
        return decode_model(Prompt, raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Prompt]:
        return await self._list(paging)

    async def get(self, prompt_id: str) -> Prompt:
        return await self._get(prompt_id)

    async def create(self, request: PromptRequest) -> Prompt:
        return await self._post("create", dumps(encode_model(request)))

    async def update(self, prompt_id: str, request: PromptRequest) -> Prompt:
        return await self._post("update", dumps(encode_model(request)), prompt_id)
