"""
Phone numbers REST API. Numbers are addressed by the number itself.
"""

from typing import Any, Optional

from vocode_api.codec import decode_model, dumps, encode_model
from vocode_api.models.number import BuyNumberRequest, Number, UpdateNumberRequest
from vocode_api.models.paging import Page, PageParams
from vocode_api.resource import ResourceAPI


class NumbersAPI(ResourceAPI[Number]):
    path = "/numbers"
    id_param = "phone_number"

    def _decode(self, raw: Any) -> Number:
        return decode_model(Number, raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Number]:
        """List owned numbers."""
        return await self._list(paging)

    async def get(self, phone_number: str) -> Number:
        """Get a number."""
        return await self._get(phone_number)

    async def buy(self, request: BuyNumberRequest) -> Number:
        """Buy a new number."""
        return await self._post("buy", dumps(encode_model(request)))

    async def update(self, phone_number: str, request: UpdateNumberRequest) -> Number:
        """Update a number's label, inbound agent or context."""
        return await self._post("update", dumps(encode_model(request)), phone_number)

    async def cancel(self, phone_number: str) -> Number:
        """Release a number."""
        return await self._post("cancel", key=phone_number)
