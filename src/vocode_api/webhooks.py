"""
Webhooks REST API.
"""

from typing import Any, Optional

from vocode_api.codec import decode_model, dumps, encode_model
from vocode_api.models.paging import Page, PageParams
from vocode_api.models.webhook import Webhook, WebhookRequest
from vocode_api.resource import ResourceAPI


class WebhooksAPI(ResourceAPI[Webhook]):
    path = "/webhooks"

    def _decode(self, raw: Any) -> Webhook:
        return decode_model(Webhook, raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[Webhook]:
        """List webhooks."""
        return await self._list(paging)

    async def get(self, webhook_id: str) -> Webhook:
        """Get a webhook by id."""
        return await self._get(webhook_id)

    async def create(self, request: WebhookRequest) -> Webhook:
        """Subscribe a URL to call events."""
        return await self._post("create", dumps(encode_model(request)))

    async def update(self, webhook_id: str, request: WebhookRequest) -> Webhook:
        """Change a webhook's URL, method or subscriptions."""
        return await self._post("update", dumps(encode_model(request)), webhook_id)
