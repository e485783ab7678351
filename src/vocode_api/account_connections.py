"""
Account connections REST API.
"""

from typing import Any, Optional

from vocode_api.models.account_connection import (
    AccountConnection,
    AccountConnectionRequest,
    account_connection_codec,
    account_connection_request_codec,
)
from vocode_api.models.paging import Page, PageParams
from vocode_api.resource import ResourceAPI


class AccountConnectionsAPI(ResourceAPI[AccountConnection]):
    path = "/account_connections"

    def _decode(self, raw: Any) -> AccountConnection:
        return account_connection_codec.decode(raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[AccountConnection]:
        """List account connections."""
        return await self._list(paging)

    async def get(self, connection_id: str) -> AccountConnection:
        """Get an account connection by id."""
        return await self._get(connection_id)

    async def create(self, request: AccountConnectionRequest) -> AccountConnection:
        """Store new provider credentials."""
        return await self._post("create", account_connection_request_codec.encode_json(request))

    async def update(self, connection_id: str, request: AccountConnectionRequest) -> AccountConnection:
        """Replace stored provider credentials."""
        return await self._post("update", account_connection_request_codec.encode_json(request), connection_id)
