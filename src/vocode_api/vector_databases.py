"""
Vector databases REST API.
"""

from typing import Any, Optional

from vocode_api.codec import decode_model, dumps, encode_model
from vocode_api.models.paging import Page, PageParams
from vocode_api.models.vector_database import VectorDatabase, VectorDatabaseRequest
from vocode_api.resource import ResourceAPI


class VectorDatabasesAPI(ResourceAPI[VectorDatabase]):
    path = "/vector_databases"

    def _decode(self, raw: Any) -> VectorDatabase:
        return decode_model(VectorDatabase, raw)

    async def list(self, paging: Optional[PageParams] = None) -> Page[VectorDatabase]:
        return await self._list(paging)

    async def get(self, vector_database_id: str) -> VectorDatabase:
        return await self._get(vector_database_id)

    async def create(self, request: VectorDatabaseRequest) -> VectorDatabase:
        return await self._post("create", dumps(encode_model(request)))

    async def update(self, vector_database_id: str, request: VectorDatabaseRequest) -> VectorDatabase:
        return await self._post("update", dumps(encode_model(request)), vector_database_id)
