"""
Request plumbing shared by the per-resource APIs.

Every resource follows the same layout: ``GET {path}/list``, ``GET {path}``
and ``POST {path}/{verb}``, addressing one item with a query parameter.
"""

from typing import Any, Generic, Optional, TypeVar

from vocode_api.models.paging import Page, PageParams, decode_page
from vocode_api.transport.http import HttpClient

T = TypeVar("T")


class ResourceAPI(Generic[T]):
    path = ""
    id_param = "id"

    def __init__(self, http: HttpClient):
        self._http = http

    def _decode(self, raw: Any) -> T:
        raise NotImplementedError

    async def _list(self, paging: Optional[PageParams] = None) -> Page[T]:
        params = paging.encode() if paging is not None else None
        raw = await self._http.get(f"{self.path}/list", params=params)
        return decode_page(raw, self._decode)

    async def _get(self, key: str) -> T:
        raw = await self._http.get(self.path, params={self.id_param: key})
        return self._decode(raw)

    async def _post(self, verb: str, body: Optional[bytes] = None, key: Optional[str] = None) -> T:
        params = {self.id_param: key} if key is not None else None
        raw = await self._http.post(f"{self.path}/{verb}", body=body, params=params)
        return self._decode(raw)
