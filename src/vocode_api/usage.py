"""
Usage REST API.
"""

from vocode_api.codec import decode_model
from vocode_api.models.usage import Usage
from vocode_api.transport.http import HttpClient


class UsageAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def get(self) -> Usage:
        """Current plan and minutes used this month."""
        return decode_model(Usage, await self._http.get("/usage"))
