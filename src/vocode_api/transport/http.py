"""
REST HTTP client for the Vocode API.

Requests go to ``{base_url}/{version}{path}`` with a bearer token. Non-2xx
responses are mapped onto the ``StatusError`` hierarchy.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from vocode_api.codec import loads
from vocode_api.errors import (
    APIError,
    ConnectionError,
    ParamErrorDetail,
    RateLimitError,
    StatusError,
    UnexpectedStatusError,
    UnprocessableEntityError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.vocode.dev"
API_VERSION = "v1"
USER_AGENT = "vocode-api-python/0.1.0"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        version: str = API_VERSION,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._version = version
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/{version}",
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return f"{self._base_url}/{self._version}"

    def set_api_key(self, api_key: str) -> None:
        self._api_key = api_key

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        if has_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> httpx.Response:
        logger.debug("%s %s params=%s", method, path, params)
        try:
            resp = await self._client.request(
                method, path, params=params, content=body, headers=self._headers(body is not None),
            )
        except httpx.TransportError as e:
            raise ConnectionError(f"{method} {path} failed: {e}") from e
        logger.debug("%s %s -> %d", method, path, resp.status_code)
        if not resp.is_success:
            logger.warning("%s %s returned HTTP %d", method, path, resp.status_code)
            raise status_error(resp)
        return resp

    async def get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        resp = await self._send("GET", path, params=params)
        return loads(resp.content)

    async def post(self, path: str, body: Optional[bytes] = None, params: Optional[dict[str, str]] = None) -> Any:
        resp = await self._send("POST", path, params=params, body=body)
        return loads(resp.content)

    async def get_bytes(self, path: str, params: Optional[dict[str, str]] = None) -> bytes:
        resp = await self._send("GET", path, params=params)
        return resp.content

    async def close(self) -> None:
        await self._client.aclose()


def status_error(resp: httpx.Response) -> StatusError:
    """Map a non-2xx response onto its error type."""
    status = resp.status_code
    if status in (400, 403):
        return _api_error(resp)
    if status == 429:
        return RateLimitError()
    if status == 422:
        return UnprocessableEntityError()
    return UnexpectedStatusError(status, resp.text[:200])


def _api_error(resp: httpx.Response) -> APIError:
    status = resp.status_code
    try:
        body = resp.json()
    except ValueError:
        return APIError(resp.text or f"HTTP {status}", status)

    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return APIError(detail, status, detail)
    if isinstance(detail, list) and detail:
        try:
            params = [ParamErrorDetail.model_validate(d) for d in detail]
        except ValidationError:
            return APIError(resp.text, status)
        message = "; ".join(f"{'.'.join(str(part) for part in p.loc)}: {p.msg}" for p in params)
        return APIError(message, status, params)
    return APIError(resp.text, status)
