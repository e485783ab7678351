"""Client tests against a mocked HTTP transport."""

import json
import logging

import httpx
import pytest

from vocode_api import (
    APIError,
    AsyncVocode,
    ConnectionError,
    DecodeError,
    PageParams,
    RateLimitError,
    Sort,
    UnexpectedStatusError,
    UnprocessableEntityError,
    Vocode,
)
from vocode_api.models.agent import AgentRequest
from vocode_api.models.call import CallRequest, CallStatus
from vocode_api.models.number import BuyNumberRequest, UpdateNumberRequest
from vocode_api.models.voice import RimeVoice, VoiceRequest, VoiceType

API_KEY = "test-key-123"
BASE_URL = "https://api.test"

AZURE_VOICE = {"id": "v1", "user_id": "u1", "type": "voice_azure", "voice_name": "Eva", "pitch": 3, "rate": 10}


class MockAPI:
    """Records requests and answers each with the next queued response."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_client(api: MockAPI) -> AsyncVocode:
    return AsyncVocode(api_key=API_KEY, base_url=BASE_URL, transport=httpx.MockTransport(api))


def ok(body) -> httpx.Response:
    return httpx.Response(200, json=body)


class TestRequests:
    """URL building, headers and bodies"""

    @pytest.mark.asyncio
    async def test_get_by_id(self):
        api = MockAPI(ok(AZURE_VOICE))
        async with make_client(api) as client:
            voice = await client.voices.get("v1")
        assert voice.payload.name == "Eva"
        req = api.last
        assert req.method == "GET"
        assert req.url.path == "/v1/voices"
        assert req.url.params["id"] == "v1"

    @pytest.mark.asyncio
    async def test_headers(self):
        api = MockAPI(ok(AZURE_VOICE), ok(AZURE_VOICE))
        async with make_client(api) as client:
            await client.voices.get("v1")
            get_headers = api.last.headers
            await client.voices.create(VoiceRequest(type=VoiceType.RIME, payload=RimeVoice(speaker="s")))
            post_headers = api.last.headers

        assert get_headers["authorization"] == f"Bearer {API_KEY}"
        assert get_headers["accept"] == "application/json"
        assert get_headers["user-agent"].startswith("vocode-api-python/")
        assert "content-type" not in get_headers
        assert post_headers["content-type"] == "application/json; charset=utf-8"

    @pytest.mark.asyncio
    async def test_list_with_paging(self):
        api = MockAPI(ok({
            "items": [AZURE_VOICE, "v2"],
            "page": 2,
            "size": 2,
            "total": 5,
            "has_more": True,
            "total_is_estimated": False,
        }))
        async with make_client(api) as client:
            page = await client.voices.list(PageParams(page=2, size=2, sort=Sort(column="created_at", descending=True)))

        assert api.last.url.path == "/v1/voices/list"
        assert dict(api.last.url.params) == {
            "page": "2", "size": "2", "sort_column": "created_at", "sort_desc": "true",
        }
        assert len(page) == 2
        assert [v.id for v in page] == ["v1", "v2"]
        assert page.items[1].payload is None
        assert page.total == 5
        assert page.has_more is True

    @pytest.mark.asyncio
    async def test_list_without_paging_sends_no_params(self):
        api = MockAPI(ok({"items": []}))
        async with make_client(api) as client:
            page = await client.agents.list()
        assert api.last.url.path == "/v1/agents/list"
        assert not api.last.url.params
        assert page.items == []
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_create_voice_body(self):
        api = MockAPI(ok({**AZURE_VOICE, "id": "v9", "type": "voice_rime", "speaker": "s"}))
        async with make_client(api) as client:
            voice = await client.voices.create(VoiceRequest(type=VoiceType.RIME, payload=RimeVoice(speaker="s")))
        assert api.last.method == "POST"
        assert api.last.url.path == "/v1/voices/create"
        assert api.last.content == b'{"type":"voice_rime","speaker":"s"}'
        assert voice.id == "v9"
        assert voice.type == VoiceType.RIME

    @pytest.mark.asyncio
    async def test_update_sends_id_param(self):
        api = MockAPI(ok(AZURE_VOICE))
        async with make_client(api) as client:
            await client.voices.update("v1", VoiceRequest(type=VoiceType.RIME, payload=RimeVoice()))
        assert api.last.url.path == "/v1/voices/update"
        assert api.last.url.params["id"] == "v1"

    @pytest.mark.asyncio
    async def test_create_agent_uses_wire_names(self):
        api = MockAPI(ok({"id": "ag1", "voice": "v1", "prompt": "p1", "initial_msg": "Hi there"}))
        async with make_client(api) as client:
            agent = await client.agents.create(AgentRequest(
                prompt="p1", voice="v1", actions=["a1"], initial_message="Hi there", context_endpoint="https://ctx",
            ))
        body = json.loads(api.last.content)
        assert body == {
            "prompt": "p1",
            "actions": ["a1"],
            "voice": "v1",
            "initial_msg": "Hi there",
            "context_endpint": "https://ctx",
        }
        assert agent.voice.id == "v1"
        assert agent.initial_message == "Hi there"

    @pytest.mark.asyncio
    async def test_calls(self):
        call = {"id": "c1", "status": "in_progress", "from_number": "+1555", "to_number": "+1666", "agent": "ag1"}
        api = MockAPI(ok(call), ok({**call, "status": "ended"}), httpx.Response(200, content=b"RIFF\x00\x01"))
        async with make_client(api) as client:
            created = await client.calls.create(CallRequest(from_number="+1555", to_number="+1666", agent="ag1"))
            assert json.loads(api.last.content) == {"from_number": "+1555", "to_number": "+1666", "agent": "ag1"}
            assert created.status == CallStatus.IN_PROGRESS

            ended = await client.calls.end("c1")
            assert api.last.url.path == "/v1/calls/end"
            assert api.last.url.params["id"] == "c1"
            assert api.last.content == b""
            assert ended.status == CallStatus.ENDED

            audio = await client.calls.recording("c1")
            assert api.last.method == "GET"
            assert api.last.url.path == "/v1/calls/recording"
            assert audio == b"RIFF\x00\x01"

    @pytest.mark.asyncio
    async def test_list_page_with_new_status_values(self):
        api = MockAPI(ok({"items": [
            {"id": "c1", "status": "ended"},
            {"id": "c2", "status": "queued", "human_detection_result": "voicemail"},
        ]}))
        async with make_client(api) as client:
            page = await client.calls.list()
        assert [c.status for c in page] == [CallStatus.ENDED, "queued"]
        assert page.items[1].human_detection_result == "voicemail"

    @pytest.mark.asyncio
    async def test_numbers_use_phone_number_param(self):
        number = {"id": "n1", "number": "+15555550100", "label": "main", "inbound_agent": "ag1"}
        api = MockAPI(ok(number), ok(number), ok(number), ok(number))
        async with make_client(api) as client:
            got = await client.numbers.get("+15555550100")
            assert api.last.url.path == "/v1/numbers"
            assert api.last.url.params["phone_number"] == "+15555550100"
            assert got.inbound_agent.id == "ag1"

            await client.numbers.buy(BuyNumberRequest(area_code="415"))
            assert api.last.url.path == "/v1/numbers/buy"
            assert json.loads(api.last.content) == {"area_code": "415"}

            await client.numbers.update("+15555550100", UpdateNumberRequest(label="support"))
            assert api.last.url.path == "/v1/numbers/update"
            assert api.last.url.params["phone_number"] == "+15555550100"

            await client.numbers.cancel("+15555550100")
            assert api.last.url.path == "/v1/numbers/cancel"
            assert api.last.url.params["phone_number"] == "+15555550100"

    @pytest.mark.asyncio
    async def test_usage(self):
        api = MockAPI(ok({"user_id": "u1", "plan_type": "plan_developer", "monthly_usage_minutes": 12}))
        async with make_client(api) as client:
            usage = await client.usage.get()
        assert api.last.url.path == "/v1/usage"
        assert usage.plan_type.value == "plan_developer"
        assert usage.monthly_usage_minutes == 12

    @pytest.mark.asyncio
    async def test_custom_version(self):
        api = MockAPI(ok({"items": []}))
        client = AsyncVocode(api_key=API_KEY, base_url=BASE_URL, version="v2", transport=httpx.MockTransport(api))
        async with client:
            await client.prompts.list()
        assert str(api.last.url) == "https://api.test/v2/prompts/list"


class TestErrors:
    """Status mapping and decode failures"""

    @pytest.mark.asyncio
    async def test_400_with_string_detail(self):
        api = MockAPI(httpx.Response(400, json={"detail": "voice not found"}))
        async with make_client(api) as client:
            with pytest.raises(APIError) as exc:
                await client.voices.get("nope")
        assert exc.value.status_code == 400
        assert exc.value.message == "voice not found"
        assert exc.value.detail == "voice not found"
        assert exc.value.param_errors == []

    @pytest.mark.asyncio
    async def test_403_with_param_errors(self):
        api = MockAPI(httpx.Response(403, json={"detail": [
            {"loc": ["body", "voice"], "msg": "field required", "type": "value_error.missing"},
        ]}))
        async with make_client(api) as client:
            with pytest.raises(APIError) as exc:
                await client.agents.get("ag1")
        assert exc.value.status_code == 403
        [param] = exc.value.param_errors
        assert param.loc == ["body", "voice"]
        assert param.msg == "field required"
        assert "body.voice: field required" in exc.value.message

    @pytest.mark.asyncio
    async def test_400_with_plain_text_body(self):
        api = MockAPI(httpx.Response(400, text="bad request"))
        async with make_client(api) as client:
            with pytest.raises(APIError) as exc:
                await client.calls.get("c1")
        assert exc.value.message == "bad request"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,error", [
        (429, RateLimitError),
        (422, UnprocessableEntityError),
        (500, UnexpectedStatusError),
        (404, UnexpectedStatusError),
    ])
    async def test_status_mapping(self, status, error):
        api = MockAPI(httpx.Response(status, text="oops"))
        async with make_client(api) as client:
            with pytest.raises(error) as exc:
                await client.usage.get()
        assert exc.value.status_code == status

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = AsyncVocode(api_key=API_KEY, base_url=BASE_URL, transport=httpx.MockTransport(fail))
        async with client:
            with pytest.raises(ConnectionError, match="connection refused"):
                await client.voices.get("v1")

    @pytest.mark.asyncio
    async def test_unknown_tag_in_response(self):
        api = MockAPI(ok({"id": "v1", "type": "voice_foo"}))
        async with make_client(api) as client:
            with pytest.raises(DecodeError, match="voice_foo"):
                await client.voices.get("v1")

    @pytest.mark.asyncio
    async def test_malformed_json_response(self):
        api = MockAPI(httpx.Response(200, content=b"{not json"))
        async with make_client(api) as client:
            with pytest.raises(DecodeError):
                await client.usage.get()

    @pytest.mark.asyncio
    async def test_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="vocode_api.transport.http")
        api = MockAPI(ok(AZURE_VOICE), httpx.Response(500, text="oops"))
        async with make_client(api) as client:
            await client.voices.get("v1")
            with pytest.raises(UnexpectedStatusError):
                await client.voices.get("v1")

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "500" in warnings[0].getMessage()
        assert all(API_KEY not in r.getMessage() for r in caplog.records)


class TestSyncClient:
    """Vocode runs the async client on its own loop"""

    def test_sync_calls(self):
        api = MockAPI(ok(AZURE_VOICE), ok({"items": [AZURE_VOICE]}))
        with Vocode(api_key=API_KEY, base_url=BASE_URL, transport=httpx.MockTransport(api)) as client:
            voice = client.voices.get("v1")
            page = client.voices.list()
        assert voice.payload.name == "Eva"
        assert page.items[0].id == "v1"

    def test_sync_errors_propagate(self):
        api = MockAPI(httpx.Response(429))
        client = Vocode(api_key=API_KEY, base_url=BASE_URL, transport=httpx.MockTransport(api))
        try:
            with pytest.raises(RateLimitError):
                client.usage.get()
        finally:
            client.close()
        client.close()
