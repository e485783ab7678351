"""Basic unit tests for vocode-api package."""

import pytest

from vocode_api import (
    AsyncVocode,
    Vocode,
    ClientConfig,
    VocodeError,
    AuthError,
    ConnectionError,
    DecodeError,
    EncodeError,
    StatusError,
    APIError,
    RateLimitError,
    UnprocessableEntityError,
    UnexpectedStatusError,
    VoiceType,
    __version__,
)
from vocode_api.models.action import ActionType, TriggerType
from vocode_api.models.account_connection import AccountConnectionType
from vocode_api.models.telephony import TelephonyMetadataType


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert Vocode is not None
    assert AsyncVocode is not None


def test_error_hierarchy():
    for cls in (AuthError, ConnectionError, DecodeError, EncodeError, StatusError):
        assert issubclass(cls, VocodeError)
    for cls in (APIError, RateLimitError, UnprocessableEntityError, UnexpectedStatusError):
        assert issubclass(cls, StatusError)
    assert not issubclass(DecodeError, StatusError)
    assert not issubclass(DecodeError, ValueError)


def test_error_attributes():
    err = VocodeError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    decode = DecodeError("unknown voice type: voice_foo", details={"type": "voice_foo"})
    assert decode.code == "decode_error"
    assert decode.details == {"type": "voice_foo"}

    assert EncodeError("x").code == "encode_error"
    assert AuthError("x").code == "auth_error"


def test_status_error_str():
    err = UnexpectedStatusError(502, "bad gateway")
    assert err.status_code == 502
    assert err.code == "unexpected_status"
    assert str(err) == "[HTTP 502] unexpected status code: 502"
    assert err.details == {"body": "bad gateway"}

    assert RateLimitError().status_code == 429
    assert UnprocessableEntityError().status_code == 422


def test_api_error_param_errors():
    assert APIError("nope", 403, "nope").param_errors == []


def test_tag_constants():
    assert VoiceType.AZURE == "voice_azure"
    assert VoiceType.PLAY_HT == "voice_play_ht"
    assert ActionType.TRANSFER_CALL == "action_transfer_call"
    assert TriggerType.FUNCTION_CALL == "action_trigger_function_call"
    assert AccountConnectionType.OPENAI == "account_connection_openai"
    assert TelephonyMetadataType.TWILIO == "telephony_metadata_twilio"


def test_config_from_env():
    cfg = ClientConfig.from_env({"VOCODE_API_KEY": "k", "VOCODE_BASE_URL": "http://localhost:8000"})
    assert cfg.api_key == "k"
    assert cfg.base_url == "http://localhost:8000"
    assert cfg.version == "v1"

    empty = ClientConfig.from_env({})
    assert empty.api_key is None
    assert empty.base_url == "https://api.vocode.dev"


def test_config_is_frozen():
    cfg = ClientConfig(api_key="k")
    with pytest.raises(Exception):
        cfg.api_key = "other"


def test_client_requires_api_key(monkeypatch):
    monkeypatch.delenv("VOCODE_API_KEY", raising=False)
    with pytest.raises(AuthError):
        AsyncVocode()


def test_client_overrides_env(monkeypatch):
    monkeypatch.setenv("VOCODE_API_KEY", "from-env")
    monkeypatch.setenv("VOCODE_BASE_URL", "http://env.example")
    client = AsyncVocode(base_url="http://override.example/")
    assert client.config.api_key == "from-env"
    assert client.http.base_url == "http://override.example/v1"
