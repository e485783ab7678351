"""
Voice models: one payload shape per TTS provider, tagged by ``type``.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator

from vocode_api.codec import VariantCodec, open_enum, payload_by_tag, variant_field


class VoiceType(str, Enum):
    AZURE = "voice_azure"
    RIME = "voice_rime"
    ELEVEN_LABS = "voice_eleven_labs"
    PLAY_HT = "voice_play_ht"


class RimeModel(str, Enum):
    MIST = "mist"
    V1 = "v1"


class PlayHtVersion(str, Enum):
    V1 = "1"
    V2 = "2"


class PlayHtQuality(str, Enum):
    FASTER = "faster"
    DRAFT = "draft"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PREMIUM = "premium"


class AzureVoice(BaseModel):
    name: Optional[str] = Field(None, alias="voice_name")
    pitch: Optional[int] = None
    rate: Optional[int] = None

    model_config = {"populate_by_name": True}


class RimeVoice(BaseModel):
    speaker: Optional[str] = None
    speed_alpha: Optional[float] = None
    model_id: Optional[open_enum(RimeModel)] = None

    model_config = {"protected_namespaces": ()}


class ElevenLabsVoice(BaseModel):
    api_key: Optional[str] = None
    model_id: Optional[str] = None
    voice_id: Optional[str] = None
    stability: Optional[float] = None
    similarity_boost: Optional[float] = None
    optimize_streaming_latency: Optional[int] = None
    experimental_input_streaming: Optional[bool] = None

    model_config = {"protected_namespaces": ()}


class PlayHtVoice(BaseModel):
    voice_id: Optional[str] = None
    api_user_id: Optional[str] = None
    api_key: Optional[str] = None
    version: Optional[open_enum(PlayHtVersion)] = None
    quality: Optional[open_enum(PlayHtQuality)] = None
    speed: Optional[float] = None
    temperature: Optional[float] = None
    top_p: Optional[int] = None
    text_guidance: Optional[str] = None
    voice_guidance: Optional[str] = None
    experimental_remove_silence: Optional[bool] = None


VoicePayload = Union[AzureVoice, RimeVoice, ElevenLabsVoice, PlayHtVoice]

VOICE_PAYLOADS = {
    VoiceType.AZURE: AzureVoice,
    VoiceType.RIME: RimeVoice,
    VoiceType.ELEVEN_LABS: ElevenLabsVoice,
    VoiceType.PLAY_HT: PlayHtVoice,
}


class Voice(BaseModel):
    """A stored voice. ``payload`` holds the provider settings selected by ``type``."""
    id: Optional[str] = None
    user_id: Optional[str] = None
    type: Optional[VoiceType] = None
    payload: Optional[VoicePayload] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, VOICE_PAYLOADS)


class VoiceRequest(BaseModel):
    """Body of voices create/update."""
    type: VoiceType
    payload: Optional[VoicePayload] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, VOICE_PAYLOADS)


voice_codec = VariantCodec("voice", Voice, VOICE_PAYLOADS)
voice_request_codec = VariantCodec("voice", VoiceRequest, VOICE_PAYLOADS)

VoiceRef = variant_field(voice_codec)
