"""
vocode-api — Vocode hosted API client for Python.

Typed REST client for voices, agents, actions, calls and phone numbers,
with a codec for the API's discriminator-tagged records.
"""

from vocode_api.client import Vocode, AsyncVocode
from vocode_api.config import ClientConfig
from vocode_api.codec import VariantCodec, to_wire
from vocode_api.errors import (
    VocodeError,
    AuthError,
    ConnectionError,
    DecodeError,
    EncodeError,
    StatusError,
    APIError,
    ParamErrorDetail,
    RateLimitError,
    UnprocessableEntityError,
    UnexpectedStatusError,
)
from vocode_api.models.account_connection import AccountConnection, AccountConnectionType
from vocode_api.models.action import Action, ActionTrigger, ActionType, TriggerType
from vocode_api.models.agent import Agent, AgentRequest
from vocode_api.models.call import Call, CallRequest
from vocode_api.models.number import Number
from vocode_api.models.paging import Page, PageParams, Sort
from vocode_api.models.prompt import Prompt
from vocode_api.models.telephony import TelephonyMetadata
from vocode_api.models.voice import Voice, VoiceRequest, VoiceType

__version__ = "0.1.0"
__all__ = [
    "Vocode",
    "AsyncVocode",
    "ClientConfig",
    "VariantCodec",
    "to_wire",
    "VocodeError",
    "AuthError",
    "ConnectionError",
    "DecodeError",
    "EncodeError",
    "StatusError",
    "APIError",
    "ParamErrorDetail",
    "RateLimitError",
    "UnprocessableEntityError",
    "UnexpectedStatusError",
    "AccountConnection",
    "AccountConnectionType",
    "Action",
    "ActionTrigger",
    "ActionType",
    "TriggerType",
    "Agent",
    "AgentRequest",
    "Call",
    "CallRequest",
    "Number",
    "Page",
    "PageParams",
    "Sort",
    "Prompt",
    "TelephonyMetadata",
    "Voice",
    "VoiceRequest",
    "VoiceType",
]
