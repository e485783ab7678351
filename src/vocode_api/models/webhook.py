"""
Webhook models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from vocode_api.codec import open_enum, reference


class WebhookEvent(str, Enum):
    MESSAGE = "event_message"
    ACTION = "event_action"
    PHONE_CALL_CONNECTED = "event_phone_call_connected"
    PHONE_CALL_ENDED = "event_phone_call_ended"
    PHONE_CALL_DID_NOT_CONNECT = "event_phone_call_did_not_connect"
    TRANSCRIPT = "event_transcript"
    RECORDING = "event_recording"
    HUMAN_DETECTION = "event_human_detection"


class WebhookMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class Webhook(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    subscriptions: Optional[list[open_enum(WebhookEvent)]] = None
    url: Optional[str] = None
    method: Optional[open_enum(WebhookMethod)] = None


class WebhookRequest(BaseModel):
    subscriptions: list[WebhookEvent]
    url: str
    method: WebhookMethod = WebhookMethod.POST


WebhookRef = reference(Webhook)
