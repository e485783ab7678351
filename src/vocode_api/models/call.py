"""
Call models.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from vocode_api.codec import open_enum
from vocode_api.models.account_connection import AccountConnectionRef
from vocode_api.models.agent import AgentRef
from vocode_api.models.common import TelephonyProvider
from vocode_api.models.telephony import TelephonyMetadataField


class CallStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    ERROR = "error"
    ENDED = "ended"


class CallStage(str, Enum):
    CREATED = "created"
    PICKED_UP = "picked_up"
    TRANSFER_STARTED = "transfer_started"
    TRANSFER_SUCCESSFUL = "transfer_successful"


class CallStageOutcome(str, Enum):
    HUMAN_UNANSWERED = "human_unanswered"
    HUMAN_DISCONNECTED = "human_disconnected"
    CALL_DID_NOT_CONNECT = "call_did_not_connect"
    BOT_DISCONNECTED = "bot_disconnected"
    TRANSFER_UNANSWERED = "transfer_unanswered"
    TRANSFER_DISCONNECTED = "transfer_disconnected"


class HumanDetectionResult(str, Enum):
    HUMAN = "human"
    NO_HUMAN = "no_human"


class OnNoHumanAnswer(str, Enum):
    CONTINUE = "continue"
    HANGUP = "hangup"


class Call(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    status: Optional[open_enum(CallStatus)] = None
    error_message: Optional[str] = None
    recording_available: Optional[bool] = None
    transcript: Optional[str] = None
    human_detection_result: Optional[open_enum(HumanDetectionResult)] = None
    do_not_call_result: Optional[bool] = None
    telephony_id: Optional[str] = None
    stage: Optional[open_enum(CallStage)] = None
    stage_outcome: Optional[open_enum(CallStageOutcome)] = None
    telephony_metadata: Optional[TelephonyMetadataField] = None
    from_number: Optional[str] = None
    to_number: Optional[str] = None
    agent: Optional[AgentRef] = None
    telephony_provider: Optional[open_enum(TelephonyProvider)] = None
    agent_phone_number: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    hipaa_compliant: Optional[bool] = None
    on_no_human_answer: Optional[open_enum(OnNoHumanAnswer)] = None
    context: Optional[dict[str, Any]] = None
    run_do_not_call_detection: Optional[bool] = None
    telephony_account_connection: Optional[AccountConnectionRef] = None
    telephony_params: Optional[dict[str, Any]] = None


class CallRequest(BaseModel):
    """Body of calls create. ``agent`` is an agent id."""
    from_number: str
    to_number: str
    agent: str
    on_no_human_answer: Optional[OnNoHumanAnswer] = None
    run_do_not_call_detection: Optional[bool] = None
    hipaa_compliant: Optional[bool] = None
    context: Optional[dict[str, Any]] = None
