"""
Action models.

An action carries two independent variants: its ``config`` (selected by the
action's own ``type``) and its ``action_trigger`` (selected by the trigger's
``type``). Both are nested under ``config`` on the wire.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, model_validator

from vocode_api.codec import VariantCodec, open_enum, payload_by_tag, variant_field


class TriggerType(str, Enum):
    FUNCTION_CALL = "action_trigger_function_call"
    PHRASE_BASED = "action_trigger_phrase_based"


class PhraseCondition(str, Enum):
    CONTAINS = "phrase_condition_type_contains"


class Phrase(BaseModel):
    phrase: str = ""
    conditions: list[open_enum(PhraseCondition)] = []


class FunctionCallTriggerConfig(BaseModel):
    model_config = {"extra": "allow"}


class PhraseTriggerConfig(BaseModel):
    phrase_triggers: list[Phrase] = []


TriggerPayload = Union[FunctionCallTriggerConfig, PhraseTriggerConfig]

TRIGGER_PAYLOADS = {
    TriggerType.FUNCTION_CALL: FunctionCallTriggerConfig,
    TriggerType.PHRASE_BASED: PhraseTriggerConfig,
}


class ActionTrigger(BaseModel):
    type: Optional[TriggerType] = None
    payload: Optional[TriggerPayload] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, TRIGGER_PAYLOADS)


trigger_codec = VariantCodec("action trigger", ActionTrigger, TRIGGER_PAYLOADS, payload_key="config")

ActionTriggerField = variant_field(trigger_codec)


class ActionType(str, Enum):
    TRANSFER_CALL = "action_transfer_call"
    END_CONVERSATION = "action_end_conversation"
    DTMF = "action_dtmf"
    ADD_TO_CONFERENCE = "action_add_to_conference"
    SET_HOLD = "action_set_hold"
    EXTERNAL = "action_external"


class ProcessingMode(str, Enum):
    MUTED = "muted"


class TransferCallConfig(BaseModel):
    phone_number: Optional[str] = None


class EndConversationConfig(BaseModel):
    model_config = {"extra": "allow"}


class DTMFConfig(BaseModel):
    model_config = {"extra": "allow"}


class AddToConferenceConfig(BaseModel):
    phone_number: Optional[str] = None
    place_primary_on_hold: Optional[bool] = None


class SetHoldConfig(BaseModel):
    model_config = {"extra": "allow"}


class ExternalActionConfig(BaseModel):
    processing_mode: Optional[open_enum(ProcessingMode)] = None
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    input_schema: Optional[dict[str, Any]] = None
    speak_on_send: Optional[bool] = None
    speak_on_receive: Optional[bool] = None


ActionConfig = Union[
    TransferCallConfig,
    EndConversationConfig,
    DTMFConfig,
    AddToConferenceConfig,
    SetHoldConfig,
    ExternalActionConfig,
]

ACTION_PAYLOADS = {
    ActionType.TRANSFER_CALL: TransferCallConfig,
    ActionType.END_CONVERSATION: EndConversationConfig,
    ActionType.DTMF: DTMFConfig,
    ActionType.ADD_TO_CONFERENCE: AddToConferenceConfig,
    ActionType.SET_HOLD: SetHoldConfig,
    ActionType.EXTERNAL: ExternalActionConfig,
}


class Action(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    type: Optional[ActionType] = None
    action_trigger: Optional[ActionTriggerField] = None
    payload: Optional[ActionConfig] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, ACTION_PAYLOADS)


class ActionRequest(BaseModel):
    """Body of actions create/update."""
    type: ActionType
    action_trigger: Optional[ActionTriggerField] = None
    payload: Optional[ActionConfig] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, ACTION_PAYLOADS)


action_codec = VariantCodec("action", Action, ACTION_PAYLOADS, payload_key="config")
action_request_codec = VariantCodec("action", ActionRequest, ACTION_PAYLOADS, payload_key="config")

ActionRef = variant_field(action_codec)
