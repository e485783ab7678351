"""
Agent models.

Agents embed other resources (prompt, voice, actions, webhook, vector
database, OpenAI account). Each may arrive expanded or as a bare id.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from vocode_api.codec import open_enum, reference
from vocode_api.models.account_connection import AccountConnectionRef
from vocode_api.models.action import ActionRef
from vocode_api.models.common import Language
from vocode_api.models.prompt import PromptRef
from vocode_api.models.vector_database import VectorDatabaseRef
from vocode_api.models.voice import VoiceRef
from vocode_api.models.webhook import WebhookRef


class InterruptSensitivity(str, Enum):
    LOW = "low"
    HIGH = "high"


class EndpointingSensitivity(str, Enum):
    AUTO = "auto"
    RELAXED = "relaxed"
    SENSITIVE = "sensitive"


class IVRNavigationMode(str, Enum):
    DEFAULT = "default"
    OFF = "off"


class Agent(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    prompt: Optional[PromptRef] = None
    language: Optional[open_enum(Language)] = None
    actions: Optional[list[ActionRef]] = None
    voice: Optional[VoiceRef] = None
    initial_message: Optional[str] = Field(None, alias="initial_msg")
    webhook: Optional[WebhookRef] = None
    vector_database: Optional[VectorDatabaseRef] = None
    interrupt_sensitivity: Optional[open_enum(InterruptSensitivity)] = None
    context_endpoint: Optional[str] = Field(None, alias="context_endpint")
    noise_suppression: Optional[bool] = None
    endpointing_sensitivity: Optional[open_enum(EndpointingSensitivity)] = None
    ivr_navigation_mode: Optional[open_enum(IVRNavigationMode)] = None
    conversation_speed: Optional[float] = None
    initial_message_delay: Optional[int] = None
    openai_model_name_override: Optional[str] = None
    ask_if_human_present_on_idle: Optional[bool] = None
    openai_account_connection: Optional[AccountConnectionRef] = None
    run_do_not_call_detection: Optional[bool] = None
    llm_temperature: Optional[float] = None

    model_config = {"populate_by_name": True}


class AgentRequest(BaseModel):
    """Body of agents create/update. Embedded resources are given by id."""
    name: Optional[str] = None
    prompt: str
    language: Optional[Language] = None
    actions: Optional[list[str]] = None
    voice: str
    initial_message: Optional[str] = Field(None, alias="initial_msg")
    webhook: Optional[str] = None
    vector_database: Optional[str] = None
    interrupt_sensitivity: Optional[InterruptSensitivity] = None
    context_endpoint: Optional[str] = Field(None, alias="context_endpint")
    noise_suppression: Optional[bool] = None
    endpointing_sensitivity: Optional[EndpointingSensitivity] = None
    ivr_navigation_mode: Optional[IVRNavigationMode] = None
    conversation_speed: Optional[float] = None
    initial_message_delay: Optional[int] = None
    openai_model_name_override: Optional[str] = None
    ask_if_human_present_on_idle: Optional[bool] = None
    openai_account_connection: Optional[str] = None
    run_do_not_call_detection: Optional[bool] = None
    llm_temperature: Optional[float] = None

    model_config = {"populate_by_name": True}


AgentRef = reference(Agent)
