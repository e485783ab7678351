"""
Phone number models.
"""

from typing import Any, Optional

from pydantic import BaseModel

from vocode_api.codec import open_enum
from vocode_api.models.account_connection import AccountConnectionRef
from vocode_api.models.agent import AgentRef
from vocode_api.models.common import TelephonyProvider


class Number(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    active: Optional[bool] = None
    label: Optional[str] = None
    inbound_agent: Optional[AgentRef] = None
    outbound_only: Optional[bool] = None
    example_context: Optional[dict[str, Any]] = None
    number: Optional[str] = None
    telephony_provider: Optional[open_enum(TelephonyProvider)] = None
    telephony_account_connection: Optional[AccountConnectionRef] = None


class BuyNumberRequest(BaseModel):
    area_code: Optional[str] = None
    telephony_provider: Optional[TelephonyProvider] = None
    telephony_account_connection: Optional[str] = None


class UpdateNumberRequest(BaseModel):
    """``inbound_agent`` is an agent id."""
    label: Optional[str] = None
    inbound_agent: Optional[str] = None
    outbound_only: Optional[bool] = None
    example_context: Optional[dict[str, Any]] = None
