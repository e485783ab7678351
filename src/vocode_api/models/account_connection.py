"""
Account connection models: third-party credentials stored with Vocode.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, model_validator

from vocode_api.codec import VariantCodec, payload_by_tag, variant_field


class AccountConnectionType(str, Enum):
    OPENAI = "account_connection_openai"
    TWILIO = "account_connection_twilio"


class OpenAICredentials(BaseModel):
    openai_api_key: Optional[str] = None


class TwilioCredentials(BaseModel):
    twilio_account_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None


class OpenAIAccount(BaseModel):
    credentials: Optional[OpenAICredentials] = None


class TwilioAccount(BaseModel):
    credentials: Optional[TwilioCredentials] = None
    steering_pool: Optional[list[str]] = None
    account_supports_any_caller_id: Optional[bool] = None


AccountConnectionPayload = Union[OpenAIAccount, TwilioAccount]

ACCOUNT_CONNECTION_PAYLOADS = {
    AccountConnectionType.OPENAI: OpenAIAccount,
    AccountConnectionType.TWILIO: TwilioAccount,
}


class AccountConnection(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    type: Optional[AccountConnectionType] = None
    payload: Optional[AccountConnectionPayload] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, ACCOUNT_CONNECTION_PAYLOADS)


class AccountConnectionRequest(BaseModel):
    """Body of account_connections create/update."""
    type: AccountConnectionType
    payload: Optional[AccountConnectionPayload] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, ACCOUNT_CONNECTION_PAYLOADS)


account_connection_codec = VariantCodec("account connection", AccountConnection, ACCOUNT_CONNECTION_PAYLOADS)
account_connection_request_codec = VariantCodec(
    "account connection", AccountConnectionRequest, ACCOUNT_CONNECTION_PAYLOADS,
)

AccountConnectionRef = variant_field(account_connection_codec)
