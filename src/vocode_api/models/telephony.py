"""
Provider-specific telephony metadata attached to calls.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, model_validator

from vocode_api.codec import VariantCodec, payload_by_tag, variant_field


class TelephonyMetadataType(str, Enum):
    VONAGE = "telephony_metadata_vonage"
    TWILIO = "telephony_metadata_twilio"


class VonageMetadata(BaseModel):
    pass


class TwilioMetadata(BaseModel):
    call_sid: Optional[str] = None
    call_status: Optional[str] = None
    transfer_call_sid: Optional[str] = None
    transfer_call_status: Optional[str] = None
    conference_sid: Optional[str] = None


TelephonyMetadataPayload = Union[VonageMetadata, TwilioMetadata]

TELEPHONY_METADATA_PAYLOADS = {
    TelephonyMetadataType.VONAGE: VonageMetadata,
    TelephonyMetadataType.TWILIO: TwilioMetadata,
}


class TelephonyMetadata(BaseModel):
    type: Optional[TelephonyMetadataType] = None
    payload: Optional[TelephonyMetadataPayload] = None

    @model_validator(mode="before")
    @classmethod
    def payload_by_type(cls, data: Any) -> Any:
        return payload_by_tag(data, TELEPHONY_METADATA_PAYLOADS)


telephony_metadata_codec = VariantCodec("telephony metadata", TelephonyMetadata, TELEPHONY_METADATA_PAYLOADS)

TelephonyMetadataField = variant_field(telephony_metadata_codec)
