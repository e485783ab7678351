"""
Variant codec for discriminator-tagged API records.

A variant record is a pydantic model holding envelope fields (``id``,
``user_id``, the ``type`` tag, ...) plus a single ``payload`` field whose
class is selected by the tag. On the wire the payload is either flattened
into the envelope object or nested under a key such as ``config``.

Decoding:
  1. a bare string is an id-only reference (no tag, no payload);
  2. envelope fields are read from the object, unknown keys ignored;
  3. the tag picks the payload model, which is validated against the object
     (or its ``config`` sub-object);
  4. an unknown or missing tag raises ``DecodeError``.

Encoding refuses records whose tag is unknown or whose payload is missing or
belongs to another tag.
"""

import json
from enum import Enum
from typing import Annotated, Any, Generic, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, PlainSerializer, ValidationError
from pydantic_core import PydanticSerializationError

from vocode_api.errors import DecodeError, EncodeError

R = TypeVar("R", bound=BaseModel)
M = TypeVar("M", bound=BaseModel)
E = TypeVar("E", bound=Enum)

PAYLOAD_FIELD = "payload"

_CODECS: dict[type, "VariantCodec[Any]"] = {}


def dumps(obj: Any) -> bytes:
    """Compact JSON. ``&``, ``<``, ``>`` and non-ASCII text are written literally."""
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def loads(data: Union[str, bytes]) -> Any:
    try:
        return json.loads(data)
    except ValueError as e:
        raise DecodeError(f"malformed JSON: {e}") from e


def _tag(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class VariantCodec(Generic[R]):
    """Decode/encode one variant family.

    ``payloads`` maps each tag to its payload model. ``payload_key`` is None
    for families whose payload fields sit next to the envelope, or the key
    the payload is nested under.
    """

    def __init__(
        self,
        name: str,
        record: type[R],
        payloads: Mapping[Any, type[BaseModel]],
        discriminator: str = "type",
        payload_key: Optional[str] = None,
    ):
        self.name = name
        self.record = record
        self.payloads = {_tag(tag): cls for tag, cls in payloads.items()}
        self.discriminator = discriminator
        self.payload_key = payload_key
        self._envelope = {
            name: info.alias or name
            for name, info in record.model_fields.items()
            if name != PAYLOAD_FIELD
        }
        _CODECS[record] = self

    def tag_for(self, payload: BaseModel) -> str:
        for tag, cls in self.payloads.items():
            if type(payload) is cls:
                return tag
        raise EncodeError(f"{type(payload).__name__} is not a {self.name} payload")

    def decode(self, raw: Any) -> R:
        if isinstance(raw, str):
            return self._decode_id(raw)
        if not isinstance(raw, Mapping):
            raise DecodeError(f"{self.name}: expected an object or an id string, got {type(raw).__name__}")

        tag = raw.get(self.discriminator)
        payload_cls = self.payloads.get(tag) if isinstance(tag, str) else None
        if payload_cls is None:
            raise DecodeError(f"unknown {self.name} type: {tag}", details={self.discriminator: tag})

        source = raw if self.payload_key is None else raw.get(self.payload_key)
        envelope = {key: raw[key] for key in self._envelope.values() if key in raw}
        try:
            payload = payload_cls.model_validate(source if source is not None else {})
            return self.record.model_validate({**envelope, PAYLOAD_FIELD: payload})
        except ValidationError as e:
            raise DecodeError(f"invalid {self.name} ({tag}): {e}") from e

    def decode_json(self, data: Union[str, bytes]) -> R:
        return self.decode(loads(data))

    def encode(self, record: R) -> dict[str, Any]:
        tag = _tag(getattr(record, self.discriminator, None))
        payload_cls = self.payloads.get(tag) if isinstance(tag, str) else None
        if payload_cls is None:
            raise EncodeError(f"unsupported {self.name} type: {tag}")
        payload = getattr(record, PAYLOAD_FIELD, None)
        if payload is None:
            raise EncodeError(f"missing {payload_cls.__name__} payload for {self.name} type: {tag}")
        if not isinstance(payload, payload_cls):
            raise EncodeError(
                f"{self.name} type {tag} requires a {payload_cls.__name__} payload, "
                f"got {type(payload).__name__}"
            )

        try:
            wire = record.model_dump(mode="json", by_alias=True, include=set(self._envelope), exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodeError(f"cannot encode {self.name} ({tag}): {e}") from e
        body = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.payload_key is None:
            wire.update(body)
        else:
            wire[self.payload_key] = body
        return wire

    def encode_json(self, record: R) -> bytes:
        return dumps(self.encode(record))

    def decode_reference(self, value: Any) -> Any:
        if isinstance(value, self.record):
            return value
        return self.decode(value)

    def encode_reference(self, record: R) -> Any:
        if self._is_bare(record):
            return getattr(record, "id")
        return self.encode(record)

    def _decode_id(self, value: str) -> R:
        if "id" not in self.record.model_fields:
            raise DecodeError(f"{self.name} does not accept a bare identifier: {value!r}")
        return self.record.model_validate({"id": value})

    def _is_bare(self, record: R) -> bool:
        return (
            getattr(record, "id", None) is not None
            and getattr(record, self.discriminator, None) is None
            and getattr(record, PAYLOAD_FIELD, None) is None
        )


def payload_by_tag(data: Any, payloads: Mapping[Any, type[BaseModel]], discriminator: str = "type") -> Any:
    """Body of a record's before-validator.

    A ``payload`` given as a mapping is validated with the model its record's
    tag selects, so ``Voice(type=VoiceType.PLAY_HT, payload={...})`` builds a
    ``PlayHtVoice`` whatever the mapping's keys look like. Anything else is
    left for the field's own union.
    """
    if not isinstance(data, Mapping):
        return data
    payload = data.get(PAYLOAD_FIELD)
    tag = _tag(data.get(discriminator))
    if not isinstance(payload, Mapping) or not isinstance(tag, str):
        return data
    for key, cls in payloads.items():
        if _tag(key) == tag:
            return {**data, PAYLOAD_FIELD: cls.model_validate(payload)}
    return data


def open_enum(enum_cls: type[E]) -> Any:
    """Annotated type for a response field whose values the API may extend.

    Known values become ``enum_cls`` members; anything else is kept as the
    plain string.
    """

    def coerce(value: Any) -> Any:
        try:
            return enum_cls(value)
        except ValueError:
            return value

    return Annotated[Union[enum_cls, str], BeforeValidator(coerce)]


def variant_field(codec: VariantCodec[R]) -> Any:
    """Annotated type for a model field holding a record of ``codec``'s family."""
    return Annotated[
        codec.record,
        BeforeValidator(codec.decode_reference),
        PlainSerializer(codec.encode_reference),
    ]


def _id_or_object(value: Any) -> Any:
    if isinstance(value, str):
        return {"id": value}
    return value


def _id_or_dump(value: BaseModel) -> Any:
    if value.model_fields_set == {"id"}:
        return getattr(value, "id")
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)


def reference(model: type[M]) -> Any:
    """Annotated type for a plain resource that may arrive as a bare id."""
    return Annotated[model, BeforeValidator(_id_or_object), PlainSerializer(_id_or_dump)]


def decode_model(model: type[M], raw: Any) -> M:
    """Decode a plain (non-variant) resource."""
    if not isinstance(raw, Mapping):
        raise DecodeError(f"{model.__name__}: expected an object, got {type(raw).__name__}")
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(f"invalid {model.__name__}: {e}") from e


def encode_model(model: BaseModel) -> dict[str, Any]:
    """Encode a plain request or resource; ``None`` fields are omitted."""
    try:
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise EncodeError(f"cannot encode {type(model).__name__}: {e}") from e


def to_wire(model: BaseModel) -> dict[str, Any]:
    """Wire form of any model, variant or plain."""
    codec = _CODECS.get(type(model))
    if codec is not None:
        return codec.encode(model)
    return encode_model(model)
