"""
Prompt models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from vocode_api.codec import open_enum, reference


class FieldType(str, Enum):
    EMAIL = "field_type_email"


class CollectField(BaseModel):
    """A value the agent should collect from the caller."""
    field_type: Optional[open_enum(FieldType)] = None
    label: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class PromptTemplate(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    label: Optional[str] = None
    required_context_keys: Optional[list[str]] = None


class Prompt(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    content: Optional[str] = None
    collect_fields: Optional[list[CollectField]] = None
    context_endpoint: Optional[str] = None
    prompt_template: Optional[reference(PromptTemplate)] = None


class PromptRequest(BaseModel):
    """Body of prompts create/update. ``prompt_template`` is a template id."""
    content: str
    collect_fields: list[CollectField] = []
    context_endpoint: Optional[str] = None
    prompt_template: Optional[str] = None


PromptRef = reference(Prompt)
