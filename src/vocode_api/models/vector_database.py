"""
Vector database models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from vocode_api.codec import open_enum, reference


class VectorDatabaseType(str, Enum):
    PINECONE = "vector_database_pinecone"


class VectorDatabase(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    type: Optional[open_enum(VectorDatabaseType)] = None
    index: Optional[str] = None
    api_key: Optional[str] = None
    api_environment: Optional[str] = None


class VectorDatabaseRequest(BaseModel):
    type: VectorDatabaseType = VectorDatabaseType.PINECONE
    index: str
    api_key: str
    api_environment: Optional[str] = None


VectorDatabaseRef = reference(VectorDatabase)
