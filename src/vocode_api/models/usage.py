"""
Usage models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from vocode_api.codec import open_enum


class PlanType(str, Enum):
    FREE = "plan_free"
    DEVELOPER = "plan_developer"
    ENTERPRISE = "plan_enterprise"
    UNLIMITED = "plan_unlimited"


class Usage(BaseModel):
    user_id: Optional[str] = None
    plan_type: Optional[open_enum(PlanType)] = None
    monthly_usage_minutes: Optional[int] = None
    monthly_usage_limit_minutes: Optional[int] = None
