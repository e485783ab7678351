"""
Client configuration. The environment is read once, when a client is built.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel

from vocode_api.transport.http import API_VERSION, DEFAULT_BASE_URL

API_KEY_ENV = "VOCODE_API_KEY"
BASE_URL_ENV = "VOCODE_BASE_URL"


class ClientConfig(BaseModel):
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    version: str = API_VERSION
    timeout: float = 30.0

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(API_KEY_ENV):
            values["api_key"] = env[API_KEY_ENV]
        if env.get(BASE_URL_ENV):
            values["base_url"] = env[BASE_URL_ENV]
        return cls(**values)
