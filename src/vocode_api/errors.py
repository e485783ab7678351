"""
Vocode API error types.

Client-side failures (``DecodeError``, ``EncodeError``) are kept apart from
remote rejections (``StatusError`` and subclasses).
"""

from typing import Any, Optional, Union

from pydantic import BaseModel


class VocodeError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class DecodeError(VocodeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)


class EncodeError(VocodeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("encode_error", message, details)


class AuthError(VocodeError):
    def __init__(self, message: str):
        super().__init__("auth_error", message)


class ConnectionError(VocodeError):
    def __init__(self, message: str):
        super().__init__("connection_error", message)


class ParamErrorDetail(BaseModel):
    """One entry of a 400/403 ``{"detail": [...]}`` parameter error body."""
    loc: list[Union[str, int]] = []
    msg: str = ""
    type: str = ""


class StatusError(VocodeError):
    def __init__(self, code: str, message: str, status_code: int, details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[HTTP {self.status_code}] {self.message}"


class APIError(StatusError):
    """Structured rejection returned by the API on 400 and 403."""

    def __init__(
        self,
        message: str,
        status_code: int,
        detail: Union[str, list[ParamErrorDetail], None] = None,
    ):
        super().__init__("api_error", message, status_code)
        self.detail = detail

    @property
    def param_errors(self) -> list[ParamErrorDetail]:
        return self.detail if isinstance(self.detail, list) else []


class RateLimitError(StatusError):
    def __init__(self, message: str = "too many requests", status_code: int = 429):
        super().__init__("rate_limited", message, status_code)


class UnprocessableEntityError(StatusError):
    def __init__(self, message: str = "unprocessable entity", status_code: int = 422):
        super().__init__("unprocessable_entity", message, status_code)


class UnexpectedStatusError(StatusError):
    def __init__(self, status_code: int, body: str = ""):
        super().__init__("unexpected_status", f"unexpected status code: {status_code}", status_code,
                         details={"body": body} if body else None)
