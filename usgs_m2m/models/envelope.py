"""Generic response envelope model.

Every client operation returns this envelope:
{ success: bool, data: T | None, error: ErrorInfo, meta: Meta }
Callers must check ``success`` before trusting ``data``.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorInfo(BaseModel):
    """Error details: a synthetic client code (-1) or the API's own code."""

    code: int | None = None
    message: str = ""
    error_type: str | None = None  # Raw errorCode when the API sends a symbolic string


class Meta(BaseModel):
    """Request metadata echoed by the API."""

    request_id: int = 0
    session_id: int = 0
    version: str | None = None


class Envelope(BaseModel, Generic[T]):
    """Normalized envelope for all M2M responses."""

    success: bool = False
    data: T | None = None
    error: ErrorInfo = Field(default_factory=ErrorInfo)
    meta: Meta = Field(default_factory=Meta)
