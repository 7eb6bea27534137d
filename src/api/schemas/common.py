"""
Common API schemas.
"""

from pydantic import BaseModel
from typing import Optional
from enum import Enum


class ResponseStatus(str, Enum):
    """Response status enum."""

    SUCCESS = "success"
    ERROR = "error"


class ErrorResponse(BaseModel):
    """Error response model."""

    status: ResponseStatus = ResponseStatus.ERROR
    error: str
    detail: Optional[str] = None
