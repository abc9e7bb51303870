"""Data models for teamcity-client."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class AuthMode(str, Enum):
    """How requests authenticate against the server."""

    guest = "guest"
    basic = "basic"
    api_key = "api_key"


class RequestDescriptor(BaseModel):
    """A single request handed to an HTTP transport."""

    url: str
    method: str = "GET"
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None


@dataclass
class TransportResponse:
    """Response returned by an HTTP transport."""

    data: Any
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
