from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class HttpMethod(str, Enum):
    """Enumeration of supported HTTP verbs."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: str) -> "HttpMethod":
        """Resolve a verb case-insensitively, rejecting anything unsupported."""
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {value!r}") from None


@dataclass(frozen=True)
class RequestSpec:
    """Specification for an authenticated HTTP request."""

    url: str
    method: str = "GET"
    payload: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RawResponse:
    """Undecoded transport output: status line plus header lines, and the body."""

    header_lines: List[str]
    body: str


@dataclass(frozen=True)
class HttpResponse:
    """HTTP response data."""

    status_code: int
    payload: str
    headers: Dict[str, str] = field(default_factory=dict)
