from __future__ import annotations

from typing import Dict, Mapping, Sequence

from bearer_client.core.models import HttpResponse, RawResponse
from bearer_client.http.errors import MalformedResponseError


def _sanitize(text: str) -> str:
    # CR/LF/NUL would let a value start a new header line.
    return text.replace("\r", "").replace("\n", "").replace("\x00", "")


def build_header_lines(headers: Mapping[str, str]) -> str:
    """Serialize headers as ``name: value`` lines joined by CRLF."""
    return "\r\n".join(f"{_sanitize(str(name))}: {_sanitize(str(value))}" for name, value in headers.items())


def parse_status_code(header_lines: Sequence[str]) -> int:
    """
    Read the numeric status code from the status line.

    Args:
        header_lines: Raw response lines, status line first.

    Returns:
        The status code, e.g. 404 for ``"HTTP/1.1 404 Not Found"``.

    Raises:
        MalformedResponseError: If the status line is absent or its second token is not a code in 100-599.
    """
    if not header_lines:
        raise MalformedResponseError("Response has no status line")

    parts = header_lines[0].split()
    if len(parts) < 2 or not (parts[1].isascii() and parts[1].isdigit()):
        raise MalformedResponseError(f"Cannot parse status line: {header_lines[0]!r}")

    code = int(parts[1])
    if not 100 <= code <= 599:
        raise MalformedResponseError(f"Status code out of range: {code}")
    return code


def parse_headers(header_lines: Sequence[str]) -> Dict[str, str]:
    """Decode ``Name: Value`` lines into a mapping; later duplicates overwrite earlier ones."""
    headers: Dict[str, str] = {}
    for line in header_lines:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        headers[name.strip()] = value.strip()
    return headers


def is_error_status(code: int) -> bool:
    return 400 <= code < 600


def to_response(raw: RawResponse) -> HttpResponse:
    """Decode a raw transport result into an HttpResponse."""
    return HttpResponse(
        status_code=parse_status_code(raw.header_lines),
        payload=raw.body,
        headers=parse_headers(raw.header_lines),
    )
