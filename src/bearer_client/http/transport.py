from __future__ import annotations

from typing import List, Optional, Protocol

import requests

from bearer_client.core.models import RawResponse
from bearer_client.http.errors import TransportError
from bearer_client.http.parsing import parse_headers
from bearer_client.utils.logging import get_logger

_HTTP_VERSIONS = {9: "HTTP/0.9", 10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}


class Transport(Protocol):
    """Protocol for the blocking primitive that performs one HTTP exchange."""

    def perform_request(
        self,
        method: str,
        url: str,
        header_block: str,
        body: Optional[str],
        timeout_s: Optional[float],
    ) -> RawResponse: ...


class RequestsTransport:
    """Transport using the requests library, with a fresh session per exchange."""

    def __init__(self):
        self.log = get_logger("bearer_client.transport")

    def perform_request(
        self,
        method: str,
        url: str,
        header_block: str,
        body: Optional[str],
        timeout_s: Optional[float],
    ) -> RawResponse:
        """
        Send a single request and return its status line, header lines and body.

        Args:
            method: HTTP verb.
            url: Absolute target URL.
            header_block: CRLF-joined ``name: value`` lines.
            body: Request body, or None to send none at all.
            timeout_s: Seconds to wait on connect/read; None leaves the library default.

        Raises:
            TransportError: If the exchange could not be completed.
        """
        headers = parse_headers(header_block.split("\r\n")) if header_block else {}
        data = body.encode("utf-8") if body is not None else None

        # No pooling: the session and its connections die with this call.
        try:
            with requests.Session() as session:
                r = session.request(
                    method=method,
                    url=url,
                    headers=headers,
                    data=data,
                    timeout=timeout_s,
                )
                text = r.text
        except (requests.RequestException, UnicodeEncodeError) as e:
            # http.client encodes header values as Latin-1.
            self.log.warning("Transport failure for %s %s (%s)", method, url, type(e).__name__)
            raise TransportError(f"Http Request Failed to Send: {e}") from e

        return RawResponse(header_lines=self._header_lines(r), body=text)

    @staticmethod
    def _header_lines(r: requests.Response) -> List[str]:
        version = _HTTP_VERSIONS.get(getattr(r.raw, "version", 11), "HTTP/1.1")
        lines = [f"{version} {r.status_code} {r.reason or ''}".rstrip()]
        lines.extend(f"{name}: {value}" for name, value in r.headers.items())
        return lines
