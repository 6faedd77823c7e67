from __future__ import annotations

import json
from typing import Callable, Optional
from urllib.parse import urlparse

from bearer_client.core.models import HttpMethod, HttpResponse
from bearer_client.http.errors import HttpStatusError, TokenExtractionError
from bearer_client.http.parsing import build_header_lines, is_error_status, parse_status_code, to_response
from bearer_client.http.transport import RequestsTransport, Transport
from bearer_client.utils.logging import get_logger

AUTH_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

TokenExtractor = Callable[[HttpResponse], str]


def raw_body_token(response: HttpResponse) -> str:
    """Treat the whole auth response body as the bearer token."""
    return response.payload.strip()


def json_field_token(field: str) -> TokenExtractor:
    """Build an extractor that reads the token from a JSON envelope such as ``{"token": "..."}``."""

    def extract(response: HttpResponse) -> str:
        try:
            doc = json.loads(response.payload)
        except ValueError as e:
            raise TokenExtractionError("Auth response is not valid JSON") from e
        if not isinstance(doc, dict) or field not in doc:
            raise TokenExtractionError(f"Auth response has no '{field}' field")
        token = doc[field]
        if not isinstance(token, str):
            raise TokenExtractionError(f"Auth response field '{field}' is not a string")
        return token

    return extract


def validate_url(url: str) -> str:
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Expected an absolute http(s) URL, got {url!r}")
    return url


class AuthClient:
    """Obtains a bearer token with a fixed OPTIONS request."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        timeout_s: Optional[float] = 30,
        extract_token: TokenExtractor = raw_body_token,
    ):
        self.transport = transport or RequestsTransport()
        self.timeout_s = timeout_s
        self.extract_token = extract_token
        self.log = get_logger("bearer_client.auth")

    def authenticate(self, url: str, timeout_s: Optional[float] = None) -> HttpResponse:
        """
        Send the auth request and decode its response.

        Args:
            url: Token endpoint.
            timeout_s: Per-call timeout; falls back to the client's.

        Returns:
            The auth response; its payload holds the token material.

        Raises:
            TransportError: If the request could not be sent.
            HttpStatusError: If the endpoint answers 4xx/5xx.
            MalformedResponseError: If the status line cannot be parsed.
        """
        validate_url(url)
        timeout = timeout_s if timeout_s is not None else self.timeout_s

        self.log.debug("Requesting bearer token from %s", url)
        raw = self.transport.perform_request(
            HttpMethod.OPTIONS.value,
            url,
            build_header_lines(AUTH_HEADERS),
            None,
            timeout,
        )

        code = parse_status_code(raw.header_lines)
        if is_error_status(code):
            self.log.warning("Auth request to %s rejected with status %s", url, code)
            raise HttpStatusError(code)
        return to_response(raw)

    def fetch_token(self, url: str, timeout_s: Optional[float] = None) -> str:
        """Authenticate and return the extracted bearer token."""
        response = self.authenticate(url, timeout_s)
        token = self.extract_token(response)
        if not token:
            raise TokenExtractionError(f"Auth response from {url} produced an empty token")
        self.log.debug("Obtained bearer token (%d chars)", len(token))
        return token
