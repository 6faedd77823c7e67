from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from bearer_client.core.models import HttpMethod, HttpResponse, RequestSpec
from bearer_client.core.result import Err, Ok, Result
from bearer_client.http.auth import AuthClient, validate_url
from bearer_client.http.errors import ClientError, HttpStatusError, SerializationError
from bearer_client.http.parsing import build_header_lines, is_error_status, parse_status_code, to_response
from bearer_client.http.transport import RequestsTransport, Transport
from bearer_client.utils.logging import get_logger


class RequestClient:
    """
    Authenticate-then-request client.
    Every send performs exactly two sequential round trips: the token request, then the target request.
    """

    def __init__(
        self,
        auth_url: str,
        auth: Optional[AuthClient] = None,
        transport: Optional[Transport] = None,
        timeout_s: Optional[float] = 30,
        keep_error_body: bool = False,
    ):
        self.auth_url = validate_url(auth_url)
        self.transport = transport or RequestsTransport()
        self.auth = auth or AuthClient(transport=self.transport, timeout_s=timeout_s)
        self.timeout_s = timeout_s
        self.keep_error_body = keep_error_body
        self.log = get_logger("bearer_client.http")

    def send(
        self,
        url: str,
        payload: Optional[Mapping[str, Any]] = None,
        method: str = HttpMethod.GET.value,
        headers: Optional[Mapping[str, str]] = None,
        timeout_s: Optional[float] = None,
    ) -> HttpResponse:
        """
        Send an authenticated request.

        Args:
            url: Absolute target URL.
            payload: Mapping encoded as the JSON body; empty or None sends no body.
            method: One of GET, PUT, POST, PATCH, DELETE, OPTIONS.
            headers: Caller headers; any Authorization entry is replaced.
            timeout_s: Per-call timeout applied to both round trips.

        Returns:
            The decoded response of the target request.

        Raises:
            TransportError: If either round trip could not be sent.
            HttpStatusError: If either response carries a 4xx/5xx status.
            SerializationError: If the payload cannot be encoded as JSON.
            MalformedResponseError: If a status line cannot be parsed.
            TokenExtractionError: If the auth response yields no token.
        """
        verb = HttpMethod.parse(method)
        validate_url(url)
        timeout = timeout_s if timeout_s is not None else self.timeout_s

        # Payload errors surface before any network I/O.
        body = self._encode_payload(payload) if payload else None

        token = self.auth.fetch_token(self.auth_url, timeout)

        out_headers: Dict[str, str] = {k: v for k, v in (headers or {}).items() if k.lower() != "authorization"}
        out_headers["Authorization"] = f"Bearer {token}"

        self.log.info("%s %s", verb.value, url)
        raw = self.transport.perform_request(verb.value, url, build_header_lines(out_headers), body, timeout)

        code = parse_status_code(raw.header_lines)
        if is_error_status(code):
            self.log.warning("%s %s failed with status %s", verb.value, url, code)
            raise HttpStatusError(code, response=to_response(raw) if self.keep_error_body else None)

        return to_response(raw)

    def send_spec(self, spec: RequestSpec, timeout_s: Optional[float] = None) -> HttpResponse:
        """Send a request described by a RequestSpec."""
        return self.send(spec.url, spec.payload, spec.method, spec.headers, timeout_s)

    def try_send(
        self,
        url: str,
        payload: Optional[Mapping[str, Any]] = None,
        method: str = HttpMethod.GET.value,
        headers: Optional[Mapping[str, str]] = None,
        timeout_s: Optional[float] = None,
    ) -> Result:
        """Like send, but returns Ok/Err instead of raising on request failures."""
        try:
            return Ok(self.send(url, payload, method, headers, timeout_s))
        except ClientError as e:
            return Err(e)

    def _encode_payload(self, payload: Mapping[str, Any]) -> str:
        try:
            return json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as e:
            self.log.warning("Failed to encode payload: %s", e)
            raise SerializationError("Failed to encode payload for Http Request.") from e
