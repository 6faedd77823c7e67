"""
Tests for the bearer token request and token extraction.
"""

import unittest
from unittest.mock import Mock

from bearer_client.core.models import HttpResponse, RawResponse
from bearer_client.http.auth import AuthClient, json_field_token, raw_body_token
from bearer_client.http.errors import (
    HttpStatusError,
    MalformedResponseError,
    TokenExtractionError,
    TransportError,
)

AUTH_URL = "https://auth.example.com/token"


def _transport(status_line="HTTP/1.1 200 OK", body="tok-123", extra=None):
    transport = Mock()
    transport.perform_request.return_value = RawResponse(
        header_lines=[status_line, "Content-Type: text/plain"] + list(extra or []),
        body=body,
    )
    return transport


class TestAuthenticate(unittest.TestCase):

    def test_sends_options_with_fixed_json_headers_and_no_body(self):
        transport = _transport()
        AuthClient(transport=transport, timeout_s=5).authenticate(AUTH_URL)

        transport.perform_request.assert_called_once_with(
            "OPTIONS",
            AUTH_URL,
            "Content-Type: application/json\r\nAccept: application/json",
            None,
            5,
        )

    def test_returns_decoded_response(self):
        resp = AuthClient(transport=_transport(extra=["X-Auth:  ok "])).authenticate(AUTH_URL)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.payload, "tok-123")
        self.assertEqual(resp.headers["X-Auth"], "ok")

    def test_per_call_timeout_overrides_client_default(self):
        transport = _transport()
        AuthClient(transport=transport, timeout_s=30).authenticate(AUTH_URL, timeout_s=2.5)
        self.assertEqual(transport.perform_request.call_args.args[4], 2.5)

    def test_error_status_raises_with_code(self):
        for code in (400, 401, 500, 599):
            client = AuthClient(transport=_transport(status_line=f"HTTP/1.1 {code} Nope"))
            with self.assertRaises(HttpStatusError) as ctx:
                client.authenticate(AUTH_URL)
            self.assertEqual(ctx.exception.code, code)
            self.assertIsNone(ctx.exception.response)

    def test_transport_error_propagates(self):
        transport = Mock()
        transport.perform_request.side_effect = TransportError("connection refused")
        with self.assertRaises(TransportError):
            AuthClient(transport=transport).authenticate(AUTH_URL)

    def test_malformed_status_line(self):
        with self.assertRaises(MalformedResponseError):
            AuthClient(transport=_transport(status_line="garbage")).authenticate(AUTH_URL)

    def test_rejects_relative_or_empty_url_before_io(self):
        transport = _transport()
        client = AuthClient(transport=transport)
        for url in ("", "/token", "ftp://example.com/token"):
            with self.assertRaises(ValueError):
                client.authenticate(url)
        transport.perform_request.assert_not_called()


class TestTokenExtraction(unittest.TestCase):

    def test_raw_body_is_the_token(self):
        self.assertEqual(raw_body_token(HttpResponse(200, "abc.def\n", {})), "abc.def")

    def test_raw_body_keeps_interior_whitespace(self):
        self.assertEqual(raw_body_token(HttpResponse(200, "  abc def\tghi \r\n", {})), "abc def\tghi")

    def test_json_field_unwraps_envelope(self):
        extract = json_field_token("token")
        self.assertEqual(extract(HttpResponse(200, '{"token": "xyz"}', {})), "xyz")

    def test_json_field_missing(self):
        with self.assertRaises(TokenExtractionError):
            json_field_token("token")(HttpResponse(200, '{"access": "xyz"}', {}))

    def test_json_field_not_json(self):
        with self.assertRaises(TokenExtractionError):
            json_field_token("token")(HttpResponse(200, "plain-token", {}))

    def test_json_field_must_be_a_string(self):
        for body in ('{"token": null}', '{"token": 12345}', '{"token": ["a"]}'):
            with self.assertRaises(TokenExtractionError):
                json_field_token("token")(HttpResponse(200, body, {}))

    def test_null_json_token_never_reaches_target(self):
        transport = _transport(body='{"token": null}')
        client = AuthClient(transport=transport, extract_token=json_field_token("token"))
        with self.assertRaises(TokenExtractionError):
            client.fetch_token(AUTH_URL)

    def test_fetch_token_uses_configured_extractor(self):
        client = AuthClient(transport=_transport(body='{"token": "t-1"}'), extract_token=json_field_token("token"))
        self.assertEqual(client.fetch_token(AUTH_URL), "t-1")

    def test_fetch_token_rejects_empty_token(self):
        with self.assertRaises(TokenExtractionError):
            AuthClient(transport=_transport(body="  ")).fetch_token(AUTH_URL)


if __name__ == "__main__":
    unittest.main()
