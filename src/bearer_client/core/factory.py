from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bearer_client.config_models import ClientConfig
from bearer_client.core.models import RequestSpec
from bearer_client.http.auth import AuthClient, TokenExtractor, json_field_token, raw_body_token
from bearer_client.http.client import RequestClient
from bearer_client.http.transport import RequestsTransport, Transport


@dataclass(frozen=True)
class BuiltClient:
    client: RequestClient
    request: RequestSpec


class ComponentFactory:
    """
    Factory responsible for wiring dependencies.
    Turns a validated ClientConfig into a ready RequestClient and the request it should send.
    """

    def __init__(self, transport: Optional[Transport] = None):
        self.transport = transport

    def build(self, config: ClientConfig) -> BuiltClient:
        """
        Build the client and request spec described by a configuration.

        Args:
            config: Validated client configuration.

        Returns:
            The wired client and the configured request.
        """
        transport = self._transport()
        auth = AuthClient(
            transport=transport,
            timeout_s=config.timeout_s,
            extract_token=self._token_extractor(config),
        )
        client = RequestClient(
            auth_url=config.auth.url,
            auth=auth,
            transport=transport,
            timeout_s=config.timeout_s,
            keep_error_body=config.keep_error_body,
        )
        request = RequestSpec(
            url=config.request.url,
            method=config.request.method,
            payload=dict(config.request.payload),
            headers=dict(config.request.headers),
        )
        return BuiltClient(client=client, request=request)

    # ---------- Builders (private) ----------

    def _transport(self) -> Transport:
        """Create the transport."""
        return self.transport or RequestsTransport()

    def _token_extractor(self, config: ClientConfig) -> TokenExtractor:
        """Pick how the token is read from the auth response."""
        if config.auth.token_field:
            return json_field_token(config.auth.token_field)
        return raw_body_token
