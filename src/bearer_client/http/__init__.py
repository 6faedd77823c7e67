from bearer_client.http.auth import AuthClient, json_field_token, raw_body_token
from bearer_client.http.client import RequestClient
from bearer_client.http.errors import (
    ClientError,
    HttpStatusError,
    MalformedResponseError,
    SerializationError,
    TokenExtractionError,
    TransportError,
)
from bearer_client.http.transport import RequestsTransport, Transport

__all__ = [
    "AuthClient",
    "ClientError",
    "HttpStatusError",
    "MalformedResponseError",
    "RequestClient",
    "RequestsTransport",
    "SerializationError",
    "TokenExtractionError",
    "Transport",
    "TransportError",
    "json_field_token",
    "raw_body_token",
]
