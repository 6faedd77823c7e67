from bearer_client.core.models import HttpMethod, HttpResponse, RawResponse, RequestSpec
from bearer_client.core.result import Err, Ok, Result
from bearer_client.http import (
    AuthClient,
    ClientError,
    HttpStatusError,
    MalformedResponseError,
    RequestClient,
    SerializationError,
    TokenExtractionError,
    TransportError,
)

__all__ = [
    "AuthClient",
    "ClientError",
    "Err",
    "HttpMethod",
    "HttpResponse",
    "HttpStatusError",
    "MalformedResponseError",
    "Ok",
    "RawResponse",
    "RequestClient",
    "RequestSpec",
    "Result",
    "SerializationError",
    "TokenExtractionError",
    "TransportError",
]
