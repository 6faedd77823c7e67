from __future__ import annotations

import json
import sys

from bearer_client.config_models import load_and_validate_config
from bearer_client.core.factory import ComponentFactory
from bearer_client.core.models import HttpResponse
from bearer_client.http.errors import ClientError
from bearer_client.utils.logging import setup_logging


def print_response(response: HttpResponse) -> None:
    """Print status code, payload and headers of a response."""
    print(f"Status Code: {response.status_code}")
    print(f"Payload: {json.dumps(response.payload)}")
    print(f"Headers: {json.dumps(response.headers)}")


def run(config_path: str) -> int:
    """Send the configured request once and print the result."""
    config = load_and_validate_config(config_path)
    built = ComponentFactory().build(config)

    try:
        response = built.client.send_spec(built.request)
    except ClientError as e:
        print(f"Request failed: {e}")
        return 1

    print_response(response)
    return 0


def main() -> None:
    """Main entry point for the bearer client demo."""
    if len(sys.argv) < 2:
        print("Usage: bearer-client configs/client.yaml")
        raise SystemExit(2)

    setup_logging("configs/logging.yaml")
    raise SystemExit(run(sys.argv[1]))


if __name__ == "__main__":
    main()
